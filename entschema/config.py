"""
Configuration for entschema.

Settings are read from environment variables prefixed with ENTSCHEMA_,
so a schema build can be tuned without touching code:

    ENTSCHEMA_LOG_LEVEL=DEBUG
    ENTSCHEMA_DEFAULT_PERMISSION_PROFILE=restricted

Invariants:
    - All settings have sensible defaults
    - Settings are read once per Model; a built Model never re-reads them
"""

from __future__ import annotations

import logging

import json_log_formatter
from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import DEFAULT_PERMISSION_PROFILE


class ModelSettings(BaseSettings):
    """Settings for building and validating a model."""

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text", description="'text' or 'json'")

    # Name of the profile returned by Model.default_permission_profile
    default_permission_profile: str = Field(default=DEFAULT_PERMISSION_PROFILE)

    # Reference fields pointing at a root entity without a key field
    warn_on_missing_key_field: bool = Field(default=True)

    model_config = {"env_prefix": "ENTSCHEMA_"}


def configure_logging(settings: ModelSettings | None = None) -> None:
    """Configure root logging from settings.

    Args:
        settings: Settings to use (read from the environment if omitted)
    """
    settings = settings or ModelSettings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        formatter = json_log_formatter.JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    # graphql-core is quiet, but keep it from inheriting DEBUG
    logging.getLogger("graphql").setLevel(logging.WARNING)
