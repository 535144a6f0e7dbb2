"""
entschema - domain model registry and GraphQL input type derivation.

Build a Model from declarations, validate it, and derive create input
types from the matching GraphQL document:

    >>> from entschema import Model, ModelConfig
    >>> model = Model(ModelConfig.from_dict(declarations))
    >>> result = model.validate()
    >>> if result.has_errors():
    ...     ...
    >>> ast = AddCreateEntityInputTypesTransformer().transform(graphql.parse(sdl))
"""

__version__ = "0.1.0"

from .config import ModelSettings, configure_logging
from .errors import (
    DescriptionAlreadyExtendedError,
    EntSchemaError,
    ListOfListsError,
    UndefinedFieldError,
    UndefinedNamespaceError,
    UndefinedPermissionProfileError,
    UndefinedTypeError,
    WrongTypeKindError,
)
from .field_roles import FieldRole, classify_field
from .model import Model, ModelConfig, TypeKind, ValidationResult
from .schema import AddCreateEntityInputTypesTransformer

__all__ = [
    "__version__",
    "Model",
    "ModelConfig",
    "ModelSettings",
    "TypeKind",
    "ValidationResult",
    "configure_logging",
    "FieldRole",
    "classify_field",
    "AddCreateEntityInputTypesTransformer",
    # Errors
    "EntSchemaError",
    "UndefinedTypeError",
    "WrongTypeKindError",
    "UndefinedPermissionProfileError",
    "UndefinedNamespaceError",
    "UndefinedFieldError",
    "DescriptionAlreadyExtendedError",
    "ListOfListsError",
]
