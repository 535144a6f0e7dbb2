"""
Domain model for entschema.

This module provides the validated, cross-referenced type graph:
- Input declarations (ModelConfig and friends)
- Type definitions (RootEntityType, ChildEntityType, ...)
- The Model registry with lookups, namespaces, profiles and relations
- Validation messages

Invariants:
    - A Model never changes after construction, except for the one-time
      extension of reference field descriptions
    - Schema errors are reported through Model.validate(), never raised
"""

from .built_in_types import BUILT_IN_TYPE_NAMES, built_in_types
from .config import (
    AccessKind,
    EnumTypeConfig,
    FieldConfig,
    ModelConfig,
    ObjectTypeConfig,
    PermissionConfig,
    PermissionProfileConfig,
    PermissionsConfig,
    ScalarTypeConfig,
    TypeKind,
    type_config_from_dict,
)
from .field import Field
from .model import Model
from .namespace import Namespace
from .permission_profile import DEFAULT_PERMISSION_PROFILE, Permission, PermissionProfile
from .relation import Relation, RelationCardinality
from .types import (
    ChildEntityType,
    EntityExtensionType,
    EnumType,
    InvalidType,
    RootEntityType,
    ScalarType,
    ValueObjectType,
)
from .validation import MessageLocation, Severity, ValidationContext, ValidationMessage, ValidationResult

__all__ = [
    # Config
    "AccessKind",
    "EnumTypeConfig",
    "FieldConfig",
    "ModelConfig",
    "ObjectTypeConfig",
    "PermissionConfig",
    "PermissionProfileConfig",
    "PermissionsConfig",
    "ScalarTypeConfig",
    "TypeKind",
    "type_config_from_dict",
    # Model
    "Model",
    "Field",
    "Namespace",
    "Relation",
    "RelationCardinality",
    "DEFAULT_PERMISSION_PROFILE",
    "Permission",
    "PermissionProfile",
    "BUILT_IN_TYPE_NAMES",
    "built_in_types",
    # Types
    "ChildEntityType",
    "EntityExtensionType",
    "EnumType",
    "InvalidType",
    "RootEntityType",
    "ScalarType",
    "ValueObjectType",
    # Validation
    "MessageLocation",
    "Severity",
    "ValidationContext",
    "ValidationMessage",
    "ValidationResult",
]
