"""
Input configuration for building a Model.

These are the declarations a loader hands to the registry. They are plain
frozen dataclasses so the registry can rely on them never changing:
- TypeKind: the closed set of type kinds
- FieldConfig: a field of an object type (see field())
- ObjectTypeConfig / EnumTypeConfig / ScalarTypeConfig: type declarations
- PermissionConfig / PermissionProfileConfig: access rule bundles
- ModelConfig: everything needed to build a Model

Invariants:
    - Configs are immutable once created
    - Type declarations may reference each other in any order
    - Every object kind shares ObjectTypeConfig; kind-specific fields are
      ignored for kinds they do not apply to

Example:
    >>> config = ModelConfig(
    ...     types=(
    ...         ObjectTypeConfig(
    ...             kind=TypeKind.ROOT_ENTITY,
    ...             name="User",
    ...             fields=(FieldConfig("email", "String"),),
    ...             key_field_name="email",
    ...         ),
    ...     ),
    ... )
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from typing import Any, Mapping, Optional, Union

from .validation import MessageLocation, ValidationMessage


class TypeKind(Enum):
    """Kinds of types a model can contain."""

    ROOT_ENTITY = "rootEntity"
    CHILD_ENTITY = "childEntity"
    ENTITY_EXTENSION = "entityExtension"
    VALUE_OBJECT = "valueObject"
    SCALAR = "scalar"
    ENUM = "enum"

    @property
    def is_object_kind(self) -> bool:
        """Whether types of this kind own fields."""
        return self not in (TypeKind.SCALAR, TypeKind.ENUM)

    @property
    def label(self) -> str:
        """Human-readable name, as used in messages."""
        return {
            TypeKind.ROOT_ENTITY: "root entity type",
            TypeKind.CHILD_ENTITY: "child entity type",
            TypeKind.ENTITY_EXTENSION: "entity extension type",
            TypeKind.VALUE_OBJECT: "value object type",
            TypeKind.SCALAR: "scalar type",
            TypeKind.ENUM: "enum type",
        }[self]

    @classmethod
    def from_str(cls, value: str) -> TypeKind:
        """Convert string representation to TypeKind.

        Raises:
            ValueError: If value is not a valid type kind
        """
        for kind in cls:
            if kind.value == value:
                return kind
        valid = [k.value for k in cls]
        raise ValueError(f"Invalid type kind '{value}'. Valid kinds: {valid}")


class AccessKind(Enum):
    """Access granted by a permission."""

    READ = "read"
    READ_WRITE = "readWrite"


def _location(data: Mapping[str, Any]) -> Optional[MessageLocation]:
    location = data.get("name_location")
    return MessageLocation.from_dict(location) if location else None


@dataclass(frozen=True)
class FieldConfig:
    """Declaration of a single field.

    Attributes:
        name: Field name, unique within its type
        type_name: Name of the field's type
        is_list: Whether the field holds a list of values
        is_reference: Field points at a root entity by its key
        is_relation: Field is a relation between root entities
        inverse_of_field_name: For relations, the field on the other side
            this field is the inverse of
        description: Human-readable description
        name_location: Where the field name was declared
    """

    name: str
    type_name: str
    is_list: bool = False
    is_reference: bool = False
    is_relation: bool = False
    inverse_of_field_name: Optional[str] = None
    description: str = ""
    name_location: Optional[MessageLocation] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FieldConfig:
        """Create from dictionary representation."""
        return cls(
            name=data["name"],
            type_name=data["type_name"],
            is_list=data.get("is_list", False),
            is_reference=data.get("is_reference", False),
            is_relation=data.get("is_relation", False),
            inverse_of_field_name=data.get("inverse_of_field_name"),
            description=data.get("description", ""),
            name_location=_location(data),
        )


def field(
    name: str,
    type_name: str,
    *,
    is_list: bool = False,
    is_reference: bool = False,
    is_relation: bool = False,
    inverse_of: Optional[str] = None,
    description: str = "",
) -> FieldConfig:
    """Convenience function to create a FieldConfig.

    Example:
        >>> title = field("title", "String")
        >>> author = field("author", "User", is_reference=True)
        >>> tags = field("tags", "Tag", is_list=True, is_relation=True)
    """
    return FieldConfig(
        name=name,
        type_name=type_name,
        is_list=is_list,
        is_reference=is_reference,
        is_relation=is_relation,
        inverse_of_field_name=inverse_of,
        description=description,
    )


@dataclass(frozen=True)
class PermissionsConfig:
    """Permission settings of a root entity.

    Attributes:
        permission_profile_name: Profile to apply; the default profile if None
    """

    permission_profile_name: Optional[str] = None


@dataclass(frozen=True)
class ObjectTypeConfig:
    """Declaration of a root entity, child entity, entity extension or value object.

    Attributes:
        kind: One of the four object kinds
        name: Type name
        fields: Ordered field declarations
        description: Human-readable description
        namespace_path: Namespace segments (root entities only)
        key_field_name: Name of the key field (root entities only)
        permissions: Permission settings (root entities only)
        name_location: Where the type name was declared
    """

    kind: TypeKind
    name: str
    fields: tuple[FieldConfig, ...] = dataclass_field(default_factory=tuple)
    description: str = ""
    namespace_path: tuple[str, ...] = dataclass_field(default_factory=tuple)
    key_field_name: Optional[str] = None
    permissions: PermissionsConfig = dataclass_field(default_factory=PermissionsConfig)
    name_location: Optional[MessageLocation] = None

    def __post_init__(self) -> None:
        if not self.kind.is_object_kind:
            raise ValueError(f"ObjectTypeConfig cannot have kind {self.kind.value}")
        # Paths are compared as tuples when building the namespace tree
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "namespace_path", tuple(self.namespace_path))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ObjectTypeConfig:
        """Create from dictionary representation."""
        permissions = data.get("permissions") or {}
        return cls(
            kind=TypeKind.from_str(data["kind"]),
            name=data["name"],
            fields=tuple(FieldConfig.from_dict(f) for f in data.get("fields", [])),
            description=data.get("description", ""),
            namespace_path=tuple(data.get("namespace_path", [])),
            key_field_name=data.get("key_field_name"),
            permissions=PermissionsConfig(
                permission_profile_name=permissions.get("permission_profile_name"),
            ),
            name_location=_location(data),
        )


@dataclass(frozen=True)
class EnumTypeConfig:
    """Declaration of an enum type."""

    name: str
    values: tuple[str, ...] = dataclass_field(default_factory=tuple)
    description: str = ""
    name_location: Optional[MessageLocation] = None

    @property
    def kind(self) -> TypeKind:
        return TypeKind.ENUM

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EnumTypeConfig:
        """Create from dictionary representation."""
        return cls(
            name=data["name"],
            values=tuple(data.get("values", [])),
            description=data.get("description", ""),
            name_location=_location(data),
        )


@dataclass(frozen=True)
class ScalarTypeConfig:
    """Declaration of a custom scalar type."""

    name: str
    description: str = ""
    name_location: Optional[MessageLocation] = None

    @property
    def kind(self) -> TypeKind:
        return TypeKind.SCALAR

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScalarTypeConfig:
        """Create from dictionary representation."""
        return cls(
            name=data["name"],
            description=data.get("description", ""),
            name_location=_location(data),
        )


TypeConfig = Union[ObjectTypeConfig, EnumTypeConfig, ScalarTypeConfig]


def type_config_from_dict(data: Mapping[str, Any]) -> TypeConfig:
    """Create a type declaration, dispatching on its 'kind' key.

    Raises:
        ValueError: If the kind is missing or unknown
    """
    kind = TypeKind.from_str(data.get("kind", ""))
    if kind == TypeKind.ENUM:
        return EnumTypeConfig.from_dict(data)
    if kind == TypeKind.SCALAR:
        return ScalarTypeConfig.from_dict(data)
    return ObjectTypeConfig.from_dict(data)


@dataclass(frozen=True)
class PermissionConfig:
    """A single access rule.

    Attributes:
        roles: Roles this rule applies to
        access: Read or read-write
        restrict_to_access_groups: Limit the rule to these access groups
    """

    roles: tuple[str, ...]
    access: AccessKind = AccessKind.READ
    restrict_to_access_groups: Optional[tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PermissionConfig:
        """Create from dictionary representation."""
        groups = data.get("restrict_to_access_groups")
        return cls(
            roles=tuple(data.get("roles", [])),
            access=AccessKind(data.get("access", AccessKind.READ.value)),
            restrict_to_access_groups=tuple(groups) if groups is not None else None,
        )


@dataclass(frozen=True)
class PermissionProfileConfig:
    """A named bundle of access rules (the name is the mapping key)."""

    permissions: tuple[PermissionConfig, ...] = dataclass_field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PermissionProfileConfig:
        """Create from dictionary representation."""
        return cls(
            permissions=tuple(PermissionConfig.from_dict(p) for p in data.get("permissions", [])),
        )


@dataclass(frozen=True)
class ModelConfig:
    """Everything needed to build a Model.

    Attributes:
        types: Ordered type declarations
        permission_profiles: Profile name -> profile declaration
        validation_messages: Diagnostics from an earlier parse stage,
            passed through validation unchanged
    """

    types: tuple[TypeConfig, ...] = dataclass_field(default_factory=tuple)
    permission_profiles: Mapping[str, PermissionProfileConfig] = dataclass_field(default_factory=dict)
    validation_messages: tuple[ValidationMessage, ...] = dataclass_field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModelConfig:
        """Create from dictionary representation.

        Example:
            >>> ModelConfig.from_dict({
            ...     "types": [{"kind": "rootEntity", "name": "User", "fields": []}],
            ...     "permission_profiles": {"default": {"permissions": []}},
            ... })
        """
        return cls(
            types=tuple(type_config_from_dict(t) for t in data.get("types", [])),
            permission_profiles={
                name: PermissionProfileConfig.from_dict(profile)
                for name, profile in (data.get("permission_profiles") or {}).items()
            },
            validation_messages=tuple(
                ValidationMessage.from_dict(m) for m in data.get("validation_messages", [])
            ),
        )
