"""
Type definitions of the domain model.

The set of kinds is closed (see TypeKind); every type exposes name, kind
and validate(), and object kinds additionally own an ordered tuple of
Fields:
- RootEntityType: independently addressable entity with key field,
  namespace and permission profile
- ChildEntityType, EntityExtensionType, ValueObjectType: object types that
  only exist embedded in other objects
- ScalarType, EnumType: leaf types
- InvalidType: placeholder for names that do not resolve

Invariants:
    - Types are created only through create_type() while the Model is built
    - Cross-type lookups go through the Model, never through stored links
    - Nothing but field descriptions changes after the Model is built
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from ..errors import UndefinedFieldError
from .config import (
    EnumTypeConfig,
    ObjectTypeConfig,
    ScalarTypeConfig,
    TypeConfig,
    TypeKind,
)
from .field import Field
from .permission_profile import PermissionProfile
from .relation import Relation
from .validation import MessageLocation, ValidationContext, ValidationMessage

if TYPE_CHECKING:
    from .model import Model

logger = logging.getLogger(__name__)


class TypeBase:
    """Attributes and validation common to all kinds."""

    kind: TypeKind
    is_object_type = False
    is_invalid = False

    def __init__(
        self,
        name: str,
        description: str = "",
        name_location: Optional[MessageLocation] = None,
        is_built_in: bool = False,
    ) -> None:
        self.name = name
        self.description = description
        self.name_location = name_location
        self.is_built_in = is_built_in

    def validate(self, context: ValidationContext) -> None:
        if not self.name:
            context.add_message(ValidationMessage.error("Type name is empty.", self.name_location))
            return
        if not self.name[0].isupper():
            context.add_message(
                ValidationMessage.warning("Type names should start with an uppercase character.", self.name_location)
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ScalarType(TypeBase):
    kind = TypeKind.SCALAR

    @classmethod
    def from_config(cls, config: ScalarTypeConfig) -> ScalarType:
        return cls(config.name, config.description, config.name_location)


class InvalidType(ScalarType):
    """Stand-in for a type name that does not resolve.

    Returned by Model.get_type_or_fallback() so callers always get a type
    object. It is never part of Model.types.
    """

    is_invalid = True

    def __init__(self, name: str) -> None:
        super().__init__(name)


class EnumType(TypeBase):
    kind = TypeKind.ENUM

    def __init__(
        self,
        name: str,
        values: tuple[str, ...],
        description: str = "",
        name_location: Optional[MessageLocation] = None,
    ) -> None:
        super().__init__(name, description, name_location)
        self.values = values

    @classmethod
    def from_config(cls, config: EnumTypeConfig) -> EnumType:
        return cls(config.name, config.values, config.description, config.name_location)

    def validate(self, context: ValidationContext) -> None:
        super().validate(context)
        if not self.values:
            context.add_message(
                ValidationMessage.error(f'Enum "{self.name}" does not declare any values.', self.name_location)
            )
        seen: set[str] = set()
        for value in self.values:
            if value in seen:
                context.add_message(
                    ValidationMessage.error(f'Duplicate enum value "{value}" in "{self.name}".', self.name_location)
                )
            seen.add(value)


class ObjectTypeBase(TypeBase):
    """Base for all kinds owning fields."""

    is_object_type = True

    def __init__(self, config: ObjectTypeConfig, model: Model) -> None:
        super().__init__(config.name, config.description, config.name_location)
        self._config = config
        self._model = model
        self.fields: tuple[Field, ...] = tuple(Field(f, self, model) for f in config.fields)
        self._field_map = {f.name: f for f in self.fields}

    def get_field(self, name: str) -> Optional[Field]:
        return self._field_map.get(name)

    def get_field_or_throw(self, name: str) -> Field:
        field = self.get_field(name)
        if field is None:
            raise UndefinedFieldError(self.name, name)
        return field

    def validate(self, context: ValidationContext) -> None:
        super().validate(context)
        if not self.fields:
            context.add_message(
                ValidationMessage.error(
                    f'Object type "{self.name}" does not declare any fields.', self.name_location
                )
            )

        seen: set[str] = set()
        for field in self.fields:
            if field.name in seen:
                context.add_message(
                    ValidationMessage.error(f'Duplicate field name: "{field.name}".', field.name_location)
                )
            seen.add(field.name)
            field.validate(context)


class RootEntityType(ObjectTypeBase):
    """Independently addressable entity type."""

    kind = TypeKind.ROOT_ENTITY

    @property
    def namespace_path(self) -> tuple[str, ...]:
        return self._config.namespace_path

    @property
    def key_field_name(self) -> Optional[str]:
        return self._config.key_field_name

    @property
    def key_field(self) -> Optional[Field]:
        if not self.key_field_name:
            return None
        return self.get_field(self.key_field_name)

    @property
    def permission_profile_name(self) -> Optional[str]:
        return self._config.permissions.permission_profile_name

    @property
    def permission_profile(self) -> Optional[PermissionProfile]:
        """The explicitly named profile, or the model's default profile."""
        if self.permission_profile_name:
            return self._model.get_permission_profile(self.permission_profile_name)
        return self._model.default_permission_profile

    @property
    def explicit_relations(self) -> tuple[Relation, ...]:
        """Relations declared by this type's relation fields.

        A field declared as the inverse of another field yields the relation
        seen from that other field, so both sides describe the same relation.
        """
        relations = []
        for field in self.fields:
            if not field.is_relation:
                continue
            target = field.type
            if target.kind != TypeKind.ROOT_ENTITY:
                continue
            if field.inverse_of_field_name:
                owner = field.inverse_of
                if owner is None:
                    continue
                relations.append(Relation(from_type=target, from_field=owner, to_type=self, to_field=field))
            else:
                relations.append(
                    Relation(from_type=self, from_field=field, to_type=target, to_field=field.inverse_field)
                )
        return tuple(relations)

    def validate(self, context: ValidationContext) -> None:
        super().validate(context)
        if self.key_field_name and self.key_field is None:
            context.add_message(
                ValidationMessage.error(
                    f'Field "{self.key_field_name}" used as key field of "{self.name}" does not exist.',
                    self.name_location,
                )
            )
        if self.permission_profile_name and self.permission_profile is None:
            context.add_message(
                ValidationMessage.error(
                    f'Permission profile "{self.permission_profile_name}" not found.', self.name_location
                )
            )


class ChildEntityType(ObjectTypeBase):
    kind = TypeKind.CHILD_ENTITY


class EntityExtensionType(ObjectTypeBase):
    kind = TypeKind.ENTITY_EXTENSION


class ValueObjectType(ObjectTypeBase):
    kind = TypeKind.VALUE_OBJECT


ObjectType = Union[RootEntityType, ChildEntityType, EntityExtensionType, ValueObjectType]
Type = Union[ObjectType, ScalarType, EnumType]

_OBJECT_TYPE_CLASSES = {
    TypeKind.ROOT_ENTITY: RootEntityType,
    TypeKind.CHILD_ENTITY: ChildEntityType,
    TypeKind.ENTITY_EXTENSION: EntityExtensionType,
    TypeKind.VALUE_OBJECT: ValueObjectType,
}


def create_type(config: TypeConfig, model: Model) -> Type:
    """Create the type for a declaration, dispatching on its kind."""
    if config.kind == TypeKind.SCALAR:
        return ScalarType.from_config(config)
    if config.kind == TypeKind.ENUM:
        return EnumType.from_config(config)
    return _OBJECT_TYPE_CLASSES[config.kind](config, model)
