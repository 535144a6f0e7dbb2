"""
The domain model registry.

The Model is the central authority for all types of a project. It provides:
- Construction of built-in and declared types from a ModelConfig
- Lookup by name, tolerant, with fallback or strict, optionally narrowed
  to one kind
- The namespace tree of root entities
- Permission profiles by name
- The de-duplicated set of relations between root entities
- Validation that reports schema errors as diagnostics

Invariants:
    - The type list, namespace tree and profile table are built once in
      __init__ and never change afterwards
    - Field descriptions of references are extended exactly once, at the
      end of construction
    - Construction never fails because of schema errors; call validate()
      and check for errors before relying on a model
    - Strict lookups raise; schema errors are only ever reported

Example:
    >>> model = Model(ModelConfig(types=(
    ...     ObjectTypeConfig(kind=TypeKind.ROOT_ENTITY, name="User",
    ...                      fields=(FieldConfig("email", "String"),)),
    ... )))
    >>> model.validate().has_errors()
    False
    >>> model.get_root_entity_type_or_throw("User")
    RootEntityType('User')
"""

from __future__ import annotations

import logging
from collections import defaultdict
from functools import cached_property
from typing import Optional, Sequence

from ..config import ModelSettings
from ..errors import UndefinedNamespaceError, UndefinedPermissionProfileError, UndefinedTypeError, WrongTypeKindError
from .built_in_types import BUILT_IN_TYPE_NAMES, built_in_types
from .config import ModelConfig, TypeKind
from .namespace import Namespace
from .permission_profile import PermissionProfile, PermissionProfileMap, create_permission_map
from .relation import Relation
from .types import (
    ChildEntityType,
    EntityExtensionType,
    EnumType,
    InvalidType,
    ObjectType,
    RootEntityType,
    ScalarType,
    Type,
    ValueObjectType,
    create_type,
)
from .validation import ValidationContext, ValidationMessage, ValidationResult

logger = logging.getLogger(__name__)


class Model:
    """Validated, cross-referenced set of types.

    Attributes:
        types: Built-in types followed by the declared types, in order
        permission_profiles: Read-only profile name -> profile table
        root_namespace: Root of the namespace tree
        namespaces: Root namespace followed by all descendants
        settings: Settings the model was built with
    """

    def __init__(self, config: ModelConfig, settings: Optional[ModelSettings] = None) -> None:
        self._config = config
        self.settings = settings or ModelSettings()
        self.permission_profiles: PermissionProfileMap = create_permission_map(config.permission_profiles)
        self.types: tuple[Type, ...] = (
            *built_in_types,
            *(create_type(type_config, self) for type_config in config.types),
        )
        self.root_namespace = Namespace(None, (), self.root_entity_types)
        self.namespaces: tuple[Namespace, ...] = (self.root_namespace, *self.root_namespace.descendant_namespaces)
        self._type_map: dict[str, Type] = {t.name: t for t in self.types}
        self._extend_reference_descriptions()
        logger.info(
            f"Model built with {len(self.types)} types ({len(built_in_types)} built-in), "
            f"{len(self.namespaces)} namespaces, {len(self.permission_profiles)} permission profiles"
        )

    def validate(self, context: Optional[ValidationContext] = None) -> ValidationResult:
        """Validate the model.

        Args:
            context: Collector to add messages to; a fresh one if omitted

        Returns:
            Messages carried over from the configuration followed by the
            messages collected in the context
        """
        context = context or ValidationContext()
        self._validate_duplicate_types(context)
        for t in self.types:
            t.validate(context)

        result = ValidationResult((*self._config.validation_messages, *context.validation_messages))
        logger.debug(f"Model validated: {result!r}")
        return result

    def _validate_duplicate_types(self, context: ValidationContext) -> None:
        by_name: dict[str, list[Type]] = defaultdict(list)
        for t in self.types:
            by_name[t.name].append(t)

        for name, types in by_name.items():
            if len(types) < 2:
                continue
            for t in types:
                if t.is_built_in:
                    # shadowed built-ins are not the user's declaration
                    continue
                if name in BUILT_IN_TYPE_NAMES:
                    context.add_message(
                        ValidationMessage.error(f'Type name "{name}" is reserved by a built-in type.', t.name_location)
                    )
                else:
                    context.add_message(ValidationMessage.error(f'Duplicate type name: "{name}".', t.name_location))

    def _extend_reference_descriptions(self) -> None:
        for t in self.types:
            if not t.is_object_type:
                continue
            for field in t.fields:
                if not field.is_reference:
                    continue
                target = field.type
                if target.kind != TypeKind.ROOT_ENTITY:
                    continue
                key_name = target.key_field.name if target.key_field else "key"
                field.extend_description(f"This field references a {target.name} by its {key_name} field")

    # -- lookup by name ---------------------------------------------------

    def get_type(self, name: str) -> Optional[Type]:
        return self._type_map.get(name)

    def get_type_or_fallback(self, name: str) -> Type:
        """Get a type, or an InvalidType of the same name if it does not exist."""
        return self._type_map.get(name) or InvalidType(name)

    def get_type_or_throw(self, name: str) -> Type:
        """Get a type by name.

        Raises:
            UndefinedTypeError: If no type has this name
        """
        t = self._type_map.get(name)
        if t is None:
            raise UndefinedTypeError(name)
        return t

    def get_type_of_kind(self, name: str, kind: TypeKind) -> Optional[Type]:
        t = self.get_type(name)
        if t is None or t.kind != kind:
            return None
        return t

    def get_type_of_kind_or_fallback(self, name: str, kind: TypeKind) -> Type:
        t = self.get_type_of_kind(name, kind)
        return t if t is not None else InvalidType(name)

    def get_type_of_kind_or_throw(self, name: str, kind: TypeKind) -> Type:
        """Get a type by name and make sure it is of the given kind.

        Raises:
            UndefinedTypeError: If no type has this name
            WrongTypeKindError: If the type is of another kind
        """
        t = self.get_type_or_throw(name)
        if t.kind != kind:
            raise WrongTypeKindError(name, kind.label, t.kind.label)
        return t

    def get_object_type_or_throw(self, name: str) -> ObjectType:
        t = self.get_type_or_throw(name)
        if not t.is_object_type:
            raise WrongTypeKindError(name, "object type", t.kind.label)
        return t

    def get_root_entity_type(self, name: str) -> Optional[RootEntityType]:
        return self.get_type_of_kind(name, TypeKind.ROOT_ENTITY)

    def get_root_entity_type_or_fallback(self, name: str) -> Type:
        return self.get_type_of_kind_or_fallback(name, TypeKind.ROOT_ENTITY)

    def get_root_entity_type_or_throw(self, name: str) -> RootEntityType:
        return self.get_type_of_kind_or_throw(name, TypeKind.ROOT_ENTITY)

    def get_child_entity_type(self, name: str) -> Optional[ChildEntityType]:
        return self.get_type_of_kind(name, TypeKind.CHILD_ENTITY)

    def get_child_entity_type_or_fallback(self, name: str) -> Type:
        return self.get_type_of_kind_or_fallback(name, TypeKind.CHILD_ENTITY)

    def get_child_entity_type_or_throw(self, name: str) -> ChildEntityType:
        return self.get_type_of_kind_or_throw(name, TypeKind.CHILD_ENTITY)

    def get_entity_extension_type(self, name: str) -> Optional[EntityExtensionType]:
        return self.get_type_of_kind(name, TypeKind.ENTITY_EXTENSION)

    def get_entity_extension_type_or_fallback(self, name: str) -> Type:
        return self.get_type_of_kind_or_fallback(name, TypeKind.ENTITY_EXTENSION)

    def get_entity_extension_type_or_throw(self, name: str) -> EntityExtensionType:
        return self.get_type_of_kind_or_throw(name, TypeKind.ENTITY_EXTENSION)

    def get_value_object_type(self, name: str) -> Optional[ValueObjectType]:
        return self.get_type_of_kind(name, TypeKind.VALUE_OBJECT)

    def get_value_object_type_or_fallback(self, name: str) -> Type:
        return self.get_type_of_kind_or_fallback(name, TypeKind.VALUE_OBJECT)

    def get_value_object_type_or_throw(self, name: str) -> ValueObjectType:
        return self.get_type_of_kind_or_throw(name, TypeKind.VALUE_OBJECT)

    def get_scalar_type(self, name: str) -> Optional[ScalarType]:
        return self.get_type_of_kind(name, TypeKind.SCALAR)

    def get_scalar_type_or_fallback(self, name: str) -> Type:
        return self.get_type_of_kind_or_fallback(name, TypeKind.SCALAR)

    def get_scalar_type_or_throw(self, name: str) -> ScalarType:
        return self.get_type_of_kind_or_throw(name, TypeKind.SCALAR)

    def get_enum_type(self, name: str) -> Optional[EnumType]:
        return self.get_type_of_kind(name, TypeKind.ENUM)

    def get_enum_type_or_fallback(self, name: str) -> Type:
        return self.get_type_of_kind_or_fallback(name, TypeKind.ENUM)

    def get_enum_type_or_throw(self, name: str) -> EnumType:
        return self.get_type_of_kind_or_throw(name, TypeKind.ENUM)

    # -- views by kind ----------------------------------------------------

    def _types_of_kind(self, kind: TypeKind) -> tuple[Type, ...]:
        return tuple(t for t in self.types if t.kind == kind)

    @property
    def root_entity_types(self) -> tuple[RootEntityType, ...]:
        return self._types_of_kind(TypeKind.ROOT_ENTITY)

    @property
    def child_entity_types(self) -> tuple[ChildEntityType, ...]:
        return self._types_of_kind(TypeKind.CHILD_ENTITY)

    @property
    def entity_extension_types(self) -> tuple[EntityExtensionType, ...]:
        return self._types_of_kind(TypeKind.ENTITY_EXTENSION)

    @property
    def value_object_types(self) -> tuple[ValueObjectType, ...]:
        return self._types_of_kind(TypeKind.VALUE_OBJECT)

    @property
    def scalar_types(self) -> tuple[ScalarType, ...]:
        return self._types_of_kind(TypeKind.SCALAR)

    @property
    def enum_types(self) -> tuple[EnumType, ...]:
        return self._types_of_kind(TypeKind.ENUM)

    @property
    def object_types(self) -> tuple[ObjectType, ...]:
        return tuple(t for t in self.types if t.is_object_type)

    # -- permission profiles ----------------------------------------------

    def get_permission_profile(self, name: str) -> Optional[PermissionProfile]:
        return self.permission_profiles.get(name)

    def get_permission_profile_or_throw(self, name: str) -> PermissionProfile:
        """Get a permission profile by name.

        Raises:
            UndefinedPermissionProfileError: If no profile has this name
        """
        profile = self.get_permission_profile(name)
        if profile is None:
            raise UndefinedPermissionProfileError(name)
        return profile

    @property
    def default_permission_profile(self) -> Optional[PermissionProfile]:
        return self.get_permission_profile(self.settings.default_permission_profile)

    # -- namespaces -------------------------------------------------------

    def get_namespace_by_path(self, path: Sequence[str]) -> Optional[Namespace]:
        namespace: Optional[Namespace] = self.root_namespace
        for segment in path:
            namespace = namespace.get_child_namespace(segment)
            if namespace is None:
                return None
        return namespace

    def get_namespace_by_path_or_throw(self, path: Sequence[str]) -> Namespace:
        """Get a namespace by its path segments.

        Raises:
            UndefinedNamespaceError: If any segment does not exist
        """
        namespace = self.get_namespace_by_path(path)
        if namespace is None:
            raise UndefinedNamespaceError(path)
        return namespace

    # -- relations --------------------------------------------------------

    @cached_property
    def relations(self) -> tuple[Relation, ...]:
        """All relations between root entities, without duplicates.

        Computed on first access; the first occurrence of each relation (in
        root entity order, then field order) is kept.
        """
        seen: set[str] = set()
        relations = []
        for root_entity in self.root_entity_types:
            for relation in root_entity.explicit_relations:
                if relation.identifier in seen:
                    continue
                seen.add(relation.identifier)
                relations.append(relation)
        logger.debug(f"Computed {len(relations)} relations")
        return tuple(relations)
