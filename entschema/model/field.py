"""
Fields of object types.

A Field belongs to exactly one object type and resolves its target type
lazily through the owning model, so declarations may reference types that
are declared later.

Invariants:
    - Field.type never returns None; unknown names resolve to an InvalidType
    - The description is extended at most once after construction
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..errors import DescriptionAlreadyExtendedError
from ..field_roles import FieldRole, classify_field
from .config import FieldConfig, TypeKind
from .validation import MessageLocation, ValidationContext, ValidationMessage

if TYPE_CHECKING:
    from .model import Model
    from .types import ObjectTypeBase, Type


class Field:
    """A field of an object type.

    Attributes:
        name: Field name
        declaring_type: The object type owning this field
        type_name: Declared name of the target type
        is_list: Whether the field holds a list
        is_reference: Whether the field references a root entity by key
        is_relation: Whether the field is a relation to a root entity
        inverse_of_field_name: Name of the relation field this one inverts
    """

    def __init__(self, config: FieldConfig, declaring_type: ObjectTypeBase, model: Model) -> None:
        self._config = config
        self._model = model
        self.declaring_type = declaring_type
        self.name = config.name
        self.type_name = config.type_name
        self.is_list = config.is_list
        self.is_reference = config.is_reference
        self.is_relation = config.is_relation
        self.inverse_of_field_name = config.inverse_of_field_name
        self._description = config.description
        self._description_extended = False

    @property
    def name_location(self) -> Optional[MessageLocation]:
        return self._config.name_location

    @property
    def description(self) -> str:
        return self._description

    def extend_description(self, text: str) -> None:
        """Append generated text to the description.

        Existing text is kept and separated from the new text by a blank line.

        Raises:
            DescriptionAlreadyExtendedError: If called a second time
        """
        if self._description_extended:
            raise DescriptionAlreadyExtendedError(self.declaring_type.name, self.name)
        self._description = f"{self._description}\n\n{text}" if self._description else text
        self._description_extended = True

    @property
    def type(self) -> Type:
        """The target type (an InvalidType if the name does not resolve)."""
        return self._model.get_type_or_fallback(self.type_name)

    @property
    def role(self) -> FieldRole:
        return classify_field(
            is_object_target=self.type.is_object_type,
            is_reference=self.is_reference,
            is_relation=self.is_relation,
            is_list=self.is_list,
        )

    @property
    def inverse_of(self) -> Optional[Field]:
        """The relation field on the target type this field is the inverse of."""
        if not self.inverse_of_field_name:
            return None
        target = self.type
        if not target.is_object_type:
            return None
        return target.get_field(self.inverse_of_field_name)

    @property
    def inverse_field(self) -> Optional[Field]:
        """The relation field on the target type declared as inverse of this one."""
        target = self.type
        if not self.is_relation or self.inverse_of_field_name or not target.is_object_type:
            return None
        for candidate in target.fields:
            if (
                candidate.is_relation
                and candidate.inverse_of_field_name == self.name
                and candidate.type_name == self.declaring_type.name
            ):
                return candidate
        return None

    def validate(self, context: ValidationContext) -> None:
        if not self.name:
            context.add_message(
                ValidationMessage.error(
                    f'Field of type "{self.declaring_type.name}" has an empty name.',
                    self.name_location,
                )
            )

        target = self.type
        if target.is_invalid:
            context.add_message(
                ValidationMessage.error(f'Type "{self.type_name}" not found.', self.name_location)
            )
            return

        if self.is_reference:
            self._validate_reference(context, target)
        if self.is_relation:
            self._validate_relation(context, target)

    def _validate_reference(self, context: ValidationContext, target: Type) -> None:
        if self.is_relation:
            context.add_message(
                ValidationMessage.error(
                    f'Field "{self.name}" cannot be both a reference and a relation.',
                    self.name_location,
                )
            )
        if self.is_list:
            context.add_message(
                ValidationMessage.error(
                    f'Reference field "{self.name}" cannot be a list.', self.name_location
                )
            )
        if target.kind != TypeKind.ROOT_ENTITY:
            context.add_message(
                ValidationMessage.error(
                    f'"{target.name}" cannot be used as a reference target because it is not a root entity type.',
                    self.name_location,
                )
            )
            return
        if target.key_field is None and self._model.settings.warn_on_missing_key_field:
            context.add_message(
                ValidationMessage.warning(
                    f'"{target.name}" has no key field, so references to it fall back to its id.',
                    self.name_location,
                )
            )

    def _validate_relation(self, context: ValidationContext, target: Type) -> None:
        if self.declaring_type.kind != TypeKind.ROOT_ENTITY:
            context.add_message(
                ValidationMessage.error(
                    f'Relations can only be defined on root entity types, but "{self.declaring_type.name}" '
                    f"is a {self.declaring_type.kind.label}.",
                    self.name_location,
                )
            )
        if target.kind != TypeKind.ROOT_ENTITY:
            context.add_message(
                ValidationMessage.error(
                    f'"{target.name}" cannot be used as a relation target because it is not a root entity type.',
                    self.name_location,
                )
            )
            return
        if not self.inverse_of_field_name:
            return

        inverse = target.get_field(self.inverse_of_field_name)
        if inverse is None:
            context.add_message(
                ValidationMessage.error(
                    f'Field "{target.name}.{self.inverse_of_field_name}" used as inverse field of '
                    f'"{self.declaring_type.name}.{self.name}" does not exist.',
                    self.name_location,
                )
            )
        elif not inverse.is_relation or inverse.type_name != self.declaring_type.name:
            context.add_message(
                ValidationMessage.error(
                    f'Field "{target.name}.{inverse.name}" used as inverse field of '
                    f'"{self.declaring_type.name}.{self.name}" is not a relation to "{self.declaring_type.name}".',
                    self.name_location,
                )
            )
        elif inverse.inverse_of_field_name:
            context.add_message(
                ValidationMessage.error(
                    f'Field "{target.name}.{inverse.name}" used as inverse field of '
                    f'"{self.declaring_type.name}.{self.name}" is itself declared as an inverse field.',
                    self.name_location,
                )
            )

    def __repr__(self) -> str:
        return f"Field({self.declaring_type.name}.{self.name}: {self.type_name})"
