"""
How a field is represented when data is written.

Both the model registry and the GraphQL input type generation classify
fields through classify_field, so the two never disagree on which fields
are references, which are relations and which embed their value.
"""

from __future__ import annotations

from enum import Enum


class FieldRole(Enum):
    """Role of a field with respect to its target type."""

    # Target is a scalar or enum; the value is stored as is
    SCALAR = "scalar"
    # Target is an object type whose value is stored inline
    EMBEDDED = "embedded"
    # Target is a root entity, addressed by its key field
    REFERENCE = "reference"
    # Target is a root entity, linked by a relation and addressed by id
    RELATION = "relation"


def classify_field(
    is_object_target: bool,
    is_reference: bool,
    is_relation: bool,
    is_list: bool = False,
) -> FieldRole:
    """Classify a field.

    Args:
        is_object_target: Whether the field's type is an object type
        is_reference: Whether the field is declared as a reference
        is_relation: Whether the field is declared as a relation
        is_list: Whether the field holds a list

    Returns:
        The field's role. Reference takes precedence over relation, and
        list fields are never references.
    """
    if not is_object_target:
        return FieldRole.SCALAR
    if is_reference and not is_list:
        return FieldRole.REFERENCE
    if is_relation:
        return FieldRole.RELATION
    return FieldRole.EMBEDDED
