"""
Relations between root entities.

A Relation is derived from relation fields: the declaring side (from_field)
and, if one was declared, the inverse field on the other side (to_field).
Two Relation objects describe the same relation iff their identifiers match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .field import Field
    from .types import RootEntityType


class RelationCardinality(Enum):
    ONE = "one"
    MANY = "many"


class RelationFieldSide(Enum):
    FROM_SIDE = "from"
    TO_SIDE = "to"


@dataclass(frozen=True, eq=False)
class Relation:
    """A directed or bidirectional relation between two root entity types.

    Attributes:
        from_type: Type declaring the relation
        from_field: Relation field on from_type
        to_type: Target type
        to_field: Inverse field on to_type, if declared
    """

    from_type: RootEntityType
    from_field: Field
    to_type: RootEntityType
    to_field: Optional[Field] = None

    @property
    def identifier(self) -> str:
        """Order-independent key over both sides of the relation."""
        sides = [f"{self.from_type.name}.{self.from_field.name}"]
        if self.to_field is not None:
            sides.append(f"{self.to_type.name}.{self.to_field.name}")
        return "<->".join(sorted(sides))

    @property
    def from_cardinality(self) -> RelationCardinality:
        """How many from_type objects one to_type object can be related to."""
        if self.to_field is None or self.to_field.is_list:
            return RelationCardinality.MANY
        return RelationCardinality.ONE

    @property
    def to_cardinality(self) -> RelationCardinality:
        """How many to_type objects one from_type object can be related to."""
        return RelationCardinality.MANY if self.from_field.is_list else RelationCardinality.ONE

    def get_field_side(self, field: Field) -> RelationFieldSide:
        if field is self.from_field:
            return RelationFieldSide.FROM_SIDE
        if field is self.to_field:
            return RelationFieldSide.TO_SIDE
        raise ValueError(f"{field!r} is not part of relation {self.identifier}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)

    def __str__(self) -> str:
        return self.identifier
