"""
Types every model contains without declaring them.
"""

from __future__ import annotations

from .types import ScalarType

BUILT_IN_SCALARS = (
    ("ID", "Opaque unique identifier."),
    ("String", "UTF-8 character sequence."),
    ("Boolean", "true or false."),
    ("Int", "Signed 32-bit integer."),
    ("Float", "Double-precision floating-point number."),
    ("JSON", "Arbitrary JSON value."),
    ("DateTime", "ISO 8601 date and time with offset."),
    ("LocalDate", "ISO 8601 calendar date without time or offset."),
    ("LocalTime", "ISO 8601 time of day without date or offset."),
)

built_in_types: tuple[ScalarType, ...] = tuple(
    ScalarType(name, description, is_built_in=True) for name, description in BUILT_IN_SCALARS
)

BUILT_IN_TYPE_NAMES = frozenset(t.name for t in built_in_types)
