"""
Error types for entschema.

This module defines the exceptions raised for broken internal contracts:
- EntSchemaError: Base exception
- UndefinedTypeError: Strict lookup of a type name that does not exist
- WrongTypeKindError: Strict kind-narrowed lookup resolved to another kind
- UndefinedPermissionProfileError: Strict permission profile lookup failed
- UndefinedNamespaceError: Strict namespace path lookup failed
- UndefinedFieldError: Strict field lookup on an object type failed
- DescriptionAlreadyExtendedError: Field description enriched twice
- ListOfListsError: A GraphQL field is declared as a list of lists

Invariants:
    - User-schema mistakes are reported as ValidationMessages, never raised
    - Everything raised here points at a broken invariant upstream
    - All errors inherit from EntSchemaError
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class EntSchemaError(Exception):
    """Base exception for all entschema errors.

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "ENTSCHEMA_ERROR"
        self.details = details or {}


def _with_article(noun: str) -> str:
    return f"an {noun}" if noun[:1] in "aeiou" else f"a {noun}"


class UndefinedTypeError(EntSchemaError):
    """A type name could not be resolved by a strict lookup."""

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f'Reference to undefined type "{type_name}"',
            code="UNDEFINED_TYPE",
            details={"type_name": type_name},
        )
        self.type_name = type_name


class WrongTypeKindError(EntSchemaError):
    """A type name resolved, but to a different kind than requested.

    Attributes:
        type_name: The looked-up name
        expected: Human-readable description of the requested kind
        actual: Human-readable description of the kind found
    """

    def __init__(self, type_name: str, expected: str, actual: str) -> None:
        super().__init__(
            f'Expected type "{type_name}" to be {_with_article(expected)}, but is {_with_article(actual)}',
            code="WRONG_TYPE_KIND",
            details={"type_name": type_name, "expected": expected, "actual": actual},
        )
        self.type_name = type_name
        self.expected = expected
        self.actual = actual


class UndefinedPermissionProfileError(EntSchemaError):
    """A permission profile name could not be resolved."""

    def __init__(self, profile_name: str) -> None:
        super().__init__(
            f'Permission profile "{profile_name}" does not exist',
            code="UNDEFINED_PERMISSION_PROFILE",
            details={"profile_name": profile_name},
        )
        self.profile_name = profile_name


class UndefinedNamespaceError(EntSchemaError):
    """A namespace path could not be resolved."""

    def __init__(self, path: Sequence[str]) -> None:
        dotted = ".".join(path)
        super().__init__(
            f"Namespace {dotted} does not exist",
            code="UNDEFINED_NAMESPACE",
            details={"path": list(path)},
        )
        self.path = tuple(path)


class UndefinedFieldError(EntSchemaError):
    """An object type has no field of the requested name."""

    def __init__(self, type_name: str, field_name: str) -> None:
        super().__init__(
            f'Type "{type_name}" does not have a field "{field_name}"',
            code="UNDEFINED_FIELD",
            details={"type_name": type_name, "field_name": field_name},
        )
        self.type_name = type_name
        self.field_name = field_name


class DescriptionAlreadyExtendedError(EntSchemaError):
    """The generated description of a field was appended a second time."""

    def __init__(self, type_name: str, field_name: str) -> None:
        super().__init__(
            f'Description of field "{type_name}.{field_name}" has already been extended',
            code="DESCRIPTION_ALREADY_EXTENDED",
            details={"type_name": type_name, "field_name": field_name},
        )


class ListOfListsError(EntSchemaError):
    """A field type is a list of lists, which the schema does not support."""

    def __init__(self, type_name: str, field_name: str) -> None:
        super().__init__(
            "Lists of lists are not allowed.",
            code="LIST_OF_LISTS",
            details={"type_name": type_name, "field_name": field_name},
        )
        self.type_name = type_name
        self.field_name = field_name
