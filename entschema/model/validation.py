"""
Diagnostics produced while validating a model.

- Severity: how bad a message is
- MessageLocation: where in the source a message points to
- ValidationMessage: a single diagnostic
- ValidationContext: mutable collector passed through validation
- ValidationResult: immutable, ordered result handed back to callers

Invariants:
    - Expected schema errors are collected here, never raised
    - A ValidationResult never changes after it is created
    - Message order is the order in which messages were added
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Optional


class Severity(Enum):
    """Severity of a validation message."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class MessageLocation:
    """Position of a declaration in its source.

    Attributes:
        source_name: Name of the source file or document
        start: Start offset (inclusive)
        end: End offset (exclusive)
    """

    source_name: str
    start: int = 0
    end: int = 0

    def __str__(self) -> str:
        return f"{self.source_name}:{self.start}-{self.end}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageLocation:
        """Create from dictionary representation."""
        return cls(
            source_name=data["source_name"],
            start=data.get("start", 0),
            end=data.get("end", 0),
        )


@dataclass(frozen=True)
class ValidationMessage:
    """A single diagnostic.

    Attributes:
        severity: Error, warning or info
        message: Human-readable text
        location: Where the problem was declared, if known
    """

    severity: Severity
    message: str
    location: Optional[MessageLocation] = None

    @classmethod
    def error(cls, message: str, location: Optional[MessageLocation] = None) -> ValidationMessage:
        return cls(Severity.ERROR, message, location)

    @classmethod
    def warning(cls, message: str, location: Optional[MessageLocation] = None) -> ValidationMessage:
        return cls(Severity.WARNING, message, location)

    @classmethod
    def info(cls, message: str, location: Optional[MessageLocation] = None) -> ValidationMessage:
        return cls(Severity.INFO, message, location)

    def __str__(self) -> str:
        where = f" at {self.location}" if self.location else ""
        return f"[{self.severity.name}] {self.message}{where}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidationMessage:
        """Create from dictionary representation."""
        location = data.get("location")
        return cls(
            severity=Severity(data.get("severity", "error")),
            message=data["message"],
            location=MessageLocation.from_dict(location) if location else None,
        )


class ValidationContext:
    """Collects messages while model components validate themselves.

    One context can be shared between several components so their
    diagnostics end up in a single pool.
    """

    def __init__(self) -> None:
        self._messages: list[ValidationMessage] = []

    def add_message(self, message: ValidationMessage) -> None:
        self._messages.append(message)

    @property
    def validation_messages(self) -> tuple[ValidationMessage, ...]:
        """Messages collected so far."""
        return tuple(self._messages)


class ValidationResult:
    """Immutable, ordered list of validation messages."""

    def __init__(self, messages: Iterable[ValidationMessage]) -> None:
        self._messages = tuple(messages)

    @property
    def messages(self) -> tuple[ValidationMessage, ...]:
        return self._messages

    @property
    def errors(self) -> tuple[ValidationMessage, ...]:
        return tuple(m for m in self._messages if m.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[ValidationMessage, ...]:
        return tuple(m for m in self._messages if m.severity == Severity.WARNING)

    def has_errors(self) -> bool:
        return any(m.severity == Severity.ERROR for m in self._messages)

    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self._messages)

    def __iter__(self) -> Iterator[ValidationMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"ValidationResult({len(self._messages)} messages, {len(self.errors)} errors)"
