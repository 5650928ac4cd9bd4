"""Typed outcomes returned by command handlers.

A handler returns either `Success` carrying its value or `Failure` carrying an
`ErrorKind` and an ordered tuple of field-tagged messages. Expected rule
violations never surface as exceptions; callers match on the result type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Kinds of failure, in the precedence the workflows apply them."""

    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"
    BAD_REQUEST = "BadRequest"


@dataclass(frozen=True)
class ValidationFailure:
    """A human-readable reason attached to the input field it concerns.

    An empty field name means the failure is not tied to a single field.
    """

    field: str
    message: str


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def ok(self) -> bool:
        """Always True."""
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome: an error kind and its field-tagged messages."""

    kind: ErrorKind
    failures: tuple[ValidationFailure, ...]

    @property
    def ok(self) -> bool:
        """Always False."""
        return False

    def lines(self) -> list[str]:
        """One ``Kind: field: message`` line per failure, in order.

        The field segment is left out for failures not tied to a field.
        """
        lines = []
        for failure in self.failures:
            label = f"{failure.field}: " if failure.field else ""
            lines.append(f"{self.kind.value}: {label}{failure.message}")
        return lines

    # --- Construction Paths ---

    @classmethod
    def not_found(cls, field: str, message: str) -> Failure:
        """Build a NotFound failure with a single message."""
        return cls(ErrorKind.NOT_FOUND, (ValidationFailure(field, message),))

    @classmethod
    def forbidden(cls, field: str, message: str) -> Failure:
        """Build a Forbidden failure with a single message."""
        return cls(ErrorKind.FORBIDDEN, (ValidationFailure(field, message),))

    @classmethod
    def bad_request(cls, field: str, message: str) -> Failure:
        """Build a BadRequest failure with a single message."""
        return cls(ErrorKind.BAD_REQUEST, (ValidationFailure(field, message),))
