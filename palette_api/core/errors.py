"""
Operation outcomes raised by the service layer.

Services never pick HTTP status codes. Each failure outcome is an exception
carrying an Outcome; the API boundary converts it using OUTCOME_STATUS, the
one place where the outcome -> status policy lives.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class Outcome(str, Enum):
    """Logical result kinds of a failed operation."""
    EMPTY_RESULT = "empty_result"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation_error"
    INTERNAL = "internal_error"


OUTCOME_STATUS: dict[Outcome, int] = {
    Outcome.EMPTY_RESULT: 404,
    Outcome.NOT_FOUND: 404,
    Outcome.CONFLICT: 409,
    Outcome.VALIDATION: 422,
    Outcome.INTERNAL: 500,
}


class PaletteApiError(Exception):
    """Base class for all operation outcomes other than success."""

    outcome: Outcome = Outcome.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return OUTCOME_STATUS[self.outcome]


class ValidationError(PaletteApiError):
    """Malformed or incomplete input."""

    outcome = Outcome.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(PaletteApiError):
    """The referenced entity does not exist."""

    outcome = Outcome.NOT_FOUND


class EmptyResultError(NotFoundError):
    """A listing matched zero rows."""

    outcome = Outcome.EMPTY_RESULT


class ConflictError(PaletteApiError):
    """A uniqueness rule would be violated."""

    outcome = Outcome.CONFLICT


class InternalError(PaletteApiError):
    """Storage or infrastructure failure; the cause is kept for the response."""

    outcome = Outcome.INTERNAL

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
