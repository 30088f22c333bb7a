"""Domain errors raised by the grading and analytics services.

Each error knows the HTTP status and machine-readable code it maps to, so
``main.py`` can render every one of them through a single exception handler.
"""

from typing import Any


class QuizAppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(QuizAppError):
    """A referenced quiz, result or user does not exist."""

    status_code = 404
    error_code = "not_found"


class InvalidPayloadError(QuizAppError):
    """The submitted payload is malformed (e.g. answers is not a list)."""

    status_code = 400
    error_code = "validation_error"


class PersistenceError(QuizAppError):
    """The database rejected a read or write."""

    status_code = 500
    error_code = "internal_error"
