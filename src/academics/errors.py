from __future__ import annotations


class AcademicsError(Exception):
    """Base class for failures reported back to the caller as ``{"error": ...}``."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AcademicsError):
    """A required field is missing or empty."""

    status_code = 400


class MissingReferenceError(AcademicsError):
    """A foreign key points at a record that does not exist."""

    status_code = 400


class ConflictError(AcademicsError):
    """The student is already enrolled in the subject."""

    status_code = 400


class NotFoundError(AcademicsError):
    status_code = 404


class RouteNotFoundError(NotFoundError):
    def __init__(self, message: str = "Endpoint not found") -> None:
        super().__init__(message)
