"""Exceptions raised by the service layer.

Each carries the HTTP status it maps to; the handlers registered in
``src.main`` turn them into ``{"detail": ...}`` responses.
"""

from dataclasses import dataclass

from fastapi import status


@dataclass(frozen=True)
class FieldError:
    """A single rejected input field."""

    field: str
    message: str


class ServiceError(Exception):
    """Base class for errors that surface directly to the API caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Raised when request input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: list[FieldError], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.errors = list(errors)


class AuthError(ServiceError):
    """Raised for bad credentials and for missing, invalid or expired tokens."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ConflictError(ServiceError):
    """Raised when a write would break a uniqueness constraint."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(ServiceError):
    """Raised when a resource doesn't exist or isn't owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
