"""Exception taxonomy raised by the service layer.

Controllers never build error responses themselves: the app factory
registers a handler that turns any ``ServiceError`` into a JSON body of the
form ``{"detail": ...}`` using the exception's ``status_code``.
"""

from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str | list[str]) -> None:
        super().__init__(detail if isinstance(detail, str) else "; ".join(detail))
        self.detail = detail


class InvalidDataError(ServiceError):
    """Raised when a payload is missing fields or carries invalid values."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidIdentifierError(ServiceError):
    """Raised when a path identifier is not a well-formed id."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """Raised when an identifier does not resolve to a stored record."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """Raised when a write would violate a uniqueness constraint."""

    status_code = status.HTTP_409_CONFLICT


__all__ = [
    "ServiceError",
    "InvalidDataError",
    "InvalidIdentifierError",
    "NotFoundError",
    "ConflictError",
]
