"""Error taxonomy for the Campus Social API.

Every error is an ``HTTPException`` so handlers and services can raise it
directly; ``campusnet.main`` renders all of them as the
``{"ok": false, "error": ...}`` envelope.
"""

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base exception for expected, client-facing failures."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail: str = None, headers: dict = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class ValidationError(AppException):
    """Missing or empty required field."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class Unauthenticated(AppException):
    """Missing or invalid credential."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Could not validate credentials"

    def __init__(self, detail: str = None):
        super().__init__(detail=detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(AppException):
    """Authenticated but not allowed to perform this mutation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You may not perform this action"


class NotFound(AppException):
    """Referenced id does not resolve."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(AppException):
    """Request collides with existing state, e.g. a duplicate email."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


class Internal(AppException):
    """Unexpected failure. Never carries internal details."""


__all__ = [
    "AppException",
    "ValidationError",
    "Unauthenticated",
    "Forbidden",
    "NotFound",
    "Conflict",
    "Internal",
]
