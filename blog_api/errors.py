"""Typed application errors carrying an HTTP status and a client-safe message.

Services raise these; the exception handlers registered in ``blog_api.main``
are the only place that turns them into HTTP responses.
"""

from fastapi import status


class AppError(Exception):
    """Base error with an HTTP status code and a message safe to show clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    """Bad credentials or missing/invalid session token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    """Authenticated, but not allowed to touch this resource."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Duplicate value for a unique key."""

    status_code = status.HTTP_409_CONFLICT
