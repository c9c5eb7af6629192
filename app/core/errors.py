"""
Application error taxonomy.

Every error carries the HTTP status it maps to; the app-level exception
handler turns any ``AppError`` into an ``ErrorResponse`` envelope.
"""
from typing import Any

from fastapi import status


class AppError(Exception):
    message: str = "Application error"
    status_code: int = status.HTTP_400_BAD_REQUEST
    details: Any | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        if details is not None:
            self.details = details

        super().__init__(self.message)


class ValidationError(AppError):
    message = "Validation error"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    message = "Resource not found"
    status_code = status.HTTP_404_NOT_FOUND


class AuthenticationError(AppError):
    message = "Invalid credentials"
    status_code = status.HTTP_401_UNAUTHORIZED


class UpstreamError(AppError):
    """The external identity authority failed or answered with an error."""
    message = "Upstream service unavailable"
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str | None = None, *, upstream_status: int | None = None, **kwargs: Any):
        self.upstream_status = upstream_status
        super().__init__(message, **kwargs)


class InternalError(AppError):
    message = "Internal server error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
