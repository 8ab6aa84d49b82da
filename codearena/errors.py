"""
Classified application errors.

Services raise these; the exception handlers in
``codearena.middleware.error_handler`` turn them into
``{statusCode, message}`` responses.
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(status_code={self.status_code}, message='{self.message}')>"


class Unauthorized(AppError):
    """Role mismatch, wrong password or duplicate registration."""
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(AppError):
    """Missing user, problem or submission."""
    status_code = status.HTTP_404_NOT_FOUND


class BadRequest(AppError):
    """Invalid input such as an unsupported upload type."""
    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(AppError):
    """Unexpected failures, including judge and image host failures."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
