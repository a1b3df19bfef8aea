"""
API exceptions and global handlers.

Every error raised deliberately by the service is rendered as a JSON body
with a ``message`` key, plus any extra diagnostic fields.
"""
import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base API exception rendered as ``{"message": ..., **extra}``."""

    def __init__(self, status_code: int, message: str, **extra: Any):
        self.status_code = status_code
        self.message = message
        self.extra = extra
        super().__init__(message)


class UnauthorizedError(APIError):
    """Missing or malformed credential header."""

    def __init__(self, message: str = "Unauthorized access", **extra: Any):
        super().__init__(status.HTTP_401_UNAUTHORIZED, message, **extra)


class ForbiddenError(APIError):
    """Invalid credential, email mismatch or missing admin role."""

    def __init__(self, message: str = "Forbidden", **extra: Any):
        super().__init__(status.HTTP_403_FORBIDDEN, message, **extra)


class NotFoundError(APIError):
    def __init__(self, message: str = "User not found", **extra: Any):
        super().__init__(status.HTTP_404_NOT_FOUND, message, **extra)


class BadRequestError(APIError):
    def __init__(self, message: str = "Bad request", **extra: Any):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, **extra)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handler for deliberate API errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, **exc.extra},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for anything the route handlers do not catch (store, SDK, ...)."""
    logger.exception(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )
