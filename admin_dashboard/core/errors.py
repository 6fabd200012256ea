"""
Application errors and their JSON handlers.

Every error body leaving the service has the same shape:

    {"error": "<generic message>"}

Internal details (database messages, auth failure reasons) are logged with
request context and never sent to the client.
"""

import logging
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error carrying the HTTP status it maps to"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.context = context or {}
        super().__init__(self.message)


class UnauthorizedError(AppError):
    """Caller is not an authenticated admin. Never says which."""

    def __init__(self, context: Optional[dict] = None):
        super().__init__(
            message="Unauthorized",
            status_code=status.HTTP_401_UNAUTHORIZED,
            context=context,
        )


class InvalidIdentifierError(AppError):
    """An identifier failed format validation before any query ran"""

    def __init__(self, message: str = "Invalid event ID format", context: Optional[dict] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            context=context,
        )


class NotFoundError(AppError):
    def __init__(self, message: str = "Event not found", context: Optional[dict] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            context=context,
        )


class FetchFailedError(AppError):
    """The persistence layer failed. Distinct from an empty result."""

    def __init__(self, message: str = "Failed to fetch data", context: Optional[dict] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            context=context,
        )


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """FastAPI exception handler for AppError"""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
        extra={"status_code": exc.status_code, **exc.context},
    )
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed query/path parameters are a 400, same body shape as everything else"""
    logger.warning(
        f"Validation error on {request.url.path}",
        extra={"errors": exc.errors(), "method": request.method},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request parameters")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return error_response(exc.status_code, message)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
    return error_response(status.HTTP_429_TOO_MANY_REQUESTS, "Too many requests")


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.critical(
        f"Unexpected error: {type(exc).__name__}",
        extra={"path": request.url.path, "method": request.method},
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
