"""Error handling middleware.

Every error leaves the API as ``{"error", "message", "path"}``; request
validation failures add ``details`` and the offending ``fields``.
"""

from typing import Any

import structlog
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppException

logger = structlog.get_logger()


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: Any,
    **extra: Any,
) -> JSONResponse:
    """Build the JSON error body shared by all handlers."""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "path": str(request.url), **extra},
    )


def _field_path(location: tuple | list) -> str:
    # ("query", "view") -> "view"; body locations keep their nesting
    source, *parts = location
    if source == "body":
        return ".".join(str(part) for part in parts)
    return str(parts[0]) if parts else str(source)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle application exceptions.

    Unknown appointments (404) and rejected status changes (409) are
    routine console traffic and log at info and warning respectively.

    Args:
        request: Request object
        exc: Application exception

    Returns:
        JSON error response
    """
    log = logger.warning if exc.status_code == status.HTTP_409_CONFLICT else logger.info
    log(
        "app_exception",
        error=exc.__class__.__name__,
        message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
    )
    return error_response(request, exc.status_code, exc.__class__.__name__, exc.message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle routing errors such as unknown paths and disallowed methods."""
    return error_response(request, exc.status_code, "HTTPException", exc.detail)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle validation errors, including unknown view modes and statuses.

    Args:
        request: Request object
        exc: Validation exception

    Returns:
        JSON error response listing the rejected fields
    """
    errors = jsonable_encoder(exc.errors())
    fields = sorted({_field_path(error["loc"]) for error in errors})

    logger.info("request_validation_failed", path=request.url.path, fields=fields)
    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "ValidationError",
        "Request validation failed",
        details=errors,
        fields=fields,
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with a generic 500."""
    logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "An unexpected error occurred",
    )
