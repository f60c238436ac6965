"""Global exception handlers for consistent error responses.

Design:
- ValidationAppError / malformed body -> 400 (client fault)
- ProcessingAppError -> 500 with a stable, endpoint-specific message
- Unexpected Exception -> generic 500 (safety net)
- All responses include request_id for tracing
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import AppError, ProcessingAppError, ValidationAppError
from app.core.logging import get_request_id

logger = logging.getLogger(__name__)


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    error_content = {
        "code": code,
        "message": message,
        "request_id": get_request_id(),
    }
    if details:
        error_content["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error_content})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle domain application errors with consistent JSON format.

    Routes domain errors to HTTP status codes:
    - ValidationAppError -> 400 Bad Request
    - ProcessingAppError -> 500 Internal Server Error
    - any other AppError -> 400

    Args:
        request: FastAPI request object.
        exc: AppError instance (or subclass).

    Returns:
        JSONResponse with appropriate status code and error details.
    """
    status_code = 500 if isinstance(exc, ProcessingAppError) else 400

    # Rejected input is routine; keep it out of the default log stream.
    level = logging.DEBUG if isinstance(exc, ValidationAppError) else logging.WARNING
    logger.log(
        level,
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "error_message": exc.message,
            "status_code": status_code,
            "has_details": bool(exc.details),
            "request_path": request.url.path,
        },
    )

    return _error_response(status_code, exc.code, exc.message, exc.details)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map FastAPI body parsing failures to a 400 instead of 422."""
    logger.debug(
        "request_body_rejected",
        extra={
            "request_path": request.url.path,
            "error_count": len(exc.errors()),
        },
    )
    return _error_response(
        400,
        "invalid_request_body",
        "Request body must be a JSON object",
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected errors (safety net).

    Logs the full exception server-side while returning a generic message.
    No stack traces or exception text reach the client.
    """
    logger.error(
        "unhandled_exception",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "request_path": request.url.path,
            "request_method": request.method,
        },
    )

    return _error_response(
        500,
        "internal_server_error",
        "Internal server error",
    )


def setup_exception_handlers(app) -> None:
    """Register all exception handlers with FastAPI app.

    Must be called during app initialization, before route registration.

    Args:
        app: FastAPI application instance.
    """
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(RequestValidationError)(request_validation_error_handler)
    app.exception_handler(Exception)(general_exception_handler)
