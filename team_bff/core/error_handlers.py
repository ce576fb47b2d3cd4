"""Error Handlers: global exception handlers shaping every error envelope.

Invariants:
    - Every error response is {"success": false, "status": <code>, "message": <text>}
    - A 500 never leaks its message; it is replaced with "Internal Server Error"
    - 500-class errors are logged with request context
    - RequestValidationError maps to 400; unknown routes and unsupported methods to 404
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal Server Error"


def register_exception_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def build_error_response(
    request: Request,
    status_code: int,
    message: str,
    exc: Exception | None = None,
    headers: dict[str, str] | None = None,
    **extra,
) -> JSONResponse:
    """Shape the JSON error envelope and log server errors."""
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            message,
            exc_info=exc,
            extra={
                "method": request.method,
                "path": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )
        message = GENERIC_SERVER_ERROR

    content = {
        "success": False,
        "status": status_code,
        "message": message,
        **extra,
    }
    if request.app.state.settings.debug and exc is not None:
        content["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )

    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for AppException and framework HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Handle application and routing errors."""
        if _is_unmatched_route(exc):
            return build_error_response(
                request,
                status.HTTP_404_NOT_FOUND,
                f"Route not found: {request.url.path}",
                exc=exc,
            )
        return build_error_response(
            request,
            exc.status_code,
            str(exc.detail),
            exc=exc,
            headers=getattr(exc, "headers", None),
        )


def _is_unmatched_route(exc: StarletteHTTPException) -> bool:
    # Router-raised 404 and 405 both mean no route serves this method and path
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return exc.detail == "Not Found"
    return exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies and parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        return build_error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Invalid request data",
            errors=errors,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        return build_error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Unhandled exception: {type(exc).__name__}: {exc}",
            exc=exc,
        )
