"""
Global error handlers registered on the FastAPI application.

Every failure leaves the service in the same shape:

    {
        "error": true,
        "error_code": "SOURCE_API_TIMEOUT",
        "message": "Source API request timed out.",
        "details": { ... },
        "request_id": "abc-123"
    }
"""

import uuid
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modelgen.core.exceptions import AppException
from modelgen.core.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        logger.error(
            "Application error",
            extra={
                "error_code": exc.error_code,
                "status_code": exc.status_code,
                "details": exc.details,
                "path": request.url.path,
            },
        )
        return _error_response(request, exc.status_code, exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(loc) for loc in err.get("loc", [])),
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.warning(
            "Request validation failed",
            extra={"path": request.url.path, "validation_errors": errors},
        )
        return _error_response(
            request,
            422,
            {
                "error": True,
                "error_code": "VALIDATION_ERROR",
                "message": "Request validation failed.",
                "details": {"errors": errors},
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.warning(
            "HTTP error",
            extra={"status_code": exc.status_code, "path": request.url.path},
        )
        return _error_response(
            request,
            exc.status_code,
            {"error": True, "error_code": "HTTP_ERROR", "message": str(exc.detail)},
        )

    # Transformer / post-process failures surface here.
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.critical(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "exception_type": type(exc).__name__,
            },
            exc_info=True,
        )
        return _error_response(
            request,
            500,
            {
                "error": True,
                "error_code": "INTERNAL_ERROR",
                "message": "An unexpected internal error occurred.",
            },
        )


# ─── Helpers ──────────────────────────────────────────────────────────


def _error_response(
    request: Request, status_code: int, body: dict[str, Any]
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None) or uuid.uuid4().hex
    return JSONResponse(
        status_code=status_code,
        content={**body, "request_id": request_id},
        headers={"X-Request-ID": request_id},
    )
