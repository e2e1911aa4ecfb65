"""Error Handlers — global exception handlers for the EchoStore API.

Invariants:
    - EchoStoreError → error Envelope with the error's own HTTP status
    - RequestValidationError → 400 error Envelope
    - HTTPException (404, 405, ...) → error Envelope, status and headers preserved
    - Exception (catch-all) → 500 error Envelope with CORS headers, never leaks
      internal details

Design Decisions:
    - Four-layer handler: domain, validation, framework HTTP, catch-all
    - Extracted from main.py: create_app stays a flat list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from echostore.api.middleware import cors_headers
from echostore.core.errors import EchoStoreError, ErrorSeverity
from echostore.schemas.envelope import Envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register EchoStore domain error handler."""

    @app.exception_handler(EchoStoreError)
    async def domain_error_handler(request: Request, exc: EchoStoreError):
        """Handle all EchoStore domain errors."""
        log = logger.warning if exc.severity in (
            ErrorSeverity.INFO, ErrorSeverity.WARNING,
        ) else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "record_id": exc.context.record_id,
                "debug_info": exc.context.debug_info,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=Envelope.error("Invalid request data").render(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing-level HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Wrap 404/405 and friends in the error Envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content=Envelope.error(str(exc.detail)).render(),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=Envelope.error("Internal server error").render(),
            headers=cors_headers(request.app.state.settings.cors_allow_origin),
        )
