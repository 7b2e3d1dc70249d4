"""Error Handlers — global exception handlers for the barcode API.

Invariants:
    - BarcodeServiceError → plain-text body carrying exc.message, exc.http_status
    - Exception (catch-all) → 500 plain text, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (BarcodeServiceError), catch-all (Exception)
    - Plain text over JSON envelopes: clients display the message verbatim
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from barcode_image_service.core.errors import BarcodeServiceError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:
    """Register validation/encoding error handler."""

    @app.exception_handler(BarcodeServiceError)
    async def service_error_handler(request: Request, exc: BarcodeServiceError):
        """Handle all rejected render requests."""
        logger.warning(
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "param": exc.param,
            },
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
