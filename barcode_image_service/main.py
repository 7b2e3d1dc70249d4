"""Barcode Image Service — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BarcodeServiceError → 400 plain-text responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - create_app() factory so tests build an app with the same wiring
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barcode_image_service.api.error_handlers import register_error_handlers
from barcode_image_service.api.routes import barcode, health
from barcode_image_service.config import get_settings
from barcode_image_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} started")
    yield
    logger.info(f"{settings.service_name} shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Barcode Image Service",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # CORS — configured from settings, not hardcoded
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(barcode.router)

    register_error_handlers(app)
    return app


app = create_app()
