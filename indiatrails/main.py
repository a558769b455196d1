"""
FastAPI application entry point.
Challenge: Mount routes, middleware (errors, CORS, Prometheus), logging and engine lifecycle.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from indiatrails.api.router import api_router
from indiatrails.config import get_settings
from indiatrails.core.logging import configure_logging
from indiatrails.core.middleware import ExceptionHandlerMiddleware
from indiatrails.db.session import engine
from indiatrails.exceptions import (
    IndiaTrailsError,
    indiatrails_exception_handler,
    validation_exception_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log boot. Shutdown: release pooled DB connections."""
    logger.info("Starting %s", app.title)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)
    app = FastAPI(
        title=settings.app_name,
        description="Regions, walks and difficulties of Indian trekking trails, with JWT auth.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(IndiaTrailsError, indiatrails_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Catch-all: opaque 500 with a correlation id
    app.add_middleware(ExceptionHandlerMiddleware)

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
