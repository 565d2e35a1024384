"""TabRelay API — FastAPI application factory and process entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TabRelayError → {"error": message} responses
    - CORS headers fixed and permissive on every response; OPTIONS short-circuited
    - One UpstreamTabClient per app, created and closed by the lifespan
    - Settings passed into create_app(); nothing reads the environment at import time

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Application factory: tests build an app per test with their own Settings
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tabrelay.api.cors import PermissiveCORSMiddleware
from tabrelay.api.error_handlers import register_error_handlers
from tabrelay.api.routes import health, search, tabs
from tabrelay.config import Settings, get_settings
from tabrelay.infrastructure.observability import setup_logging
from tabrelay.infrastructure.upstream_client import UpstreamTabClient

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the FastAPI application for the given settings."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        app.state.upstream_client = UpstreamTabClient(
            base_url=settings.upstream_base_url,
            user_agent=settings.upstream_user_agent,
            timeout_seconds=settings.upstream_timeout_seconds,
        )
        logger.info(
            f"TabRelay API started on port {settings.port}",
            extra={"port": settings.port},
        )
        try:
            yield
        finally:
            await app.state.upstream_client.aclose()
            logger.info("TabRelay API shutting down")

    app = FastAPI(title="TabRelay API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(PermissiveCORSMiddleware)

    app.include_router(health.router)
    app.include_router(search.router)
    app.include_router(tabs.router)

    register_error_handlers(app)
    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
