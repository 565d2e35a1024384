"""Error Handlers — global exception handlers for the TabRelay API.

Invariants:
    - TabRelayError → {"error": message} with the error's http_status
    - Starlette HTTPException (404, 405) → {"error": detail}, original headers kept
    - Exception (catch-all) → 500 {"error": "Internal server error"}, never leaks internals
    - The catch-all runs in ServerErrorMiddleware, outside PermissiveCORSMiddleware,
      so it sets CORS_HEADERS itself
    - A gateway error raised from an UpstreamError is logged once: the route logs the
      cause at ERROR, this handler at WARNING

Design Decisions:
    - Three-layer handler: domain (TabRelayError), routing (HTTPException), catch-all (Exception)
    - Extracted from main.py so create_app() stays a flat list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tabrelay.api.cors import CORS_HEADERS
from tabrelay.core.errors import TabRelayError, UpstreamError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tabrelay_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_tabrelay_error_handler(app: FastAPI) -> None:
    """Register TabRelay domain/gateway error handler."""

    @app.exception_handler(TabRelayError)
    async def tabrelay_error_handler(request: Request, exc: TabRelayError):
        already_logged = isinstance(exc.__cause__, UpstreamError)
        level = (
            logging.WARNING
            if exc.http_status < 500 or already_logged
            else logging.ERROR
        )
        logger.log(
            level,
            f"TabRelayError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
            headers=CORS_HEADERS,
        )
