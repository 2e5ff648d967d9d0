"""
FastAPI application factory.

Run with:
    uvicorn planet_visibility.server.app:app
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..api.core.config import Settings, get_settings
from ..api.core.exceptions import InvalidInputError
from ..api.ephemeris import SkyfieldEphemeris
from .middleware import LoggingMiddleware, RateLimitMiddleware, RateLimitStore
from .routes import router


logger = logging.getLogger(__name__)


__all__ = ["app", "create_app"]


async def _invalid_input_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info(f"Rejected {request.url.path}: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=400)


def create_app(settings: Settings | None = None, ephemeris: SkyfieldEphemeris | None = None) -> FastAPI:
    """
    Build the HTTP application.

    Args:
        settings: Application settings (default: read from the environment)
        ephemeris: Ephemeris to serve from (default: load the configured kernel on first request)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="planet-visibility", version=__version__)
    app.state.settings = settings
    app.state.ephemeris = ephemeris
    app.state.rate_limit_store = RateLimitStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
        max_age=86400,
    )
    if settings.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware, store=app.state.rate_limit_store, limit=settings.rate_limit_per_minute
        )
    if settings.request_logging_enabled:
        app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(InvalidInputError, _invalid_input_handler)
    app.include_router(router)
    return app


app = create_app()
