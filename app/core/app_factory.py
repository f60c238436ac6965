"""Application factory for the FastAPI app.

Centralizes app construction (metadata, middleware, handlers, routers and the
per-application rate limiter) so tests can build isolated instances.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import audit_router, health_router, integrations_router
from app.core.config import settings
from app.core.exception_handlers import setup_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import request_id_middleware
from app.core.openapi import apply_openapi_customizations
from app.core.rate_limit import build_rate_limiter, enforce_rate_limit

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

_HTTP_METHODS = ("get", "post", "put", "patch", "delete")


def list_routes(app: FastAPI) -> list[str]:
    """Return ``"METHOD /path"`` entries for every documented route, docs excluded."""
    entries: list[str] = []
    for path, operations in app.openapi().get("paths", {}).items():
        for method in _HTTP_METHODS:
            if method in operations:
                entries.append(f"{method.upper():<4} {path}")
    return entries


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "server.started",
        extra={
            "port": settings.server.port,
            "routes": list_routes(app),
        },
    )
    try:
        yield
    finally:
        app.state.rate_limiter.reset()
        logger.info("server.stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance.

    Returns:
        Configured FastAPI app with middleware, handlers, routers and docs.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    app = FastAPI(
        title="Contract Audit API",
        description=(
            "Mock endpoints for a smart-contract security audit workflow. "
            "Findings are canned; no real analysis is performed. Routes under "
            "/api are rate limited per client IP."
        ),
        version="0.1.0",
        lifespan=lifespan,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )

    # Per-application state: counters live as long as this app instance
    app.state.rate_limiter = build_rate_limiter(settings.app)

    # Middleware
    app.middleware("http")(request_id_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.log.request_id_header],
    )

    # Exception handlers
    setup_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(
        audit_router,
        prefix=API_PREFIX,
        dependencies=[Depends(enforce_rate_limit)],
    )
    app.include_router(
        integrations_router,
        prefix=API_PREFIX,
        dependencies=[Depends(enforce_rate_limit)],
    )

    apply_openapi_customizations(app)

    return app
