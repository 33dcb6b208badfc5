"""
Application entry point.

Creates the FastAPI application and wires together:
- Record store engine and repository (one per process)
- Routers (health and products)
- Error handlers (centralized domain-to-HTTP mapping)
- Access policy, CORS and security headers middleware
- Rate limiting (an application-wide dependency)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from catalog.core.config import Settings, get_settings
from catalog.infrastructure.database import (
    build_engine,
    build_session_factory,
    connect_db,
)
from catalog.infrastructure.products.repository import SqlAlchemyProductRepository
from catalog.interfaces.health import router as health_router
from catalog.interfaces.products.router import router as products_router
from catalog.shared.errors.handlers import register_error_handlers
from catalog.shared.logging import AccessLogMiddleware, configure_logging
from catalog.shared.security.headers import SecurityHeadersMiddleware
from catalog.shared.security.origin import OriginPolicyMiddleware
from catalog.shared.security.rate_limiting import (
    build_limiter,
    build_rate_limit_dependency,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: check the record store, dispose it on shutdown.

    A failed connection is logged by connect_db and does not stop startup.
    """
    app.state.store_ready = await connect_db(app.state.engine)
    if not app.state.store_ready:
        logger.warning("Starting without a reachable record store")

    yield

    await app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Explicit settings; the process-wide ones when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level)
    limiter = build_limiter(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        debug=settings.debug,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
        dependencies=[Depends(build_rate_limit_dependency(limiter, settings))],
    )
    app.state.settings = settings

    # --- Record Store ---
    engine = build_engine(settings)
    app.state.engine = engine
    app.state.product_repository = SqlAlchemyProductRepository(
        build_session_factory(engine)
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
    )
    # Middleware added later wraps earlier ones: origin check precedes CORS.
    app.add_middleware(
        OriginPolicyMiddleware,
        allowed_origin=settings.frontend_url,
        guarded_prefix=settings.api_prefix,
    )
    app.add_middleware(AccessLogMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(products_router, prefix=settings.api_prefix)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run("catalog.main:app", host="0.0.0.0", port=8000)
