"""
Application entry point.

Creates the FastAPI application and wires together:
- The user store (one per application, injected into repositories)
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, CORS, rate limiting)
- Logging configuration and request logging

No business logic belongs here.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_service.core.config import Settings
from user_service.core.config import settings as default_settings
from user_service.infrastructure.users.in_memory_store import InMemoryUserStore
from user_service.interfaces.health import router as health_router
from user_service.interfaces.users.router import router as users_router
from user_service.shared.errors.handlers import register_error_handlers
from user_service.shared.logging import configure_logging
from user_service.shared.request_logging import RequestLoggingMiddleware
from user_service.shared.security.headers import SecurityHeadersMiddleware
from user_service.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    parse_rate_limits,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log start-up and shutdown."""
    settings: Settings = app.state.settings
    logger.info(
        "Server started: environment=%s, api_prefix=%s, version=%s",
        settings.environment,
        settings.api_prefix,
        settings.version,
    )
    yield
    logger.info(
        "Server shutting down; discarding %d in-memory user(s)",
        app.state.user_store.count(),
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InMemoryUserStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root: it owns the user store and hands it to
    the dependency functions through ``app.state``.

    Args:
        settings: Configuration to use. Defaults to the environment-loaded settings.
        store: Backing store for users. A fresh empty store when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, log_dir=settings.log_dir)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.user_store = store if store is not None else InMemoryUserStore()
    app.state.started_at = time.monotonic()

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.state.rate_limits = parse_rate_limits(settings.rate_limit_default)
    api_dependencies = [Depends(enforce_rate_limit)]

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware, headers=settings.security_headers)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app, expose_internal_errors=settings.is_development)

    # --- Routers ---
    app.include_router(
        health_router, prefix=settings.api_prefix, dependencies=api_dependencies
    )
    app.include_router(
        users_router, prefix=settings.api_prefix, dependencies=api_dependencies
    )

    return app


app = create_app()
