"""EchoStore API — FastAPI application factory and default instance.

Invariants:
    - Routes registered explicitly, once per configured prefix (no auto-discovery)
    - Every prefix shares the single RecordStore attached to app.state
    - Global error handlers map every failure to an error Envelope
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app(settings) factory: tests and alternate deployments build
      isolated apps (own store, own settings) instead of patching globals
    - Optional routes (readiness) are composable registrations, not copies
    - Release mode hides the OpenAPI docs
"""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from echostore.api.error_handlers import register_error_handlers
from echostore.api.middleware import register_middleware
from echostore.api.routes import health, records, welcome
from echostore.config import Settings, get_settings
from echostore.core.identifiers import IdentifierFactory
from echostore.core.record_store import RecordStore
from echostore.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"EchoStore API started (release_mode={settings.release_mode})",
    )
    yield
    logger.info(
        f"EchoStore API shutting down with {len(app.state.store)} record(s)",
    )


def build_routers(settings: Settings) -> list[APIRouter]:
    """Routers mounted under every prefix, optional ones included per settings."""
    routers = [health.router, welcome.router, records.router]
    if settings.enable_readiness:
        routers.insert(1, health.readiness_router)
    return routers


def create_app(
    settings: Settings | None = None, store: RecordStore | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    docs = not settings.release_mode
    app = FastAPI(
        title="EchoStore API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.settings = settings
    if store is None:
        store = RecordStore(IdentifierFactory(settings.id_strategy))
    app.state.store = store

    register_middleware(app, allow_origin=settings.cors_allow_origin)

    # Duplicate operation ids would collide in OpenAPI; document one prefix only
    for prefix in settings.api_prefixes:
        for router in build_routers(settings):
            app.include_router(
                router, prefix=prefix,
                include_in_schema=prefix == settings.versioned_prefix,
            )

    register_error_handlers(app)
    return app


app = create_app()
