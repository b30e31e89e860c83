"""
car_registry.api.app

FastAPI app factory for the Car Registry service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from car_registry import __version__
from car_registry.api.errors import register_error_handlers
from car_registry.api.routers.cars import router as cars_router
from car_registry.api.routers.health import router as health_router
from car_registry.db.init_db import init_db
from car_registry.db.session import create_engine, create_sessionmaker
from car_registry.observability.logging import configure_logging, get_logger
from car_registry.observability.middleware import RequestContextMiddleware
from car_registry.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # Routers obtain sessions via dependencies (see `car_registry.api.deps`).
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create tables automatically. Prod uses Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Car Registry",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(cars_router, prefix=settings.api_prefix)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; request handling lives in routers, persistence in
# the service/repository layers.
