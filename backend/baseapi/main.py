"""Base API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BaseApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, cache, status catalog, and tax-ID client initialized in the lifespan
      and released on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Cache startup never fails the app: an unreachable Redis only costs performance
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from baseapi.api.error_handlers import register_error_handlers
from baseapi.api.routes import example_status, examples, health
from baseapi.config import get_settings
from baseapi.infrastructure import database as db_module
from baseapi.infrastructure.cache import close_cache, init_cache
from baseapi.infrastructure.database import init_db
from baseapi.infrastructure.observability import setup_logging
from baseapi.infrastructure.status_repository import init_status_repository
from baseapi.infrastructure.tax_id_client import (
    close_tax_id_client, init_tax_id_client,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_all:
        await manager.create_all()
    await init_cache(
        settings.cache_backend,
        settings.redis_url,
        prefix=settings.cache_key_prefix,
        default_ttl=settings.cache_ttl_seconds,
        socket_timeout=settings.redis_socket_timeout_seconds,
    )
    await init_status_repository()
    init_tax_id_client(
        settings.tax_id_service_url, settings.tax_id_timeout_seconds,
    )
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield
    await close_tax_id_client()
    await close_cache()
    if db_module.db_manager:
        await db_module.db_manager.close()
    logger.info(f"{settings.app_name} shutting down")


settings = get_settings()
app = FastAPI(
    title="Base API", version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(examples.router)
app.include_router(example_status.router)

register_error_handlers(app)
