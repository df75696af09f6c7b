"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, routes, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta

import uvicorn
from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository import (
    InMemoryUserStore,
    InMemoryVerificationStore,
    PostgresUserStore,
    PostgresVerificationStore,
    run_migrations,
)
from src.adapters.transport import build_transport
from src.api.errors import register_exception_handlers
from src.api.routes import router
from src.config.settings import get_settings
from src.domain.registration import utc_now
from src.domain.validation import Validator

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Verification code registration and password login",
    },
]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the storage backend (connection pool + migrations, or in-memory)
    - Creates the transport, validator, and code settings from settings
    - Closes transport and connection pool on shutdown
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting application...")

    pool = None
    if settings.storage_backend == "postgres":
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=True,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        app.state.verification_store = PostgresVerificationStore(pool)
        app.state.user_store = PostgresUserStore(pool)
    else:
        logger.warning("Using in-memory storage, data will not survive a restart")
        app.state.verification_store = InMemoryVerificationStore()
        app.state.user_store = InMemoryUserStore()

    app.state.pool = pool
    app.state.validator = Validator(settings.identifier_mode, settings.strict_length_checks)
    app.state.transport = build_transport(settings)
    app.state.code_ttl = timedelta(seconds=settings.code_ttl_seconds)
    app.state.message_template = settings.code_message_template
    app.state.clock = utc_now

    logger.info(
        "Application startup complete (identifier mode: %s, transport: %s)",
        settings.identifier_mode,
        settings.transport,
    )

    yield

    # Shutdown
    logger.info("Shutting down application...")
    close_transport = getattr(app.state.transport, "close", None)
    if close_transport is not None:
        close_transport()
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="codegate",
    description="User registration with one-time verification codes and password login",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_exception_handlers(app)
app.include_router(router)


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = request.app.state.pool
    if pool is not None:
        with pool.connection() as conn:
            conn.execute("SELECT 1")

    return {"status": "healthy"}


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
