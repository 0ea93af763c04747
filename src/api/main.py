"""
Rides API application.

Builds the FastAPI app and opens the ride store in its lifespan.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.errors import register_exception_handlers
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Rides API v1 - Record rides and browse them page by page",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the ride store for the lifetime of the app.

    The pool is built once from settings, the rides schema is applied,
    and the pool is parked on ``app.state`` for ``get_pool``. It is
    closed when the server stops.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    logger.info(
        "Opened ride store pool (min=%d, max=%d)",
        settings.pool_min_size,
        settings.pool_max_size,
    )

    run_migrations(pool)
    app.state.pool = pool
    logger.info("Rides API ready")

    try:
        yield
    finally:
        pool.close()
        logger.info("Ride store pool closed")


app = FastAPI(
    title="rides",
    description="Rides API - Record pickup/dropoff rides and retrieve them with pagination",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Storage errors are reported as 500 SERVER_ERROR.
    """
    pool = request.app.state.pool
    with pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}
