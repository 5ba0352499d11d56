"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance
and wires the record store and audit log in the lifespan.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from src.adapters.audit.file_log import FileAuditLog
from src.adapters.repository.flatfile import FlatFileRecordStore
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration API v1 - Validate and store user registrations",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Loads the flat-file record store on startup
    - Opens the audit log location on startup
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Loading records from %s", settings.store_path)

    store = FlatFileRecordStore(settings.store_path)
    store.load()

    # Store adapters in app state for dependency injection
    app.state.store = store
    app.state.audit_log = FileAuditLog(settings.audit_log_path)

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="flatreg",
    description="Registration API - Validates submissions and stores users in a flat file",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | int]:
    """
    Health check endpoint with store status.

    Returns 200 OK with the number of loaded records.
    """
    store = request.app.state.store
    return {"status": "healthy", "records": len(store)}
