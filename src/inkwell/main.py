# src/inkwell/main.py
"""Main entry point for the Inkwell application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from inkwell.api.v1 import (
    applications_router,
    articles_router,
    auth_router,
    chat_router,
    moderation_router,
    system_router,
    users_router,
)
from inkwell.core.settings import settings
from inkwell.db.session import create_tables
from inkwell.services.container import get_services

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Inkwell API",
    description="Moderated blogging and live chat",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(articles_router, prefix="/api/v1")
app.include_router(chat_router, prefix="/api/v1")
app.include_router(applications_router, prefix="/api/v1")
app.include_router(moderation_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    create_tables()
    logger.info("%s %s started", settings.app_name, settings.app_version)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    if get_services.cache_info().currsize:
        get_services().close()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Moderated blogging and live chat",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("inkwell.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
