"""System status endpoints for the Inkwell API."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter

from inkwell.api.v1.dependencies import ServicesDep
from inkwell.core.errors import StoreError
from inkwell.core.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def get_system_health(services: ServicesDep) -> dict[str, object]:
    """Health check covering the document store.

    Returns:
        Dictionary with overall status, component health and version
    """
    try:
        services.store.count_profiles()
        store_status = "healthy"
    except StoreError as exc:
        logger.error("Health check could not reach the store: %s", exc)
        store_status = "unhealthy"

    return {
        "status": "healthy" if store_status == "healthy" else "unhealthy",
        "timestamp": int(time.time()),
        "components": {"store": store_status},
        "version": settings.app_version,
    }


@router.get("/stats")
async def get_runtime_stats(services: ServicesDep) -> dict[str, object]:
    """Expose cache and rate-limiter state for tooling.

    Returns:
        Dictionary with cache size and TTL and the limiter's remaining budget
    """
    limiter = services.limiter
    return {
        "cache": {
            "entries": len(services.cache),
            "ttl_seconds": services.cache.ttl_seconds,
        },
        "rate_limit": {
            "limit": limiter.limit,
            "window_seconds": limiter.window_seconds,
            "remaining": limiter.remaining(),
        },
    }
