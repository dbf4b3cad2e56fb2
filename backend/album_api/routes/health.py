"""
Album Service Backend: Health Check Route
=========================================

What:  Health check endpoint for monitoring and container probes.
How:   Reports version, uptime and the current album count.
Who:   Called by Docker health checks and load balancers.

The store is in-memory with no external dependencies, so a process that can
answer this request is healthy.
"""

import logging
import time

from fastapi import APIRouter, Depends

from album_api import __version__
from album_api.schemas.album import HealthResponse
from album_api.services.album_store import AlbumStore, get_album_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    store: AlbumStore = Depends(get_album_store),
) -> HealthResponse:
    album_count = await store.count()
    logger.debug("Health check: %d albums held", album_count)
    return HealthResponse(
        status="healthy",
        version=__version__,
        album_count=album_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
