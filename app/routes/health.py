"""
Uploader Backend — Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Reports whether S3 presigning is configured; it does NOT call S3
       (presigning never needs the network, so there is nothing to probe).

Status levels:
    - healthy:   storage settings present, uploads can be issued
    - degraded:  storage settings missing, /get-upload-url answers 500
"""

import logging
import time

from fastapi import APIRouter

from app import __version__
from app.config import settings
from app.schemas.upload import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    storage = "configured"
    overall = "healthy"
    if not settings.storage_configured:
        storage = "not_configured"
        overall = "degraded"
        logger.warning(
            "Health check: storage not configured (missing %s)",
            ", ".join(settings.missing_storage_settings()),
        )

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
