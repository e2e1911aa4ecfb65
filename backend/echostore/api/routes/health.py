"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 with status "healthy" (no dependency probing)
    - GET /ready returns 503 if the app has no store attached

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      load balancer
    - Readiness lives on its own router so create_app can leave it out
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from echostore.api.deps import get_app_settings
from echostore.config import Settings
from echostore.core.uptime import format_duration, uptime_seconds
from echostore.schemas.envelope import HealthSnapshot

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])
readiness_router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthSnapshot)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    elapsed = uptime_seconds()
    return HealthSnapshot(
        uptime=format_duration(elapsed),
        uptime_seconds=elapsed,
        version=settings.app_version,
    )


@readiness_router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — the record store must be attached."""
    if getattr(request.app.state, "store", None) is None:
        logger.warning("Readiness check failed: store unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
