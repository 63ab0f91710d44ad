# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from app.dependencies import StoreDep

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    storage: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness text."""
    return "Udaaro Backend Live"


@router.get("/healthz", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(status="OK")


@router.get("/healthz/ready", response_model=ReadinessResponse)
def readiness_check(store: StoreDep):
    """
    Readiness check endpoint.

    Checks that the record store is reachable and writable.
    """
    try:
        store.check()
        storage = "healthy"
    except Exception as e:
        logger.warning(f"Readiness check failed: {e}")
        storage = f"unhealthy: {str(e)[:50]}"

    return ReadinessResponse(
        status="ready" if storage == "healthy" else "degraded",
        storage=storage,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
