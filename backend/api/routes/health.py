"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import ServiceContainer, get_container
from shared.models import utc_now

router = APIRouter()


class ServiceStatus(BaseModel):
    """Per-component status reported by /health."""

    mirror: str
    storage: str
    api: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    timestamp: datetime
    services: ServiceStatus


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    store: str
    mirror: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_container),
) -> HealthResponse:
    """
    Basic health check endpoint.

    Reports which mirror mode is active so a demo deployment is visible.
    """
    mode = container.mirror.mode.value
    return HealthResponse(
        status="healthy",
        version=container.settings.app_version,
        timestamp=utc_now(),
        services=ServiceStatus(
            mirror=mode,
            storage="operational",
            api="running",
        ),
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    The store is ready once built; the mirror is always usable because
    demo mode is the fallback.
    """
    store = container.store
    return ReadinessResponse(
        status="ready",
        store="seeded" if store.stats.get() is not None else "empty",
        mirror=container.mirror.mode.value,
    )
