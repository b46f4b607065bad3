"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from datetime import datetime, timezone
import platform
from uuid import UUID

from fastapi import APIRouter, Depends

from api.dependencies import get_order_repository
from core.domain.repositories.order_repository import OrderRepository
from core.settings import get_app_settings


router = APIRouter()

# Nil UUID, never assigned to an order
_READINESS_PROBE_ID = UUID(int=0)


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": get_app_settings().service.app_name,
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(
    repository: OrderRepository = Depends(get_order_repository),
):
    """
    Readiness check endpoint.

    Runs a lookup against the configured storage backend.
    """
    await repository.get_by_id(_READINESS_PROBE_ID)
    settings = get_app_settings()
    return {
        "status": "ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "storage": settings.storage.backend,
            "notifications": settings.notifications.backend,
        },
    }
