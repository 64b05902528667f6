"""
Health check and monitoring endpoints.
"""
import time
import logging
from fastapi import APIRouter

from app.db import check_database_health
from app.core.settings import settings
from app.core.gifts import GIFT_CATALOG_VERSION, GIFT_KEYS
from app.core.natural_abilities import ABILITY_CATALOG_VERSION, NATURAL_ABILITIES

logger = logging.getLogger("app.health")
router = APIRouter()

_started_at = time.time()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "version": "1.0.0"
    }


@router.get("/health/detailed")
async def detailed_health_check():
    """Detailed health check with service and catalog status."""
    start_time = time.time()

    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "uptime_seconds": round(time.time() - _started_at, 1),
        "services": {},
        "catalogs": {
            "gifts": {"version": GIFT_CATALOG_VERSION, "count": len(GIFT_KEYS)},
            "natural_abilities": {"version": ABILITY_CATALOG_VERSION, "count": len(NATURAL_ABILITIES)},
        },
    }

    db_health = await check_database_health()
    health_status["services"]["database"] = db_health
    if db_health["status"] != "healthy":
        health_status["status"] = "degraded"

    response_time = (time.time() - start_time) * 1000
    health_status["response_time_ms"] = round(response_time, 2)
    return health_status


@router.get("/ready")
async def readiness_check():
    """Kubernetes-style readiness probe."""
    db_health = await check_database_health()
    if db_health["status"] != "healthy":
        logger.warning("Readiness check failed: database unavailable")
        return {"status": "not_ready", "reason": "database_unavailable"}
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """Kubernetes-style liveness probe."""
    return {"status": "alive", "timestamp": time.time()}
