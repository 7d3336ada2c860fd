"""
Health Check Endpoints
"""
from fastapi import APIRouter, Depends

from tourdesk.config import settings
from tourdesk.services.registry import StoreRegistry, get_registry
from tourdesk.utils.redis import get_redis

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check"""
    return {"status": "healthy", "service": settings.SERVICE_NAME}


@router.get("/health/ready")
async def readiness_check(stores: StoreRegistry = Depends(get_registry)):
    """
    Readiness check - verifies the remote service (and Redis, when used) answer
    """
    checks = {"remote_api": await stores.remote.health_check()}

    if settings.CACHE_BACKEND == "redis":
        cache = await get_redis()
        try:
            checks["redis"] = bool(await cache.ping())
        except Exception as e:
            checks["redis"] = False
            checks["redis_error"] = str(e)

    all_healthy = all(value for key, value in checks.items() if not key.endswith("_error"))

    return {
        "status": "ready" if all_healthy else "degraded",
        "checks": checks
    }


@router.get("/health/live")
async def liveness_check():
    """Liveness check - is the service running"""
    return {"status": "alive"}
