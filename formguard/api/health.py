"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from formguard.models.responses import HealthResponse, HealthDependency
from formguard.validators import validation_engine

router = APIRouter()

_started_at = time.monotonic()


async def _redis_health(redis) -> HealthDependency:
    if redis is None:
        return HealthDependency(status="unhealthy", message="Redis is not connected")
    try:
        start = time.perf_counter()
        await redis.ping()
    except Exception as e:
        return HealthDependency(status="unhealthy", message=str(e))
    return HealthDependency(
        status="healthy",
        latency_ms=round((time.perf_counter() - start) * 1000, 2),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Service health: validation is always available, storage depends on Redis."""
    dependencies = {
        "redis": await _redis_health(getattr(request.app.state, "redis", None)),
    }

    # Validation works without Redis
    status = "healthy" if all(d.status == "healthy" for d in dependencies.values()) else "degraded"

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.monotonic() - _started_at, 2),
        validators=[v.name for v in validation_engine.validators],
        dependencies=dependencies,
    )
