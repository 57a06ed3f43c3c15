# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from roster.core.config import settings
from roster.core.context import RosterContext
from roster.core.dependencies import get_context

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(context: RosterContext = Depends(get_context)):
    """Liveness probe for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "people_count": context.people.count(),
        "teams_count": context.teams.count(),
    }


@router.get("/health/ready")
async def readiness_check(context: RosterContext = Depends(get_context)):
    """Readiness probe — verifies the storage backend answers."""
    storage_ok = context.store.ping()
    body = {
        "status": "ready" if storage_ok else "not_ready",
        "service": settings.SERVICE_NAME,
        "storage": settings.STORAGE_BACKEND,
        "storage_ok": storage_ok,
    }
    return JSONResponse(status_code=200 if storage_ok else 503, content=body)


@router.get("/metrics")
async def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
