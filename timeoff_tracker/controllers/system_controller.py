# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints: health, readiness, metrics.
Pure HTTP layer, no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from pymongo.database import Database
from pymongo.errors import PyMongoError
from starlette.responses import Response

from timeoff_tracker.core.config import settings
from timeoff_tracker.core.dependencies import get_database, get_member_repo, get_timeoff_repo
from timeoff_tracker.repositories.member_repository import MemberRepository
from timeoff_tracker.repositories.timeoff_repository import TimeOffRepository

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Liveness check for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/ready")
def readiness_check(
    database: Database = Depends(get_database),
    member_repo: MemberRepository = Depends(get_member_repo),
    timeoff_repo: TimeOffRepository = Depends(get_timeoff_repo),
):
    """Readiness check: verifies the document store answers a ping."""
    try:
        database.command("ping")
        members_count = member_repo.count()
        timeoff_count = timeoff_repo.count()
    except PyMongoError as exc:
        raise HTTPException(status_code=503, detail=f"Database unavailable: {exc}")
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "database": "connected",
        "members_count": members_count,
        "timeoff_count": timeoff_count,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
