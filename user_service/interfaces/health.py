"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns status, uptime, environment and version.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from user_service.application.users.dtos import isoformat
from user_service.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, uptime and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    state = request.app.state
    return HealthResponse(
        status="healthy",
        timestamp=isoformat(datetime.now(timezone.utc)),
        uptime=round(time.monotonic() - state.started_at, 3),
        environment=state.settings.environment,
        version=state.settings.version,
    )
