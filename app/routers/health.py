# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides liveness and readiness probes for monitoring and load balancers.
# Public: no API key, no dependency on the user store.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Callable

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from app.dependencies import SettingsDep
from lib.utils import process_uptime

logger = logging.getLogger(__name__)

router = APIRouter()

# A readiness check returns True when its dependency is usable
ReadinessCheck = Callable[[], bool]


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Liveness response."""
    status: str
    timestamp: str
    uptime: float
    environment: str


class ReadinessResponse(BaseModel):
    """Readiness response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _run_checks(checks: list[ReadinessCheck]) -> bool:
    for check in checks:
        try:
            if not check():
                return False
        except Exception as e:
            logger.warning(f"Readiness check {getattr(check, '__name__', check)!s} failed: {e}")
            return False
    return True


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Liveness endpoint.

    Always answers while the process is up.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        uptime=process_uptime(),
        environment=settings.ENVIRONMENT,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse, "description": "Not ready"}},
)
async def readiness_check(request: Request, response: Response):
    """
    Readiness endpoint.

    Runs every check registered on app.state.readiness_checks.
    With no checks registered the service is always ready.
    """
    checks: list[ReadinessCheck] = getattr(request.app.state, "readiness_checks", [])

    if _run_checks(checks):
        return ReadinessResponse(status="ready", timestamp=_now())

    response.status_code = 503
    return ReadinessResponse(status="not ready", timestamp=_now())
