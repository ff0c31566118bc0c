# =============================================================================
# app/routers/system.py - API Metadata and Process Status
# =============================================================================
# Authenticated endpoints describing the API and the running process.
# =============================================================================

import platform
import sys
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import API_KEY_HEADER, API_VERSION
from lib.utils import process_uptime

try:
    import resource
except ImportError:  # Windows
    resource = None

router = APIRouter()

ENDPOINTS = [
    "GET /health - Public health check",
    "GET /ready - Public readiness check",
    "GET /api/v1/info - API information (requires API key)",
    "GET /api/v1/status - System status (requires API key)",
    "GET /api/v1/users - Get all users (requires API key)",
    "GET /api/v1/users/{id} - Get user by ID (requires API key)",
    "GET /api/v1/users/search?name=xxx - Search users (requires API key)",
    "POST /api/v1/users - Create user (requires API key)",
    "PUT /api/v1/users/{id} - Update user (requires API key)",
    "DELETE /api/v1/users/{id} - Delete user (requires API key)",
]


# =============================================================================
# Response Models
# =============================================================================

class AuthenticationInfo(BaseModel):
    type: str = "API Key"
    header: str = API_KEY_HEADER
    required: bool = True


class InfoResponse(BaseModel):
    """API metadata."""
    name: str
    version: str
    description: str
    endpoints: list[str]
    authentication: AuthenticationInfo


class MemoryInfo(BaseModel):
    maxRss: float | None
    unit: str = "MB"


class SystemInfo(BaseModel):
    pythonVersion: str
    platform: str
    uptime: float
    memory: MemoryInfo


class StatusResponse(BaseModel):
    """Snapshot of the running process."""
    success: bool = True
    status: str
    timestamp: str
    system: SystemInfo


def _max_rss_mb() -> float | None:
    """Peak resident set size of this process in MB, if the OS reports it."""
    if resource is None:
        return None
    max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # Linux reports kilobytes, macOS reports bytes
    divisor = 1024 * 1024 if sys.platform == "darwin" else 1024
    return round(max_rss / divisor, 1)


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/info", response_model=InfoResponse)
async def api_info():
    """
    Describe the API and how to authenticate.
    """
    return InfoResponse(
        name="Users API",
        version=API_VERSION,
        description="User directory microservice with API key authentication",
        endpoints=ENDPOINTS,
        authentication=AuthenticationInfo(),
    )


@router.get("/status", response_model=StatusResponse)
async def system_status():
    """
    Report interpreter, platform, uptime and memory of this process.
    """
    return StatusResponse(
        status="operational",
        timestamp=datetime.now(timezone.utc).isoformat(),
        system=SystemInfo(
            pythonVersion=platform.python_version(),
            platform=sys.platform,
            uptime=process_uptime(),
            memory=MemoryInfo(maxRss=_max_rss_mb()),
        ),
    )
