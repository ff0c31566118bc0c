# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Liveness and readiness probes (public)
# - system.py: API metadata and process status (API key required)
# - users.py: User CRUD endpoints (API key required)
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import system
from . import users

__all__ = [
    "health",
    "system",
    "users",
]
