# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides API key authentication for the /api/v1 subtree.
#
# Usage:
#   from app.auth import require_api_key
#
#   app.include_router(router, prefix="/api/v1", dependencies=[Depends(require_api_key)])
# =============================================================================

from app.auth.dependencies import api_key_header, require_api_key
from app.auth.models import AUTH_RESPONSES, AuthErrorResponse

__all__ = [
    "api_key_header",
    "require_api_key",
    "AUTH_RESPONSES",
    "AuthErrorResponse",
]
