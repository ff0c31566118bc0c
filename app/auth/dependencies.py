# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# API key gate for the protected /api/v1 subtree.
#
# The dependency is attached to the router in main.py, so it runs before
# any handler in the subtree:
# - No X-API-Key header  -> 401
# - Wrong key            -> 403
# - Matching key         -> request continues untouched
#
# Usage:
#   app.include_router(router, dependencies=[Depends(require_api_key)])
# =============================================================================

import hmac
import logging

from fastapi import Request, Security
from fastapi.security import APIKeyHeader

from app.config import API_KEY_HEADER
from app.dependencies import SettingsDep
from core.errors import ForbiddenError, UnauthenticatedError
from lib.utils import redact_secret

logger = logging.getLogger(__name__)

# Header extractor; auto_error=False so a missing key reaches our own 401
api_key_header = APIKeyHeader(
    name=API_KEY_HEADER,
    auto_error=False,
    description="API key required for all /api/v1/* endpoints",
)


def _audit(level: int, message: str) -> None:
    try:
        logger.log(level, message)
    except Exception:
        # Audit logging must never block the request
        pass


async def require_api_key(
    request: Request,
    settings: SettingsDep,
    api_key: str | None = Security(api_key_header),
) -> None:
    """
    Validate the X-API-Key header against the configured secret.

    Args:
        request: Incoming request (used for audit context only)
        settings: Settings of the running app
        api_key: Header value, None when absent or empty

    Raises:
        UnauthenticatedError: 401 if the header is missing
        ForbiddenError: 403 if the key does not match
    """
    client = request.client.host if request.client else "unknown"
    where = f"{request.method} {request.url.path} from {client}"

    if not api_key:
        _audit(logging.WARNING, f"API request without API key: {where}")
        raise UnauthenticatedError(API_KEY_HEADER)

    if not hmac.compare_digest(api_key.encode(), settings.API_KEY.encode()):
        _audit(
            logging.WARNING,
            f"API request with invalid API key: {where} (key={redact_secret(api_key)})",
        )
        raise ForbiddenError()

    _audit(logging.DEBUG, f"API request authenticated: {request.method} {request.url.path}")
