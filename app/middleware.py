# =============================================================================
# app/middleware.py - HTTP Middleware
# =============================================================================
# Cross-cutting request handling registered in main.py:
# - rate_limit_middleware: per-client request budget (429 when exceeded)
# - request_logging_middleware: one log line per request
# - security_headers_middleware: conservative response headers
#
# Each middleware either answers the request itself or passes it on.
# =============================================================================

import logging
import math
import time

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Probes must keep working for orchestrators regardless of traffic
RATE_LIMIT_EXEMPT_PATHS = frozenset({"/health", "/ready"})

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


async def rate_limit_middleware(request: Request, call_next):
    """
    Reject clients that exceed the configured request budget.

    The limiter lives on app.state.rate_limiter; None disables limiting.
    """
    limiter = getattr(request.app.state, "rate_limiter", None)
    if limiter is None or request.url.path in RATE_LIMIT_EXEMPT_PATHS:
        return await call_next(request)

    client = request.client.host if request.client else "unknown"
    decision = limiter.hit(client)

    if not decision.allowed:
        logger.warning(f"Rate limit exceeded for {client} on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=429,
            content={
                "success": False,
                "status": "error",
                "statusCode": 429,
                "message": "Too many requests from this IP, please try again later.",
            },
            headers={
                "Retry-After": str(math.ceil(decision.reset_after)),
                "RateLimit-Limit": str(decision.limit),
                "RateLimit-Remaining": "0",
            },
        )

    response = await call_next(request)
    response.headers["RateLimit-Limit"] = str(decision.limit)
    response.headers["RateLimit-Remaining"] = str(decision.remaining)
    return response


async def request_logging_middleware(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        # Answered by the 500 handler outside the middleware stack
        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> 500 ({duration_ms:.1f}ms)")
        raise
    duration_ms = (time.perf_counter() - started) * 1000

    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f}ms)"
    )
    return response


async def security_headers_middleware(request: Request, call_next):
    """Add conservative security headers to every response."""
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response
