# =============================================================================
# app/exceptions.py - Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Maps the closed ErrorKind taxonomy from core/errors.py to HTTP responses,
# and shapes framework errors (validation, unmatched routes, crashes).
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.middleware import SECURITY_HEADERS
from core.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)


# Every ErrorKind has exactly one status; a missing entry fails at import.
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
}
if set(STATUS_BY_KIND) != set(ErrorKind):
    raise RuntimeError("STATUS_BY_KIND must cover every ErrorKind")

_AUTH_KINDS = frozenset({ErrorKind.UNAUTHENTICATED, ErrorKind.FORBIDDEN})


def status_for(kind: ErrorKind) -> int:
    """HTTP status code for an error kind."""
    return STATUS_BY_KIND[kind]


def error_body(exc: DomainError) -> dict[str, Any]:
    """
    Build the JSON body for a domain error.

    Auth failures also carry `status` and `statusCode` fields.
    """
    body = exc.to_dict()
    if exc.kind in _AUTH_KINDS:
        body["status"] = "error"
        body["statusCode"] = status_for(exc.kind)
    return body


# =============================================================================
# Exception Handlers
# =============================================================================

async def domain_exception_handler(
    request: Request,
    exc: DomainError
) -> JSONResponse:
    """
    Convert a DomainError to a JSON response.

    Returns structured error with:
    - success: Always false
    - message: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    """
    return JSONResponse(
        status_code=status_for(exc.kind),
        content=error_body(exc)
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Malformed bodies and wrong field types are invalid arguments, so
    they surface as 400 like every other input problem.
    """
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Request validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle HTTP errors raised by the router.

    Unknown paths and unsupported methods are both reported as an
    unmatched route.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={
                "status": "error",
                "message": "Route not found",
                "path": request.url.path,
            }
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals."""
    logger.exception(
        f"Unexpected error on {request.method} {request.url.path}: {exc!r}"
    )
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
        # Built outside the middleware stack, so headers are added here
        headers=SECURITY_HEADERS,
    )
