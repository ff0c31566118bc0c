# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Users API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   users-api                      # console script, see run()
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth import AUTH_RESPONSES, require_api_key
from app.config import API_VERSION, DEFAULT_API_KEY, Settings, get_settings
from app.exceptions import (
    domain_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.middleware import (
    rate_limit_middleware,
    request_logging_middleware,
    security_headers_middleware,
)
from app.routers import health, system, users
from core.errors import DomainError
from core.services.user_store import DEMO_USERS, UserStore
from lib.rate_limit import FixedWindowRateLimiter

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown. The user store needs no teardown:
    its contents are discarded with the process.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting Users API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if settings.is_production and settings.API_KEY == DEFAULT_API_KEY:
        logger.warning("API_KEY is the development default; set API_KEY in production")

    yield

    # Shutdown
    logger.info("Shutting down Users API")


def create_app(
    settings: Settings | None = None,
    store: UserStore | None = None,
) -> FastAPI:
    """
    Build a fully wired application.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        store: User store to serve (defaults to a new store, seeded with the
            demo users when SEED_DEMO_USERS is on)

    Returns:
        FastAPI: The application
    """
    settings = settings or get_settings()
    if store is None:
        store = UserStore(seed=DEMO_USERS if settings.SEED_DEMO_USERS else ())

    app = FastAPI(
        title="Users API",
        description="""
## User Directory Microservice

CRUD API over an in-memory user collection, plus health probes.

### Authentication

Every `/api/v1/*` endpoint requires the `X-API-Key` header.

| Situation | Status |
|-----------|--------|
| Header missing | 401 |
| Wrong key | 403 |

### Quick Start

```bash
curl -H "X-API-Key: $API_KEY" http://localhost:3000/api/v1/users

curl -X POST http://localhost:3000/api/v1/users \\
  -H "X-API-Key: $API_KEY" -H "Content-Type: application/json" \\
  -d '{"name": "Test User", "email": "t@example.com"}'
```
""",
        version=API_VERSION,
        docs_url="/api-docs",
        redoc_url=None,
        openapi_url="/api-docs.json",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, update and delete users",
            },
            {
                "name": "System",
                "description": "API metadata and process status",
            },
            {
                "name": "Health",
                "description": "Liveness and readiness probes",
            },
        ],
    )

    app.state.settings = settings
    app.state.user_store = store
    app.state.readiness_checks = []
    app.state.rate_limiter = (
        FixedWindowRateLimiter(
            max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
        )
        if settings.RATE_LIMIT_ENABLED
        else None
    )

    # =========================================================================
    # Middleware (last registered runs first)
    # =========================================================================

    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(request_logging_middleware)
    app.middleware("http")(security_headers_middleware)

    # CORS middleware - allows cross-origin requests from configured origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-API-Key"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    # Health check endpoints (public)
    app.include_router(
        health.router,
        tags=["Health"]
    )

    protected = [Depends(require_api_key)]

    # API metadata and status (protected)
    app.include_router(
        system.router,
        prefix="/api/v1",
        tags=["System"],
        dependencies=protected,
        responses=AUTH_RESPONSES,
    )

    # User endpoints (protected)
    app.include_router(
        users.router,
        prefix="/api/v1/users",
        tags=["Users"],
        dependencies=protected,
        responses=AUTH_RESPONSES,
    )

    # =========================================================================
    # Root Endpoint
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "message": "Welcome to Users API",
            "version": API_VERSION,
            "documentation": "/api-docs",
        }

    return app


configure_logging(get_settings())

app = create_app()


def run() -> None:
    """Serve the app with uvicorn until SIGINT/SIGTERM."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.PORT,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT_SECONDS,
    )


if __name__ == "__main__":
    run()
