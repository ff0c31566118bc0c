# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, catching configuration
# errors early rather than at runtime.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Header carrying the shared secret on /api/v1/* requests
API_KEY_HEADER = "X-API-Key"

API_VERSION = "1.0.0"

DEFAULT_API_KEY = "dev-api-key-12345"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    Settings are read once through `get_settings()`, or built directly
    and passed to `create_app()`.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level when DEBUG is off"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    SHUTDOWN_TIMEOUT_SECONDS: int = Field(
        default=10,
        ge=0,
        description="Seconds to wait for in-flight requests on shutdown"
    )

    SEED_DEMO_USERS: bool = Field(
        default=True,
        description="Preload the demo users (ids 1-3) at startup"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    API_KEY: str = Field(
        default=DEFAULT_API_KEY,
        min_length=1,
        description="Shared secret expected in the X-API-Key header"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------

    RATE_LIMIT_ENABLED: bool = Field(
        default=True,
        description="Reject clients that exceed the request budget"
    )

    RATE_LIMIT_WINDOW_SECONDS: int = Field(
        default=15 * 60,
        ge=1,
        description="Length of the rate limit window"
    )

    RATE_LIMIT_MAX_REQUESTS: int = Field(
        default=100,
        ge=1,
        description="Requests allowed per client per window"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset so defaults apply
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Handles comma-separated values and strips whitespace.
        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def log_level(self) -> str:
        """Effective log level; DEBUG wins over LOG_LEVEL."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()

