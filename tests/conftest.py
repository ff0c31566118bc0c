# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Builds a fresh app and user store for every test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from the environment on import

TEST_API_KEY = "test-api-key-12345"

os.environ.setdefault("API_KEY", TEST_API_KEY)
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from app.config import API_KEY_HEADER, Settings
from app.main import create_app
from core.services.user_store import DEMO_USERS, UserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings for an isolated test app (rate limiting off)."""
    return Settings(
        ENVIRONMENT="test",
        API_KEY=TEST_API_KEY,
        RATE_LIMIT_ENABLED=False,
        SEED_DEMO_USERS=True,
    )


@pytest.fixture
def store():
    """A store seeded with the demo users (ids 1-3)."""
    return UserStore(seed=DEMO_USERS)


@pytest.fixture
def app(settings, store):
    """A fully wired app serving the `store` fixture."""
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    """Test client with lifespan events."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    """Headers carrying the valid API key."""
    return {API_KEY_HEADER: TEST_API_KEY}
