# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Users API:
# - test_user_store.py: Unit tests for the in-memory store
# - test_api_users.py: End-to-end tests for /api/v1/users
# - test_auth.py: API key gate and audit logging
# - test_app.py: Health, system endpoints, routing, docs, headers
# - test_rate_limit.py: Limiter and middleware
# - test_config.py / test_exceptions.py: Settings and error mapping
#
# Run tests with: pytest
# =============================================================================
