# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_store import DEMO_USERS, UserStore, parse_user_id

__all__ = [
    "DEMO_USERS",
    "UserStore",
    "parse_user_id",
]
