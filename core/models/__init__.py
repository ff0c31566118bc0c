# =============================================================================
# core/models/ - Pydantic Schemas
# =============================================================================
# Data models shared by the store and the HTTP layer.
# =============================================================================

from .user import User, UserCreate, UserUpdate

__all__ = [
    "User",
    "UserCreate",
    "UserUpdate",
]
