# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Both resources are owned by the application instance (app.state), set up
# in create_app(). Nothing here is module-level state.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """
    Get the user store owned by the running app.
    """
    return request.app.state.user_store


def get_app_settings(request: Request) -> Settings:
    """
    Get the settings the running app was built with.
    """
    return request.app.state.settings


# Type aliases for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
