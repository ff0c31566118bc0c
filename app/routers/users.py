# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Thin HTTP layer over UserStore: extract input, call the store, wrap the
# result. Store errors propagate to the handlers in app/exceptions.py.
# All endpoints require an API key (applied in main.py).
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query
from pydantic import BaseModel, Field

from app.dependencies import UserStoreDep
from core.models.user import User, UserCreate, UserUpdate

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Body returned for 400/404/409."""
    success: bool = False
    message: str
    code: str
    suggestion: str | None = None


class UserResponse(BaseModel):
    """A single user."""
    success: bool = True
    data: User


class UserListResponse(BaseModel):
    """A list of users with its length."""
    success: bool = True
    count: int = Field(..., ge=0)
    data: list[User]


class UserDeleteResponse(BaseModel):
    """The user that was removed."""
    success: bool = True
    message: str
    data: User


_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_CONFLICT = {409: {"model": ErrorResponse, "description": "Email already in use"}}

UserIdPath = Annotated[str, Path(description="Numeric user id", examples=["1"])]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=UserListResponse)
async def list_users(store: UserStoreDep):
    """
    List all users in creation order.
    """
    users = store.list_all()
    return UserListResponse(count=len(users), data=users)


# Declared before /{user_id} so "search" is not read as an id
@router.get("/search", response_model=UserListResponse, responses=_BAD_REQUEST)
async def search_users(
    store: UserStoreDep,
    name: Annotated[str | None, Query(description="Case-insensitive name fragment")] = None,
):
    """
    Search users by name.

    Returns an empty list when nothing matches.
    """
    users = store.search(name)
    return UserListResponse(count=len(users), data=users)


@router.get("/{user_id}", response_model=UserResponse, responses={**_BAD_REQUEST, **_NOT_FOUND})
async def get_user(user_id: UserIdPath, store: UserStoreDep):
    """
    Get one user by id.
    """
    return UserResponse(data=store.get_by_id(user_id))


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    responses={**_BAD_REQUEST, **_CONFLICT},
)
async def create_user(payload: UserCreate, store: UserStoreDep):
    """
    Create a user.

    The id is assigned by the server. Emails must be unique.
    """
    return UserResponse(data=store.create(payload.name, payload.email))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT},
)
async def update_user(user_id: UserIdPath, payload: UserUpdate, store: UserStoreDep):
    """
    Update a user's name and/or email.

    Fields left out of the body keep their current value.
    """
    return UserResponse(data=store.update(user_id, name=payload.name, email=payload.email))


@router.delete("/{user_id}", response_model=UserDeleteResponse, responses={**_BAD_REQUEST, **_NOT_FOUND})
async def delete_user(user_id: UserIdPath, store: UserStoreDep):
    """
    Delete a user. Its id is never reused.
    """
    deleted = store.delete(user_id)
    return UserDeleteResponse(
        message=f"User {deleted.name} deleted successfully",
        data=deleted,
    )
