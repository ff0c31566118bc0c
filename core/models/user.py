# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: A stored user record
# - UserCreate: Input for creating a user
# - UserUpdate: Input for a partial update
#
# Input fields are optional at the schema level on purpose: missing values
# are reported by UserStore as InvalidArgument (400), not as schema errors.
# =============================================================================

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A live user record.

    Example:
        {
            "id": 4,
            "name": "Test User",
            "email": "t@example.com"
        }
    """

    id: int = Field(..., ge=1, description="Store-assigned identifier, never reused")
    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Unique email address (case-sensitive)")

    model_config = {
        "json_schema_extra": {
            "example": {"id": 1, "name": "John Doe", "email": "john@example.com"}
        }
    }


class UserCreate(BaseModel):
    """Request body for POST /users."""

    name: str | None = Field(default=None, description="Required, non-empty")
    email: str | None = Field(default=None, description="Required, non-empty, unique")

    model_config = {
        "json_schema_extra": {
            "example": {"name": "John Doe", "email": "john@example.com"}
        }
    }


class UserUpdate(BaseModel):
    """
    Request body for PUT /users/{id}.

    Only the fields that are supplied (and non-empty) are changed.
    """

    name: str | None = Field(default=None, description="New name")
    email: str | None = Field(default=None, description="New email")

    model_config = {
        "json_schema_extra": {
            "example": {"name": "John Updated"}
        }
    }
