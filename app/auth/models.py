# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication responses (used in OpenAPI docs).
# =============================================================================

from pydantic import BaseModel


class AuthErrorResponse(BaseModel):
    """
    Body returned when the API key gate rejects a request.
    """
    success: bool = False
    status: str = "error"
    statusCode: int
    message: str
    code: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "status": "error",
                "statusCode": 401,
                "message": "API key is required. Please provide X-API-Key header.",
                "code": "API_KEY_MISSING",
            }
        }
    }


# OpenAPI `responses` entry shared by every protected router
AUTH_RESPONSES = {
    401: {"model": AuthErrorResponse, "description": "Missing API key"},
    403: {"model": AuthErrorResponse, "description": "Invalid API key"},
}
