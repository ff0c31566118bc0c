# =============================================================================
# core/errors.py - Domain Error Taxonomy
# =============================================================================
# Every error the API can return on purpose belongs to one ErrorKind.
# The HTTP layer (app/exceptions.py) maps each kind to exactly one status.
# =============================================================================

from enum import Enum

from lib.utils import ApplicationError


class ErrorKind(str, Enum):
    """Closed set of expected failure categories."""
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


class DomainError(ApplicationError):
    """Base class for errors tagged with an ErrorKind."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


# =============================================================================
# Input Errors
# =============================================================================

class InvalidArgumentError(DomainError):
    """Raised when input is missing, empty, or malformed."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, code: str = "INVALID_ARGUMENT", **kwargs):
        super().__init__(message, code=code, **kwargs)


class InvalidUserIdError(InvalidArgumentError):
    """Raised when a user id is not a base-10 integer."""

    def __init__(self, raw_id: object):
        super().__init__(
            "Invalid user ID",
            code="INVALID_USER_ID",
            suggestion="User ids are whole numbers, e.g. /api/v1/users/42",
            details={"id": str(raw_id)},
        )


# =============================================================================
# State Errors
# =============================================================================

class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class UserNotFoundError(NotFoundError):
    """Raised when no live user has the given id."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User with id {user_id} not found",
            code="USER_NOT_FOUND",
        )
        self.user_id = user_id


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""

    kind = ErrorKind.CONFLICT


class EmailConflictError(ConflictError):
    """Raised when an email already belongs to a live user."""

    def __init__(self, email: str):
        super().__init__(
            "A user with this email already exists",
            code="EMAIL_CONFLICT",
            suggestion="Use a different email or update the existing user",
        )
        self.email = email


# =============================================================================
# Authentication Errors
# =============================================================================

class UnauthenticatedError(DomainError):
    """Raised when a protected route is called without a credential."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, header_name: str):
        super().__init__(
            f"API key is required. Please provide {header_name} header.",
            code="API_KEY_MISSING",
        )


class ForbiddenError(DomainError):
    """Raised when the supplied credential does not match."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self):
        super().__init__("Invalid API key.", code="API_KEY_INVALID")
