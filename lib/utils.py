# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import time
from typing import Any

# Captured at import time; the app imports this module during startup.
_PROCESS_STARTED_AT = time.monotonic()


# =============================================================================
# Process Utilities
# =============================================================================

def process_uptime() -> float:
    """
    Seconds elapsed since the process loaded the application.

    Returns:
        Uptime in seconds, rounded to milliseconds
    """
    return round(time.monotonic() - _PROCESS_STARTED_AT, 3)


def redact_secret(value: str, visible: int = 5) -> str:
    """
    Mask a credential so it can be written to logs.

    Keeps at most the first `visible` characters, and never more than
    half of the value.

    Example:
        redact_secret("wrong-key-123")  # "wrong***"
    """
    shown = min(visible, len(value) // 2)
    return f"{value[:shown]}***"


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        result: dict[str, Any] = {
            "success": False,
            "message": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result
