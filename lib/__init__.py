# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - rate_limit.py: Fixed window request limiter used by the HTTP middleware
# - utils.py: Shared utilities (base error class, uptime, secret redaction)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.rate_limit import FixedWindowRateLimiter, RateLimitDecision
from lib.utils import ApplicationError, process_uptime, redact_secret

__all__ = [
    # Rate limiting
    "FixedWindowRateLimiter",
    "RateLimitDecision",
    # Utils
    "ApplicationError",
    "process_uptime",
    "redact_secret",
]
