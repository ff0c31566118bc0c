# =============================================================================
# lib/rate_limit.py - Fixed Window Rate Limiter
# =============================================================================
# Counts requests per client key inside fixed time windows.
# Framework-agnostic: the HTTP middleware in app/middleware.py decides what
# a "client key" is and how to answer a rejected request.
# =============================================================================

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a single rate limit check."""
    allowed: bool
    limit: int
    remaining: int
    reset_after: float  # seconds until the current window closes


class FixedWindowRateLimiter:
    """
    Thread-safe fixed window limiter.

    Each client gets `max_requests` hits per `window_seconds`. The window
    starts on the client's first request and resets once it expires.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        # client key -> (window start, hit count)
        self._windows: dict[str, tuple[float, int]] = {}

    def hit(self, key: str) -> RateLimitDecision:
        """Record one request for `key` and report whether it is allowed."""
        now = self._clock()

        with self._lock:
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0

            count += 1
            self._windows[key] = (started, count)

            if len(self._windows) > 10_000:
                self._evict_expired(now)

        reset_after = max(0.0, self.window_seconds - (now - started))
        return RateLimitDecision(
            allowed=count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - count),
            reset_after=reset_after,
        )

    def reset(self) -> None:
        """Forget every client window."""
        with self._lock:
            self._windows.clear()

    def _evict_expired(self, now: float) -> None:
        # Caller holds the lock
        expired = [
            key for key, (started, _) in self._windows.items()
            if now - started >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]
