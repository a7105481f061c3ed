"""Sliding-window throttle on backend calls."""

from __future__ import annotations

from collections import deque

from inkwell.db.time import Clock, system_clock


class RateLimiter:
    """Client-wide request counter.

    Not per user and not per endpoint: it caps the total volume of store
    calls so a runaway caller cannot hammer the backend. Rejection never
    blocks or queues.
    """

    def __init__(self, limit: int, window_seconds: float, clock: Clock = system_clock) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        # Accepted call times, oldest first.
        self._accepted: deque[float] = deque()

    def _evict(self, now: float) -> None:
        cutoff = now - self.window_seconds
        while self._accepted and self._accepted[0] < cutoff:
            self._accepted.popleft()

    def try_acquire(self) -> bool:
        """Record and allow a call, or return False without recording it."""
        now = self._clock()
        self._evict(now)
        if len(self._accepted) >= self.limit:
            return False
        self._accepted.append(now)
        return True

    def remaining(self) -> int:
        self._evict(self._clock())
        return self.limit - len(self._accepted)
