"""In-memory sliding-window rate limiter.

Notes:
- Per-process only: running multiple workers multiplies the effective limit.
- Thread-safe: uses a lock around shared state.
"""

from __future__ import annotations

import math
import threading
import time
from collections import deque
from typing import Callable

from app.adapters.rate_limit.base import AbstractRateLimiter, RateLimitResult


class InMemorySlidingWindowRateLimiter(AbstractRateLimiter):
    """Rate limiter keeping a log of request timestamps per key.

    A request is allowed when fewer than ``limit`` requests from the same key
    were accepted during the preceding ``window_seconds``. Rejected requests
    are not recorded, so a throttled client regains budget as soon as its
    oldest accepted request ages out of the window.

    Important:
        This limiter is per-process only. If the API runs with multiple workers
        (e.g., multiple Uvicorn/Gunicorn workers), each worker will enforce its
        own independent limits.
    """

    def __init__(
        self,
        *,
        limit: int,
        window_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the in-memory rate limiter.

        Args:
            limit: Maximum number of allowed units per window.
            window_seconds: Size of the sliding window in seconds.
            clock: Time source function returning UNIX time in seconds.

        Raises:
            ValueError: If limit or window_seconds are invalid.
        """
        if limit < 1:
            raise ValueError("limit must be >= 1")
        if window_seconds < 1:
            raise ValueError("window_seconds must be >= 1")

        self._limit = limit
        self._window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.RLock()
        self._hits_by_key: dict[str, deque[float]] = {}
        self._last_sweep: float | None = None

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def window_seconds(self) -> int:
        return self._window_seconds

    def _prune(self, hits: deque[float], now: float) -> None:
        """Drop timestamps that fell out of the window ending at ``now``."""
        cutoff = now - self._window_seconds
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        """Forget keys whose requests have all left the window.

        Runs at most once per window so idle client addresses are not kept
        for the life of the process. Caller must hold the lock.
        """
        if self._last_sweep is not None and now - self._last_sweep < self._window_seconds:
            return
        self._last_sweep = now
        for stale_key in list(self._hits_by_key):
            hits = self._hits_by_key[stale_key]
            self._prune(hits, now)
            if not hits:
                del self._hits_by_key[stale_key]

    def consume(self, key: str, *, cost: int = 1) -> RateLimitResult:
        """Consume rate limit budget for the provided key.

        Args:
            key: Unique identifier for rate limiting (e.g., client IP).
            cost: Units to consume (default 1).

        Returns:
            RateLimitResult with allowance decision and metadata.

        Raises:
            ValueError: If key is empty or cost is invalid.
        """
        if cost < 1:
            raise ValueError("cost must be >= 1")
        if not key:
            raise ValueError("key must be a non-empty string")

        now = self._clock()

        with self._lock:
            self._sweep(now)
            hits = self._hits_by_key.get(key) or deque()
            self._prune(hits, now)

            if len(hits) + cost <= self._limit:
                self._hits_by_key[key] = hits
                hits.extend([now] * cost)
                return RateLimitResult(
                    allowed=True,
                    limit=self._limit,
                    remaining=self._limit - len(hits),
                    reset_at=int(math.ceil(hits[0] + self._window_seconds)),
                    retry_after_seconds=None,
                )

            if not hits:
                self._hits_by_key.pop(key, None)
            reset_at = hits[0] + self._window_seconds if hits else now
            return RateLimitResult(
                allowed=False,
                limit=self._limit,
                remaining=max(0, self._limit - len(hits)),
                reset_at=int(math.ceil(reset_at)),
                retry_after_seconds=max(1, int(math.ceil(reset_at - now))),
            )

    def reset(self) -> None:
        with self._lock:
            self._hits_by_key.clear()

    def tracked_keys(self) -> int:
        """Number of keys currently holding state."""
        with self._lock:
            return len(self._hits_by_key)
