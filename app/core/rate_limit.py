"""Rate limiting dependency for FastAPI routes.

Wires the rate limiting adapter into the HTTP layer. The limiter instance
lives on ``app.state`` (built by the application factory and reset on
shutdown), so each application owns its counters.

Strategy: sliding window per client IP over every route under ``/api``.
"""

from __future__ import annotations

import hashlib
import logging

from fastapi import HTTPException, Request, status

from app.adapters.rate_limit.base import AbstractRateLimiter
from app.adapters.rate_limit.in_memory import InMemorySlidingWindowRateLimiter
from app.core.config import AppSettings, settings

logger = logging.getLogger(__name__)


def build_rate_limiter(app_settings: AppSettings | None = None) -> AbstractRateLimiter:
    """Create a limiter configured from settings.

    Args:
        app_settings: Optional override; defaults to global settings.

    Returns:
        AbstractRateLimiter: Fresh limiter with empty counters.
    """
    cfg = app_settings or settings.app
    return InMemorySlidingWindowRateLimiter(
        limit=cfg.rate_limit_requests,
        window_seconds=cfg.rate_limit_window_seconds,
    )


def get_rate_limiter(request: Request) -> AbstractRateLimiter:
    """Return the limiter owned by the application serving ``request``."""
    return request.app.state.rate_limiter


def _build_rate_limit_key(request: Request) -> str:
    client_host = request.client.host if request.client else "unknown"
    return f"ip:{client_host}"


def _hash_limiter_key(key: str) -> str:
    """Hash the rate limit key for logging without exposing client addresses."""
    return hashlib.sha256(key.encode()).hexdigest()[:16]


async def enforce_rate_limit(request: Request) -> None:
    """FastAPI dependency enforcing rate limits.

    When enabled, consumes 1 unit from the client's budget. Once the client
    exceeds the configured rate, raises HTTP 429 before the route runs.

    Args:
        request: FastAPI request.

    Raises:
        HTTPException: 429 Too Many Requests when rate limit is exceeded.
    """

    if not settings.app.rate_limit_enabled:
        return

    limiter = get_rate_limiter(request)
    key = _build_rate_limit_key(request)

    result = limiter.consume(key)
    if result.allowed:
        logger.debug(
            "rate_limit.allowed",
            extra={
                "key_hash": _hash_limiter_key(key),
                "limit": result.limit,
                "remaining": result.remaining,
            },
        )
        return

    retry_after = result.retry_after_seconds or 0
    logger.warning(
        "rate_limit.exceeded",
        extra={
            "key_hash": _hash_limiter_key(key),
            "limit": result.limit,
            "window_s": settings.app.rate_limit_window_seconds,
            "retry_after_s": retry_after,
        },
    )

    headers: dict[str, str] = {}
    if settings.app.rate_limit_include_headers:
        headers["Retry-After"] = str(retry_after)
        headers["X-RateLimit-Limit"] = str(result.limit)
        headers["X-RateLimit-Remaining"] = str(result.remaining)
        headers["X-RateLimit-Reset"] = str(result.reset_at)

    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail=settings.app.rate_limit_message,
        headers=headers or None,
    )
