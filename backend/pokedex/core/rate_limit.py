"""
Rate limiting utilities.

Fixed-window counters per client IP, stored in Redis. Redis only holds
throttling state, so when it is unreachable the limiter lets requests
through and logs a warning instead of failing the request.
"""
import logging
from typing import Optional

from fastapi import Depends, Request
from redis.asyncio import Redis
from redis.exceptions import RedisError

from pokedex.config import get_settings
from pokedex.core.errors import RateLimited
from pokedex.database.connections import get_redis_client

logger = logging.getLogger(__name__)


def get_client_ip(request: Request) -> str:
    """Extract client IP from request."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def check_rate_limit(
    redis: Redis,
    ip: str,
    limit: Optional[int] = None,
    window_seconds: Optional[int] = None,
) -> bool:
    """
    Check if a request should be rate limited.

    Key pattern: "ratelimit:{ip}". INCR with EXPIRE on the first hit of a
    window, so the window starts with the first request.

    Args:
        redis: Redis client holding the counters
        ip: Client IP address
        limit: Max requests allowed (defaults to config value)
        window_seconds: Time window in seconds (defaults to config value)

    Returns:
        True if request is allowed, False if rate limited
    """
    settings = get_settings()
    limit = limit if limit is not None else settings.rate_limit_requests
    window_seconds = window_seconds if window_seconds is not None else settings.rate_limit_window_seconds

    key = f"ratelimit:{ip}"
    current = await redis.incr(key)
    if current == 1:
        await redis.expire(key, window_seconds)
    return current <= limit


async def get_rate_limit_redis() -> Redis:
    """Dependency to get the Redis client used for rate limit counters."""
    return await get_redis_client()


async def enforce_rate_limit(
    request: Request,
    redis: Redis = Depends(get_rate_limit_redis),
) -> None:
    """
    Router dependency rejecting clients over the configured request budget.

    Raises:
        RateLimited: If the client exceeded the window's budget
    """
    settings = get_settings()
    if not settings.rate_limit_enabled:
        return

    client_ip = get_client_ip(request)
    try:
        allowed = await check_rate_limit(redis, client_ip)
    except RedisError as e:
        logger.warning("Rate limiter unavailable, allowing request: %s", e)
        return

    if not allowed:
        logger.info("Rate limit exceeded for %s", client_ip)
        raise RateLimited()
