"""Redis-backed cache and rate limiting."""

from __future__ import annotations

import functools
import logging
import os
from typing import Any

from redis import asyncio as aioredis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

logger = logging.getLogger(__name__)


class CacheError(Exception):
    """Raised when the cache server cannot be used."""


def redis_url(debug: bool = __debug__) -> str:
    """Return the Redis URL from the environment, with per-mode defaults."""
    if debug:
        return os.environ.get("REDIS_URL_DEV", "redis://localhost:6379")
    return os.environ.get("REDIS_URL_PROD", "redis://redis:6379")


@functools.lru_cache(maxsize=None)
def get_client() -> aioredis.Redis:
    """Return the shared Redis client, created on first use."""
    url = redis_url()
    logger.info("Attempting to connect to Redis at: %s", url)
    return aioredis.Redis.from_url(url, decode_responses=True)


def _resolve(client: Any) -> Any:
    return get_client() if client is None else client


async def get_cache(key: str, client: Any = None) -> str | None:
    """Return the cached value for ``key``, or None if missing or unreachable."""
    redis_client = _resolve(client)
    try:
        value = await redis_client.get(key)
    except RedisError:
        return None
    if isinstance(value, bytes):
        return value.decode()
    return value


async def update_cache(key: str, data: str, ttl: int, client: Any = None) -> bool:
    """Store ``data`` under ``key`` for ``ttl`` seconds.

    Raises CacheError when the server cannot be reached; other failures of
    the write are logged and ignored.
    """
    redis_client = _resolve(client)
    try:
        await redis_client.setex(key, ttl, data)
    except (RedisConnectionError, RedisTimeoutError) as exc:
        logger.error("Redis connection failed: %s", exc)
        raise CacheError(f"Redis connection failed: {exc}") from exc
    except RedisError as exc:
        logger.error("Redis SET failed for key '%s': %s", key, exc)
    return True


async def check_rate_limit(
    action_key: str,
    identifier: str,
    limit: int,
    seconds: int,
    client: Any = None,
) -> bool:
    """Count one hit and return False once ``limit`` is exceeded in the window."""
    redis_client = _resolve(client)
    key = f"rate_limit:{action_key}:{identifier}"
    try:
        count = int(await redis_client.incr(key, 1))
        if count == 1:
            await redis_client.expire(key, seconds)
            logger.info("Set expiration for key '%s' to %s seconds", key, seconds)
    except RedisError as exc:
        raise CacheError(str(exc)) from exc
    if count < 0 or count > limit:
        logger.info(
            "Rate limit exceeded for key '%s'. Count: %s, Limit: %s, Second: %s",
            key,
            count,
            limit,
            seconds,
        )
        return False
    return True