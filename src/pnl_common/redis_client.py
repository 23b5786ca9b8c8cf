"""Redis client factory: backs the optional PnL response cache only.

NOT a store of record: every /pnl request can be recomputed from upstream,
so an unreachable Redis degrades to cache misses, never to errors.
"""

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from config.settings import settings

logger = logging.getLogger(__name__)

_redis_pool: aioredis.Redis | None = None


async def get_redis() -> aioredis.Redis:
    """Get or create the Redis connection pool."""
    global _redis_pool  # noqa: PLW0603
    if _redis_pool is None:
        _redis_pool = aioredis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
        )
    return _redis_pool


async def ping_redis() -> bool:
    """True when Redis answers PING; failures are logged, not raised."""
    try:
        return bool(await (await get_redis()).ping())
    except (RedisError, OSError) as exc:
        logger.warning("Redis ping failed url=%s: %s", settings.REDIS_URL, exc)
        return False


async def close_redis() -> None:
    """Close the Redis connection pool."""
    global _redis_pool  # noqa: PLW0603
    if _redis_pool is not None:
        await _redis_pool.aclose()
        _redis_pool = None
