"""PnL response cache: optional latency layer.

Entries are whole JSON snapshots: a `set` replaces the previous value for
the key, nothing is ever patched in place, and every `get` hands back a
freshly decoded copy.
"""

import json
import logging
import time
from typing import Any, Protocol

import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


def pnl_cache_key(wallet: str, token: str | None) -> str:
    return f"pnl:{wallet}:{token or '*'}"


class PnlCache(Protocol):
    async def get(self, key: str) -> dict[str, Any] | None: ...

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None: ...


class NullPnlCache:
    """Cache disabled: every lookup is a miss."""

    async def get(self, key: str) -> dict[str, Any] | None:
        return None

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        return None


class InMemoryPnlCache:
    """Process-local TTL cache keyed by (wallet, filter)."""

    def __init__(self, clock: Any = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[float, str]] = {}

    async def get(self, key: str) -> dict[str, Any] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, raw = entry
        if self._clock() >= expires_at:
            self._entries.pop(key, None)
            return None
        return json.loads(raw)

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            return
        now = self._clock()
        self._purge_expired(now)
        self._entries[key] = (now + ttl_seconds, json.dumps(value))

    def _purge_expired(self, now: float) -> None:
        expired = [k for k, (expires_at, _) in self._entries.items() if expires_at <= now]
        for k in expired:
            del self._entries[k]


class RedisPnlCache:
    """Redis-backed TTL cache. Redis failures degrade to a miss."""

    def __init__(self, redis: aioredis.Redis, prefix: str = "walletpnl:") -> None:
        self._redis = redis
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> dict[str, Any] | None:
        try:
            raw = await self._redis.get(self._key(key))
        except Exception as exc:
            logger.warning("Redis cache get failed key=%s: %s", key, exc)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Redis cache entry undecodable key=%s; treating as miss", key)
            return None

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            return
        try:
            await self._redis.set(self._key(key), json.dumps(value), ex=ttl_seconds)
        except Exception as exc:
            logger.warning("Redis cache set failed key=%s: %s", key, exc)
