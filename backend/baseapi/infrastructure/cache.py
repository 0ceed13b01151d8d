"""Status Cache — Redis and in-process implementations of the CacheStore port.

Invariants:
    - No method raises: read failures are misses, write failures are no-ops,
      exists() failures are False, ping() failures are False
    - Keys are namespaced with the configured prefix ("example-status:{id}")
    - clear() removes only prefixed keys, never the whole Redis database
    - Every entry carries a TTL (default_ttl unless the caller passes one)

Design Decisions:
    - JSON payloads (ExampleStatus.to_dict) over pickle: readable, language-neutral
    - Malformed payloads are logged and treated as misses
    - InMemoryCacheStore uses a monotonic clock so wall-clock jumps cannot extend entries
"""

import json
import logging
import time

import redis.asyncio as redis

from baseapi.core.domain_models import ExampleStatus

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 600
DEFAULT_PREFIX = "example-status:"


class RedisCacheStore:
    """Redis-backed status cache. Every failure is swallowed and logged."""

    def __init__(
        self,
        client: redis.Redis,
        prefix: str = DEFAULT_PREFIX,
        default_ttl: int = DEFAULT_TTL_SECONDS,
    ):
        self.client = client
        self.prefix = prefix
        self.default_ttl = default_ttl

    @classmethod
    def from_url(
        cls,
        redis_url: str,
        prefix: str = DEFAULT_PREFIX,
        default_ttl: int = DEFAULT_TTL_SECONDS,
        socket_timeout: float = 2.0,
    ) -> "RedisCacheStore":
        client = redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
            health_check_interval=30,
        )
        return cls(client, prefix=prefix, default_ttl=default_ttl)

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def get(self, key: str) -> ExampleStatus | None:
        full_key = self._key(key)
        try:
            raw = await self.client.get(full_key)
        except Exception as e:
            logger.error(
                f"Error getting value from cache: {e}",
                extra={"cache_key": full_key},
            )
            return None
        if raw is None:
            logger.debug("Cache miss", extra={"cache_key": full_key})
            return None
        try:
            value = ExampleStatus.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(
                f"Discarding malformed cache entry: {e}",
                extra={"cache_key": full_key},
            )
            return None
        logger.debug("Cache hit", extra={"cache_key": full_key})
        return value

    async def put(
        self, key: str, value: ExampleStatus, ttl_seconds: int | None = None,
    ) -> None:
        full_key = self._key(key)
        ttl = ttl_seconds or self.default_ttl
        try:
            await self.client.setex(full_key, ttl, json.dumps(value.to_dict()))
            logger.debug(f"Cached value for {ttl}s", extra={"cache_key": full_key})
        except Exception as e:
            logger.error(
                f"Error putting value in cache: {e}",
                extra={"cache_key": full_key},
            )

    async def evict(self, key: str) -> None:
        full_key = self._key(key)
        try:
            deleted = await self.client.delete(full_key)
            if deleted:
                logger.debug("Evicted cache entry", extra={"cache_key": full_key})
        except Exception as e:
            logger.error(
                f"Error evicting cache entry: {e}",
                extra={"cache_key": full_key},
            )

    async def clear(self) -> None:
        try:
            keys = await self.client.keys(f"{self.prefix}*")
            if keys:
                deleted = await self.client.delete(*keys)
                logger.info(f"Cleared {deleted} cache entries")
            else:
                logger.info("No cache entries to clear")
        except Exception as e:
            logger.error(f"Error clearing cache: {e}")

    async def exists(self, key: str) -> bool:
        full_key = self._key(key)
        try:
            return bool(await self.client.exists(full_key))
        except Exception as e:
            logger.error(
                f"Error checking cache key: {e}",
                extra={"cache_key": full_key},
            )
            return False

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except Exception as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        try:
            await self.client.aclose()
        except Exception as e:
            logger.warning(f"Error closing Redis client: {e}")


class InMemoryCacheStore:
    """Process-local status cache with per-entry expiry."""

    def __init__(
        self, default_ttl: int = DEFAULT_TTL_SECONDS, clock=time.monotonic,
    ):
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, ExampleStatus]] = {}

    async def get(self, key: str) -> ExampleStatus | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= self._clock():
            self._entries.pop(key, None)
            return None
        return value

    async def put(
        self, key: str, value: ExampleStatus, ttl_seconds: int | None = None,
    ) -> None:
        ttl = ttl_seconds or self.default_ttl
        self._entries[key] = (self._clock() + ttl, value)

    async def evict(self, key: str) -> None:
        self._entries.pop(key, None)

    async def clear(self) -> None:
        self._entries.clear()

    async def exists(self, key: str) -> bool:
        return await self.get(key) is not None

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._entries.clear()


# Singleton (initialized on startup)
cache_store: RedisCacheStore | InMemoryCacheStore | None = None


async def init_cache(
    backend: str,
    redis_url: str,
    prefix: str = DEFAULT_PREFIX,
    default_ttl: int = DEFAULT_TTL_SECONDS,
    socket_timeout: float = 2.0,
) -> RedisCacheStore | InMemoryCacheStore:
    """Create the process cache. An unreachable Redis is logged, not fatal."""
    global cache_store
    if backend == "memory":
        cache_store = InMemoryCacheStore(default_ttl=default_ttl)
        logger.info("Using in-process status cache")
        return cache_store
    store = RedisCacheStore.from_url(
        redis_url, prefix=prefix, default_ttl=default_ttl,
        socket_timeout=socket_timeout,
    )
    if await store.ping():
        logger.info("Redis status cache connected")
    else:
        logger.warning("Redis unreachable at startup; lookups will read the store")
    cache_store = store
    return store


async def close_cache() -> None:
    global cache_store
    if cache_store is not None:
        await cache_store.close()
        cache_store = None
