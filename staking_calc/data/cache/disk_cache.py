"""SQLite-based disk cache with TTL support."""

import asyncio
import hashlib
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

import diskcache

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DiskCache:
    """
    SQLite-based disk cache with TTL support.

    Stores raw JSON-compatible API payloads. Uses diskcache for persistent
    caching with automatic expiration.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        namespace: str = "staking",
    ):
        self.settings = settings or get_settings()
        self.namespace = namespace
        self._cache: Optional[diskcache.Cache] = None
        self._locks: Dict[str, asyncio.Lock] = {}
        # Callers holding or awaiting each key's lock
        self._lock_users: Dict[str, int] = {}

    def _get_cache(self) -> diskcache.Cache:
        """Get or create the cache instance."""
        if self._cache is None:
            cache_dir = self.settings.ensure_cache_dir() / self.namespace
            cache_dir.mkdir(parents=True, exist_ok=True)
            self._cache = diskcache.Cache(str(cache_dir))
        return self._cache

    @staticmethod
    def make_key(*parts: Any) -> str:
        """Create a cache key from parts, hashing keys that get too long."""
        key = ":".join(str(p) for p in parts)
        if len(key) > 200:
            return hashlib.sha256(key.encode()).hexdigest()
        return key

    def get(self, key: str, default: Optional[T] = None) -> Optional[T]:
        """Cached payload for a key, or default when missing or expired.

        A broken cache directory is treated as a miss so callers fall
        through to the API.
        """
        try:
            return self._get_cache().get(key, default=default)
        except Exception as e:
            logger.warning(f"Cache read failed for {key}: {e}")
            return default

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Store an API payload.

        Args:
            key: Cache key, usually from CacheKeys
            value: JSON-compatible payload
            ttl: Seconds until expiry; defaults to the price TTL

        Returns:
            False if the write failed
        """
        expire = self.settings.price_cache_ttl_seconds if ttl is None else ttl
        try:
            self._get_cache().set(key, value, expire=expire)
        except Exception as e:
            logger.warning(f"Cache write failed for {key}: {e}")
            return False
        return True

    def delete(self, key: str) -> bool:
        """Delete a value. Returns True if the key existed."""
        try:
            cache = self._get_cache()
            return cache.delete(key)
        except Exception as e:
            logger.warning(f"Cache delete error for key {key}: {e}")
            return False

    def clear(self) -> int:
        """Drop every cached payload in this namespace. Returns the count removed."""
        try:
            removed = self._get_cache().clear()
        except Exception as e:
            logger.warning(f"Cache clear failed: {e}")
            return 0
        logger.info(f"Cleared {removed} cached responses from {self.namespace}")
        return removed

    async def get_or_set_async(
        self,
        key: str,
        factory: Callable[[], Awaitable[T]],
        ttl: Optional[int] = None,
    ) -> T:
        """
        Get a value from cache, or await the factory and cache its result.

        Concurrent callers for the same key share one fetch: the first
        caller holds the key's lock while the others wait and then read
        the cached value.

        Args:
            key: Cache key
            factory: Async function to call if key not found
            ttl: Time-to-live in seconds

        Returns:
            Cached or computed value
        """
        value = self.get(key)
        if value is not None:
            return value

        lock = self._locks.setdefault(key, asyncio.Lock())
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                value = self.get(key)
                if value is not None:
                    logger.debug(f"Cache filled while waiting for {key}")
                    return value

                value = await factory()
                self.set(key, value, ttl)
                return value
        finally:
            self._release_lock(key)

    def _release_lock(self, key: str) -> None:
        """Forget a key's lock once nobody holds or awaits it."""
        remaining = self._lock_users.get(key, 0) - 1
        if remaining > 0:
            self._lock_users[key] = remaining
            return
        self._lock_users.pop(key, None)
        self._locks.pop(key, None)

    def stats(self) -> dict:
        """Entry count, bytes on disk and location of this namespace."""
        try:
            cache = self._get_cache()
            return {
                "namespace": self.namespace,
                "size": len(cache),
                "volume": cache.volume(),
                "directory": str(cache.directory),
            }
        except Exception as e:
            logger.warning(f"Cache stats failed: {e}")
            return {}

    def close(self):
        if self._cache is not None:
            self._cache.close()
            self._cache = None
        self._locks.clear()
        self._lock_users.clear()


class CacheKeys:
    """Standard cache key patterns."""

    @staticmethod
    def yield_pools() -> str:
        return "defillama:yield-pools"

    @staticmethod
    def coin_list() -> str:
        return "coingecko:coin-list"

    @staticmethod
    def coin_details(coin_id: str, currency: str) -> str:
        return f"coingecko:coin:{coin_id}:{currency}"

    @staticmethod
    def prices(coin_ids, currency: str) -> str:
        return DiskCache.make_key("coingecko:prices", ",".join(coin_ids), currency)
