"""
Concurrent map-based cache implementation with lazy TTL expiration, dood!

This module provides MapCache, an in-process cache for arbitrary values that is
safe to share between many threads.

Storage Architecture:
    Entries live in a fixed number of shards. Each shard is a plain dict guarded
    by its own lock, and a key always lives in shard `hash(key) % shards`.
    Writes take only the lock of the key's shard, so writers of keys in
    different shards never wait for each other. Reads don't take any lock at
    all: a dict lookup is atomic and entries are immutable.

Expiration Policy:
    Entries may carry an absolute expiry instant. Nothing is evicted in the
    background: an expired entry is removed by the first read that sees it
    (lazy expiry). The removal is a compare-and-delete, so a reader racing with
    a writer never removes the fresh value the writer has just stored.

Known Limitations:
    - Cache data is volatile and lost on process restart
    - There is no size limit; expired entries that are never read again stay
      in memory until deleted or cleared
    - Not suitable for distributed or multi-process systems

Example:
    >>> cache = MapCache()
    >>> cache.set("greeting", "Hello, dood!")
    >>> cache.setWithTTL("otp:123", "4242", ttl=30)
    >>> cache.get("greeting")
    'Hello, dood!'
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional

from ..utils import toSeconds
from .exceptions import CacheConfigError, CacheNotFoundError
from .interface import CacheInterface
from .types import CacheEntry, TTLType

logger = logging.getLogger(__name__)

DEFAULT_SHARDS = 32


class _Shard:
    """One lock-guarded partition of the store."""

    def __init__(self):
        self.lock = threading.Lock()
        self.entries: Dict[str, CacheEntry] = {}


class MapCache(CacheInterface[Any]):
    """
    Thread-safe sharded cache with optional per-entry TTL, dood!

    Values are stored as-is (no copying), so mutable objects put into the
    cache are shared with the caller.

    Thread Safety:
        - get/set/setWithTTL/delete/has are atomic for a given key
        - Operations on different shards never serialize against each other
        - clear() swaps the whole shard table at once: concurrent operations
          see either the old or the new table, never a mix

    Args:
        shards: Number of store partitions (positive integer)
        clock: Function returning the current time in seconds. Defaults to
            time.time; inject a fake clock to test expiration deterministically.

    Raises:
        CacheConfigError: If shards is not a positive integer
    """

    def __init__(self, *, shards: int = DEFAULT_SHARDS, clock: Callable[[], float] = time.time):
        if isinstance(shards, bool) or not isinstance(shards, int) or shards <= 0:
            raise CacheConfigError(f"Shards count must be a positive integer, got {shards!r}")

        self._shardCount = shards
        self._clock = clock
        self._shards: List[_Shard] = self._createShards()
        logger.debug(f"MapCache created with {shards} shards")

    def _createShards(self) -> List[_Shard]:
        return [_Shard() for _ in range(self._shardCount)]

    def _getShard(self, key: str) -> _Shard:
        """
        Find shard holding `key`.

        Raises:
            TypeError: If key is not a string
        """
        if not isinstance(key, str):
            raise TypeError(f"Cache key must be a string, got {type(key).__name__}, dood!")

        # Read table reference once: clear() may replace it concurrently
        shards = self._shards
        return shards[hash(key) % len(shards)]

    def _store(self, key: str, entry: CacheEntry) -> None:
        shard = self._getShard(key)
        with shard.lock:
            shard.entries[key] = entry

    def _lookup(self, key: str) -> Optional[CacheEntry]:
        """
        Find live entry for `key`, purging it if expired.

        Returns:
            Optional[CacheEntry]: The entry or None if it's absent or expired
        """
        shard = self._getShard(key)
        entry = shard.entries.get(key)
        if entry is None:
            return None

        if entry.isExpired(self._clock()):
            with shard.lock:
                # Only drop the entry we've seen: a concurrent set may have replaced it
                if shard.entries.get(key) is entry:
                    del shard.entries[key]
                    logger.debug(f"Removed expired entry: {key}")
            return None

        return entry

    def get(self, key: str) -> Any:
        entry = self._lookup(key)
        if entry is None:
            logger.debug(f"Cache miss for key: {key}")
            raise CacheNotFoundError(key)

        logger.debug(f"Cache hit for key: {key}")
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._store(key, CacheEntry(value=value))

    def setWithTTL(self, key: str, value: Any, ttl: TTLType) -> None:
        """
        Store value expiring `ttl` after now, dood!

        The expiry instant is fixed at write time. Zero or negative TTL gives an
        entry that the very next read will purge.

        Raises:
            ValueError: If ttl is a malformed duration string
            TypeError: If ttl has an unsupported type
        """
        expiresAt = self._clock() + toSeconds(ttl)
        self._store(key, CacheEntry(value=value, expiresAt=expiresAt))

    def has(self, key: str) -> bool:
        return self._lookup(key) is not None

    def delete(self, key: str) -> None:
        shard = self._getShard(key)
        with shard.lock:
            shard.entries.pop(key, None)

    def clear(self) -> None:
        self._shards = self._createShards()
        logger.debug("Cleared all cache data")

    def getStats(self) -> Dict[str, Any]:
        """
        Get cache statistics, dood!

        Returns:
            Dict[str, Any]: Statistics dictionary containing:
                - type: Implementation name ("map")
                - entries: Stored entries, including expired ones not read yet
                - shards: Number of store partitions
                - threadSafe: Always True
        """
        return {
            "type": "map",
            "entries": len(self),
            "shards": self._shardCount,
            "threadSafe": True,
        }

    def __len__(self) -> int:
        return sum(len(shard.entries) for shard in self._shards)
