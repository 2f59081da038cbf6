"""
Abstract cache interface for mapcache.cache, dood!

This module defines the CacheInterface that all cache implementations must
follow. Implementations provide the point primitives (get, set, setWithTTL,
delete, clear); the convenience and bulk operations are built on top of them
here, so every provider gets identical bulk semantics.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, Mapping

from .exceptions import CacheAggregateError, CacheNotFoundError, CacheWrongTypeError
from .types import TTLType, V

logger = logging.getLogger(__name__)


class CacheInterface(ABC, Generic[V]):
    """
    Generic cache interface for string-keyed storage, dood!

    This abstract base class defines the capability set every interchangeable
    cache implementation must satisfy: get/set/has/delete/clear and their bulk
    variants. Callers should depend on this class only.

    Type Parameters:
        V: The value type (any type)

    Example:
        >>> from mapcache.cache import MapCache
        >>>
        >>> cache: CacheInterface[dict] = MapCache()
        >>> cache.set("user:123", {"name": "Prinny", "level": 99})
        >>> cache.setWithTTL("session:abc", {"token": "xyz"}, "15m")
        >>> userData = cache.get("user:123")
        >>> cache.getMultiple(["user:123", "user:456"])  # {"user:123": {...}}
    """

    @abstractmethod
    def get(self, key: str) -> V:
        """
        Get cached value by key, dood!

        Reading an expired entry removes it from the cache, so this read may
        mutate the underlying store.

        Args:
            key: The cache key to retrieve

        Returns:
            V: The cached value

        Raises:
            CacheNotFoundError: If the key is absent or its entry has expired
        """
        pass

    @abstractmethod
    def set(self, key: str, value: V) -> None:
        """
        Store value in cache without expiration, dood!

        The value replaces any previous entry for the key and stays until it is
        deleted, overwritten or the cache is cleared.

        Args:
            key: The cache key to store the value under
            value: The value to cache
        """
        pass

    @abstractmethod
    def setWithTTL(self, key: str, value: V, ttl: TTLType) -> None:
        """
        Store value in cache expiring after `ttl`, dood!

        Args:
            key: The cache key to store the value under
            value: The value to cache
            ttl: Relative lifetime: seconds (int/float), datetime.timedelta or
                a duration string like "1h30m" or "00:05:00". Zero or negative
                values store an already expired entry.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove key from cache. Removing an absent key is a no-op, dood!

        Args:
            key: The cache key to remove
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """
        Clear all cached data, dood!

        After this call every previously stored key reports not-found.
        """
        pass

    @abstractmethod
    def getStats(self) -> Dict[str, Any]:
        """
        Get cache statistics, dood!

        Returns:
            Dict[str, Any]: Implementation-specific statistics
        """
        pass

    def getOrDefault(self, key: str, default: Any = None) -> Any:
        """
        Get cached value or `default` if it can't be returned.

        Missing, expired and wrong-typed entries all yield `default`, so this
        call never raises for a string key.
        """
        try:
            return self.get(key)
        except CacheNotFoundError:
            return default
        except CacheWrongTypeError as e:
            logger.warning(f"Key {key} holds unexpected payload, using default: {e}")
            return default

    def has(self, key: str) -> bool:
        """
        Check whether `get(key)` would currently succeed, dood!

        Applies the same lazy-expiry rule as `get`, so an expired entry is
        purged and reported as absent.
        """
        try:
            self.get(key)
            return True
        except CacheNotFoundError:
            return False
        except CacheWrongTypeError as e:
            logger.warning(f"Key {key} holds unexpected payload: {e}")
            return False

    def getMultiple(self, keys: Iterable[str]) -> Dict[str, V]:
        """
        Get several values at once, dood!

        Each key is looked up independently. Missing, expired and wrong-typed
        keys are skipped, so the result contains only the keys that were found.

        Args:
            keys: Keys to look up

        Returns:
            Dict[str, V]: Found keys mapped to their values
        """
        ret: Dict[str, V] = {}
        for key in keys:
            try:
                ret[key] = self.get(key)
            except CacheNotFoundError:
                continue
            except CacheWrongTypeError as e:
                logger.warning(f"Skipping key {key} in bulk get: {e}")
        return ret

    def setMultiple(self, values: Mapping[str, V]) -> None:
        """
        Store several values without expiration, dood!

        Pairs are applied one by one. The first failing pair stops the
        operation; pairs applied before it are NOT rolled back.

        Args:
            values: Mapping of keys to values

        Raises:
            CacheAggregateError: Carrying the failed key and the original error
        """
        for key, value in values.items():
            try:
                self.set(key, value)
            except Exception as e:
                raise CacheAggregateError(key, e) from e

    def deleteMultiple(self, keys: Iterable[str]) -> None:
        """
        Remove several keys, dood!

        Keys deleted before a failing key stay deleted.

        Raises:
            CacheAggregateError: Carrying the failed key and the original error
        """
        for key in keys:
            try:
                self.delete(key)
            except Exception as e:
                raise CacheAggregateError(key, e) from e

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)
