"""
Null cache implementation for mapcache.cache, dood!

This module provides a no-op cache implementation that implements the
CacheInterface but doesn't actually cache anything. Useful for testing
scenarios where caching is not needed or should be disabled, dood!
"""

from typing import Any, Dict

from .exceptions import CacheNotFoundError
from .interface import CacheInterface
from .types import TTLType, V


class NullCache(CacheInterface[V]):
    """No-op cache that never stores anything, dood!

    Useful for:
    - Testing without cache side effects
    - Disabling cache in production
    - Benchmarking cache impact
    """

    def get(self, key: str) -> V:
        """
        Always fail with cache miss, dood!

        Raises:
            CacheNotFoundError: Always
        """
        raise CacheNotFoundError(key)

    def set(self, key: str, value: V) -> None:
        """Do nothing (don't cache), but pretend to succeed, dood!"""
        pass

    def setWithTTL(self, key: str, value: V, ttl: TTLType) -> None:
        pass

    def delete(self, key: str) -> None:
        pass

    def clear(self) -> None:
        pass

    def getStats(self) -> Dict[str, Any]:
        """
        Return cache statistics indicating cache is disabled, dood!

        Returns:
            Dict[str, Any]: Dictionary with cache disabled indicator
        """
        return {"type": "null", "enabled": False}
