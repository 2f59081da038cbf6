"""
mapcache.cache - In-process key/value cache with lazy TTL expiration, dood!

Core Components:
- CacheInterface: Abstract base class for all cache implementations
- MapCache: Thread-safe sharded cache for arbitrary values
- BytesMapCache: Thread-safe cache for byte payloads
- NullCache: No-op cache for testing and debugging
- CacheProviderRegistry: Explicit registry of interchangeable providers

Example Usage:
    >>> from mapcache.cache import MapCache
    >>>
    >>> cache = MapCache()
    >>> cache.setWithTTL("user:123", {"name": "Prinny", "level": 99}, "1h")
    >>> if cache.has("user:123"):
    ...     print(f"Found user: {cache.get('user:123')['name']}, dood!")
"""

from .bytes_cache import BytesMapCache
from .exceptions import (
    CacheAggregateError,
    CacheConfigError,
    CacheError,
    CacheNotFoundError,
    CacheRegistryError,
    CacheWrongTypeError,
)
from .interface import CacheInterface
from .map_cache import DEFAULT_SHARDS, MapCache
from .null_cache import NullCache
from .registry import CacheProviderRegistry, getConfiguredProvider, registerDefaultProviders
from .types import CacheEntry, TTLType, V

__all__ = [
    # Core types
    "CacheEntry",
    "TTLType",
    "V",
    # Interfaces
    "CacheInterface",
    # Implementations
    "MapCache",
    "BytesMapCache",
    "NullCache",
    "DEFAULT_SHARDS",
    # Registry
    "CacheProviderRegistry",
    "registerDefaultProviders",
    "getConfiguredProvider",
    # Exceptions
    "CacheError",
    "CacheNotFoundError",
    "CacheWrongTypeError",
    "CacheAggregateError",
    "CacheRegistryError",
    "CacheConfigError",
]
