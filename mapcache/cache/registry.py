"""
Cache provider registry, dood!

The registry maps provider names to interchangeable CacheInterface instances.
It's an ordinary object: the application creates one during its own
initialization and passes it to whoever needs to pick a cache, nothing gets
registered at import time.

Usage:
    registry = CacheProviderRegistry()
    registerDefaultProviders(registry, configManager.getCacheConfig())

    cache = getConfiguredProvider(registry, configManager.getCacheConfig())
    cache.set("key", "value")
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from .bytes_cache import BytesMapCache
from .exceptions import CacheConfigError, CacheRegistryError
from .interface import CacheInterface
from .map_cache import DEFAULT_SHARDS, MapCache
from .null_cache import NullCache

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "map"


class CacheProviderRegistry:
    """
    Thread-safe registry of named cache providers.

    Registration is idempotent: registering the same provider object under the
    same name again is a no-op, while registering a different object under a
    taken name is an error.
    """

    def __init__(self):
        self._providers: Dict[str, CacheInterface] = {}
        self._lock = threading.RLock()

    def register(self, name: str, provider: CacheInterface) -> None:
        """
        Register provider under `name`.

        Args:
            name: Provider name, e.g. "map"
            provider: Cache implementation instance

        Raises:
            TypeError: If provider doesn't implement CacheInterface
            CacheRegistryError: If another provider is registered under `name`
        """
        if not isinstance(provider, CacheInterface):
            raise TypeError(f"Cache provider must implement CacheInterface, got {type(provider).__name__}")

        with self._lock:
            existing = self._providers.get(name)
            if existing is provider:
                logger.debug(f"Cache provider {name} is already registered")
                return
            if existing is not None:
                raise CacheRegistryError(
                    f"Cache provider {name} is already registered as {type(existing).__name__}, dood!"
                )

            self._providers[name] = provider
            logger.info(f"Registered cache provider {name}: {type(provider).__name__}")

    def unregister(self, name: str) -> None:
        """Remove provider `name`. Unknown names are ignored."""
        with self._lock:
            if self._providers.pop(name, None) is not None:
                logger.info(f"Unregistered cache provider {name}")

    def get(self, name: str) -> CacheInterface:
        """
        Get provider by name.

        Raises:
            CacheRegistryError: If no provider is registered under `name`
        """
        with self._lock:
            provider = self._providers.get(name)
        if provider is None:
            raise CacheRegistryError(f"Unknown cache provider: {name}")
        return provider

    def names(self) -> List[str]:
        """Get sorted list of registered provider names."""
        with self._lock:
            return sorted(self._providers.keys())

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._providers


def registerDefaultProviders(registry: CacheProviderRegistry, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Register built-in providers ("map", "bytes" and "null") in `registry`.

    Meant to be called once during application initialization. Calling it
    again for an already populated registry is a no-op for names that are
    taken.

    Args:
        registry: Registry to populate
        config: Cache configuration section, only `shards` is used here

    Raises:
        CacheConfigError: If configuration is invalid
    """
    config = config or {}
    shards = config.get("shards", DEFAULT_SHARDS)

    defaults: Dict[str, CacheInterface] = {}
    if "map" not in registry:
        defaults["map"] = MapCache(shards=shards)
    if "bytes" not in registry:
        defaults["bytes"] = BytesMapCache(shards=shards)
    if "null" not in registry:
        defaults["null"] = NullCache()

    for name, provider in defaults.items():
        registry.register(name, provider)


def getConfiguredProvider(registry: CacheProviderRegistry, config: Optional[Dict[str, Any]] = None) -> CacheInterface:
    """
    Get provider selected by the `provider` key of the cache configuration.

    Raises:
        CacheConfigError: If the configured provider is not registered
    """
    name = (config or {}).get("provider", DEFAULT_PROVIDER)
    try:
        return registry.get(name)
    except CacheRegistryError as e:
        raise CacheConfigError(f"Configured cache provider {name} is not available: {e}") from e
