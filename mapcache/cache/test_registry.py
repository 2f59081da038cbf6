"""
Tests for cache provider registry, dood!
"""

import pytest

from .bytes_cache import BytesMapCache
from .exceptions import CacheConfigError, CacheRegistryError
from .map_cache import MapCache
from .null_cache import NullCache
from .registry import CacheProviderRegistry, getConfiguredProvider, registerDefaultProviders


@pytest.fixture
def registry():
    """Provide empty registry."""
    return CacheProviderRegistry()


class TestRegistryRegistration:
    """Test provider registration, dood!"""

    def test_register_and_get(self, registry):
        """Test that registered provider is returned by name, dood!"""
        cache = MapCache()
        registry.register("map", cache)

        assert registry.get("map") is cache
        assert "map" in registry
        assert registry.names() == ["map"]

    def test_register_is_idempotent(self, registry):
        """Test that registering the same provider twice is a no-op, dood!"""
        cache = MapCache()
        registry.register("map", cache)
        registry.register("map", cache)

        assert registry.get("map") is cache
        assert registry.names() == ["map"]

    def test_register_conflict(self, registry):
        """Test that a taken name can't be reused by another provider, dood!"""
        registry.register("map", MapCache())
        with pytest.raises(CacheRegistryError):
            registry.register("map", MapCache())

    def test_register_rejects_non_cache(self, registry):
        """Test that only CacheInterface implementations are accepted, dood!"""
        with pytest.raises(TypeError):
            registry.register("dict", {})  # type: ignore[arg-type]

    def test_get_unknown(self, registry):
        """Test that unknown names raise CacheRegistryError, dood!"""
        with pytest.raises(CacheRegistryError):
            registry.get("redis")

    def test_unregister(self, registry):
        """Test unregister of known and unknown names, dood!"""
        registry.register("null", NullCache())
        registry.unregister("null")
        registry.unregister("null")

        assert "null" not in registry
        assert registry.names() == []

    def test_registries_are_independent(self):
        """Test that nothing is shared between registry instances, dood!"""
        first = CacheProviderRegistry()
        second = CacheProviderRegistry()
        first.register("map", MapCache())

        assert "map" not in second


class TestDefaultProviders:
    """Test registration of built-in providers, dood!"""

    def test_register_default_providers(self, registry):
        """Test that all built-in providers get registered, dood!"""
        registerDefaultProviders(registry)

        assert registry.names() == ["bytes", "map", "null"]
        assert isinstance(registry.get("map"), MapCache)
        assert isinstance(registry.get("bytes"), BytesMapCache)
        assert isinstance(registry.get("null"), NullCache)

    def test_shards_from_config(self, registry):
        """Test that shard count is taken from config, dood!"""
        registerDefaultProviders(registry, {"shards": 4})

        assert registry.get("map").getStats()["shards"] == 4
        assert registry.get("bytes").getStats()["shards"] == 4

    def test_invalid_shards_from_config(self, registry):
        """Test that invalid shard count is reported as config error, dood!"""
        with pytest.raises(CacheConfigError):
            registerDefaultProviders(registry, {"shards": 0})

    def test_repeated_registration_keeps_providers(self, registry):
        """Test that calling registration twice keeps the first providers, dood!"""
        registerDefaultProviders(registry)
        mapCache = registry.get("map")

        registerDefaultProviders(registry)
        assert registry.get("map") is mapCache

    def test_custom_provider_survives_defaults(self, registry):
        """Test that defaults don't override providers registered earlier, dood!"""
        custom = NullCache()
        registry.register("map", custom)

        registerDefaultProviders(registry)
        assert registry.get("map") is custom


class TestConfiguredProvider:
    """Test provider selection from config, dood!"""

    def test_default_provider(self, registry):
        """Test that "map" is used when nothing is configured, dood!"""
        registerDefaultProviders(registry)
        assert getConfiguredProvider(registry) is registry.get("map")
        assert getConfiguredProvider(registry, {}) is registry.get("map")

    def test_configured_provider(self, registry):
        """Test that provider is selected by name, dood!"""
        registerDefaultProviders(registry)
        assert getConfiguredProvider(registry, {"provider": "bytes"}) is registry.get("bytes")

    def test_unknown_configured_provider(self, registry):
        """Test that unknown provider is reported as config error, dood!"""
        registerDefaultProviders(registry)
        with pytest.raises(CacheConfigError):
            getConfiguredProvider(registry, {"provider": "memcached"})

    def test_providers_are_interchangeable(self, registry):
        """Test that callers can use any provider through the same contract, dood!"""
        registerDefaultProviders(registry)

        for name in ("map", "bytes"):
            cache = registry.get(name)
            cache.setMultiple({"a": b"1", "b": b"2"})
            assert cache.getMultiple(["a", "b", "c"]) == {"a": b"1", "b": b"2"}
            cache.deleteMultiple(["a"])
            assert cache.has("a") is False
            cache.clear()
            assert cache.has("b") is False
