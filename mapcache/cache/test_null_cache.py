"""
Tests for NullCache implementation, dood!
"""

import pytest

from .exceptions import CacheNotFoundError
from .interface import CacheInterface
from .null_cache import NullCache


class TestNullCache:
    """Test NullCache never stores anything, dood!"""

    def test_implements_interface(self):
        """Test that NullCache is a CacheInterface, dood!"""
        assert isinstance(NullCache(), CacheInterface)

    def test_get_always_misses(self):
        """Test that get raises even after set, dood!"""
        cache = NullCache[str]()
        cache.set("key1", "value1")
        cache.setWithTTL("key2", "value2", 60)

        with pytest.raises(CacheNotFoundError):
            cache.get("key1")
        assert cache.has("key2") is False
        assert cache.getOrDefault("key1", "default") == "default"

    def test_bulk_operations(self):
        """Test bulk operations succeed and find nothing, dood!"""
        cache = NullCache[int]()
        cache.setMultiple({"a": 1, "b": 2})
        assert cache.getMultiple(["a", "b"]) == {}
        cache.deleteMultiple(["a", "b"])

    def test_delete_and_clear_are_noops(self):
        """Test that delete and clear don't raise, dood!"""
        cache = NullCache()
        cache.delete("missing")
        cache.clear()

    def test_get_stats(self):
        """Test stats report disabled cache, dood!"""
        assert NullCache().getStats() == {"type": "null", "enabled": False}
