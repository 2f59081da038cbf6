"""
Pytest configuration and common fixtures for mapcache tests.

All fixtures follow camelCase naming convention.
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from mapcache.cache import CacheProviderRegistry, registerDefaultProviders

# ============================================================================
# Clock Fixtures
# ============================================================================


class FakeClock:
    """Manually advanced clock for deterministic expiration tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fakeClock() -> FakeClock:
    """
    Provide fake clock.

    Example:
        def testExpiry(fakeClock):
            cache = MapCache(clock=fakeClock)
            cache.setWithTTL("key", "value", 10)
            fakeClock.advance(11)
            assert not cache.has("key")
    """
    return FakeClock()


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def defaultRegistry() -> CacheProviderRegistry:
    """Provide registry populated with built-in providers."""
    registry = CacheProviderRegistry()
    registerDefaultProviders(registry)
    return registry


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def tempDir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def writeConfig(tempDir: Path) -> Callable[[str], Path]:
    """
    Provide helper writing config.toml into the temporary directory.

    Returns:
        Callable taking TOML text and returning the config file path
    """

    def _write(content: str) -> Path:
        configPath = tempDir / "config.toml"
        configPath.write_text(content)
        return configPath

    return _write
