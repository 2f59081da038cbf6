"""
mapcache - In-process concurrent key/value cache with optional per-entry expiration.

Command line entry point: loads configuration, sets up logging, registers the
built-in cache providers and runs a short self-check against the configured one.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import List, Optional

from mapcache.cache import (
    CacheError,
    CacheInterface,
    CacheProviderRegistry,
    getConfiguredProvider,
    registerDefaultProviders,
)
from mapcache.config.manager import ConfigManager
from mapcache.logging_utils import initLogging
from mapcache.utils import jsonDumps, toSeconds

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO)
logger = logging.getLogger(__name__)

SELF_CHECK_KEY = "mapcache:self-check"


class MapCacheApp:
    """Application orchestrator that wires configuration, logging and cache providers."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        """Initialize application with all components."""
        self.configManager = ConfigManager(configPath, configDirs)

        initLogging(self.configManager.getLoggingConfig())

        # Providers are registered explicitly here, never on import
        self.registry = CacheProviderRegistry()
        registerDefaultProviders(self.registry, self.configManager.getCacheConfig())
        self.cache: CacheInterface = getConfiguredProvider(self.registry, self.configManager.getCacheConfig())

    def selfCheck(self) -> bool:
        """
        Exercise the configured provider once, dood!

        Returns:
            bool: True if the provider behaves like a cache. Providers reporting
                `enabled: False` in their stats (the null provider) are not
                expected to store anything and pass without checks.
        """
        stats = self.cache.getStats()
        if stats.get("enabled", True) is False:
            logger.info(f"Caching is disabled by {stats.get('type')} provider, skipping self-check")
            return True

        ttl = toSeconds(self.configManager.getCacheConfig().get("self-check-ttl", "1s"))
        payload = b"ok"

        self.cache.set(SELF_CHECK_KEY, payload)
        stored = self.cache.getOrDefault(SELF_CHECK_KEY) == payload

        self.cache.setWithTTL(SELF_CHECK_KEY, payload, ttl)
        stillThere = self.cache.has(SELF_CHECK_KEY)
        time.sleep(max(ttl, 0) + 0.01)
        expired = not self.cache.has(SELF_CHECK_KEY)

        self.cache.delete(SELF_CHECK_KEY)

        ok = stored and stillThere and expired
        logger.info(
            f"Self-check of {self.cache.getStats().get('type')} cache: "
            f"stored={stored}, ttlHit={stillThere}, expired={expired}"
        )
        return ok

    def run(self) -> bool:
        """Run self-check and log provider statistics."""
        logger.info(f"Registered cache providers: {', '.join(self.registry.names())}")
        ok = self.selfCheck()
        for name in self.registry.names():
            logger.info(f"Cache provider {name} stats: {jsonDumps(self.registry.get(name).getStats())}")
        return ok


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="mapcache - in-process concurrent key/value cache, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times), dood!",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit, dood!",
    )
    args = parser.parse_args()
    args.config = os.path.abspath(args.config)

    # Convert config directories to absolute paths
    if args.config_dir:
        args.config_dir = [os.path.abspath(dir_path) for dir_path in args.config_dir]

    return args


def prettyPrintConfig(configManager: ConfigManager):
    """Pretty-print the loaded configuration, dood!"""
    print("=== mapcache Configuration ===")
    print()
    print(jsonDumps(configManager.config, indent=2))
    print()
    print("=== Configuration loaded successfully, dood! ===")


def main():
    """Main entry point."""
    args = parse_arguments()

    try:
        if args.print_config:
            prettyPrintConfig(ConfigManager(args.config, args.config_dir))
            sys.exit(0)

        app = MapCacheApp(configPath=args.config, configDirs=args.config_dir)
        if not app.run():
            sys.exit(2)
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except (CacheError, ValueError, TypeError) as e:
        logger.error(f"mapcache failed: {e}")
        logger.exception(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
