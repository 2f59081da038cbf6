"""
Byte-payload cache built on top of MapCache, dood!

BytesMapCache exposes the same capability set as MapCache but only ever hands
out `bytes`. Writes of anything that isn't bytes-like are rejected, and reads
check the payload type because the underlying MapCache may be shared with
writers that store arbitrary values.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

from .exceptions import CacheConfigError, CacheWrongTypeError
from .interface import CacheInterface
from .map_cache import DEFAULT_SHARDS, MapCache
from .types import TTLType

logger = logging.getLogger(__name__)


class BytesMapCache(CacheInterface[bytes]):
    """
    Thread-safe cache for byte payloads with optional per-entry TTL, dood!

    Accepts bytes, bytearray and memoryview values; mutable buffers are
    converted to immutable bytes on write.

    Args:
        backend: MapCache to store payloads in. If None, a private one is created.
            Note that clear() clears the whole backend, including values stored
            through other users of a shared backend.
        shards: Shard count for the private backend
        clock: Time source for the private backend

    Raises:
        CacheConfigError: If `shards` or `clock` is passed together with `backend`

    Example:
        >>> cache = BytesMapCache()
        >>> cache.set("avatar:42", b"\\x89PNG...")
        >>> cache.get("avatar:42")
        b'\\x89PNG...'
        >>> cache.set("avatar:43", "not bytes")  # raises CacheWrongTypeError
    """

    def __init__(
        self,
        backend: Optional[MapCache] = None,
        *,
        shards: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        if backend is not None:
            if shards is not None or clock is not None:
                raise CacheConfigError("Shards and clock belong to the backend, pass them to MapCache instead")
            self._backend = backend
        else:
            self._backend = MapCache(
                shards=shards if shards is not None else DEFAULT_SHARDS,
                clock=clock if clock is not None else time.time,
            )

    @staticmethod
    def _toBytes(key: str, value: Any) -> bytes:
        if isinstance(value, bytes):
            return value
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        raise CacheWrongTypeError(key, "bytes", type(value).__name__)

    def get(self, key: str) -> bytes:
        """
        Get cached payload by key, dood!

        Raises:
            CacheNotFoundError: If the key is absent or its entry has expired
            CacheWrongTypeError: If the stored value is not bytes
        """
        value = self._backend.get(key)
        if not isinstance(value, bytes):
            raise CacheWrongTypeError(key, "bytes", type(value).__name__)
        return value

    def set(self, key: str, value: bytes) -> None:
        """
        Store payload without expiration.

        Raises:
            CacheWrongTypeError: If value is not bytes-like
        """
        self._backend.set(key, self._toBytes(key, value))

    def setWithTTL(self, key: str, value: bytes, ttl: TTLType) -> None:
        """
        Store payload expiring after `ttl`.

        Raises:
            CacheWrongTypeError: If value is not bytes-like
        """
        self._backend.setWithTTL(key, self._toBytes(key, value), ttl)

    def delete(self, key: str) -> None:
        self._backend.delete(key)

    def clear(self) -> None:
        self._backend.clear()

    def getStats(self) -> Dict[str, Any]:
        stats = self._backend.getStats()
        stats["type"] = "bytes"
        return stats
