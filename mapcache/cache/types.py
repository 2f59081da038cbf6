"""
Core type definitions for mapcache.cache, dood!

This module contains the stored entry wrapper and the type aliases shared by
all cache implementations.
"""

import datetime
from dataclasses import dataclass
from typing import Any, Optional, TypeVar, Union

# Type variable for the value type of a cache implementation
V = TypeVar("V")

# Relative durations accepted by setWithTTL: seconds, timedelta or "1h30m"-style string
TTLType = Union[int, float, datetime.timedelta, str]


@dataclass(frozen=True)
class CacheEntry:
    """
    Single stored value with optional absolute expiry instant, dood!

    Entries are immutable: a set operation always stores a new entry, so a
    reader holding an entry never sees it change under its feet.

    Attributes:
        value: The stored value (stored as-is, never copied)
        expiresAt: Absolute instant (seconds on the cache clock) after which the
            entry is logically absent. None means the entry never expires.
    """

    value: Any
    expiresAt: Optional[float] = None

    def isExpired(self, now: float) -> bool:
        """Check if entry is expired at the given instant."""
        return self.expiresAt is not None and self.expiresAt <= now
