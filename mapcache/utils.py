"""
Common utilities for mapcache.
"""

import datetime
import json
import logging
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


def parseDuration(durationStr: str) -> int:
    """
    Parse duration string to integer.

    Args:
        durationStr: String in one of formats:
            1. `DDdHHhMMmSSs` (e.g., "1d2h30m15s") - each section is optional but at least one must be present
            2. `HH:MM[:SS]` (e.g., "2:30" or "2:30:15")

    Returns:
        Total duration in seconds as integer. A leading "-" negates the result.

    Raises:
        ValueError: If the string doesn't match any supported format.
    """
    durationStr = durationStr.strip()
    if durationStr.startswith("-"):
        return -parseDuration(durationStr[1:])

    # Format 1: DDdHHhMMmSSs (e.g., "1d2h30m15s") - each section is optional but at least one must be present
    if durationStr and any(c in durationStr for c in ["d", "h", "m", "s"]):
        try:
            total_seconds = 0
            remaining = durationStr

            for suffix, multiplier in (("d", 24 * 3600), ("h", 3600), ("m", 60), ("s", 1)):
                if suffix in remaining:
                    index = remaining.index(suffix)
                    total_seconds += int(remaining[:index]) * multiplier
                    remaining = remaining[index + 1 :]

            # If we processed the entire string and have at least one component, return the result
            if remaining == "":
                return total_seconds

        except (ValueError, IndexError):
            pass  # Will try next format

    # Format 2: HH:MM[:SS] (e.g., "2:30" or "2:30:15")
    time_parts = durationStr.split(":")
    if 2 <= len(time_parts) <= 3:
        try:
            hours = int(time_parts[0])
            minutes = int(time_parts[1])
            seconds = int(time_parts[2]) if len(time_parts) == 3 else 0

            # Validate ranges
            if 0 <= minutes < 60 and 0 <= seconds < 60:
                return hours * 3600 + minutes * 60 + seconds

        except ValueError:
            pass  # Will raise ValueError at end

    raise ValueError(
        f"Invalid duration format: {durationStr}. Expected formats: '[DDd][HHh][MMm][SSs]' or 'HH:MM[:SS]'"
    )


def toSeconds(ttl: Union[int, float, datetime.timedelta, str]) -> float:
    """
    Convert relative duration to seconds.

    Args:
        ttl: Seconds as int/float, a datetime.timedelta or a string accepted by parseDuration

    Returns:
        Duration in seconds (may be zero or negative)

    Raises:
        ValueError: If a string duration can't be parsed
        TypeError: If ttl is of an unsupported type
    """
    # bool is an int subclass, but True as a TTL is certainly a bug
    if isinstance(ttl, bool):
        raise TypeError("TTL must be a number, timedelta or duration string, got bool")
    if isinstance(ttl, (int, float)):
        return float(ttl)
    if isinstance(ttl, datetime.timedelta):
        return ttl.total_seconds()
    if isinstance(ttl, str):
        return float(parseDuration(ttl))
    raise TypeError(f"TTL must be a number, timedelta or duration string, got {type(ttl).__name__}")


def jsonDumps(data: Any, compact: Optional[bool] = None, **kwargs) -> str:
    dumpKwargs = {
        "ensure_ascii": False,
        "default": str,
        "sort_keys": True,
    }

    if compact is None:
        # If indent is passed, then user want pretty-printed JSON,
        #  no need to use compact separators
        compact = "indent" not in kwargs

    if compact:
        dumpKwargs["separators"] = (",", ":")
    dumpKwargs.update(kwargs)
    return json.dumps(data, **dumpKwargs)
