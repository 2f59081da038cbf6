"""
Cache exceptions

This module defines the exception hierarchy for the cache library.
All cache-related errors inherit from CacheError base class.
"""

from typing import Optional


class CacheError(Exception):
    """
    Base exception for all cache errors.

    Catch this to handle any cache error generically.
    """

    pass


class CacheNotFoundError(CacheError, KeyError):
    """
    Exception raised when a key is absent or its entry has expired.

    Subclasses KeyError so callers can treat a cache like a mapping.

    Args:
        key: The key that was not found
    """

    def __init__(self, key: str):
        super().__init__(f"Data not found for key: {key}")
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message into quotes
        return str(self.args[0])


class CacheWrongTypeError(CacheError, TypeError):
    """
    Exception raised when a stored payload is not of the requested type.

    Only the byte-payload cache raises it: on write for non-bytes values and on
    read when a shared backend holds a non-bytes payload.

    Args:
        key: The offending key
        expectedType: Name of the expected type
        actualType: Name of the type that was found
    """

    def __init__(self, key: str, expectedType: str, actualType: str):
        super().__init__(f"Wrong type for key {key}: expected {expectedType}, got {actualType}")
        self.key = key
        self.expectedType = expectedType
        self.actualType = actualType


class CacheAggregateError(CacheError):
    """
    Exception raised when one key-level operation of a bulk operation fails.

    Bulk operations stop at the first failure and never roll back, so every
    key processed before `key` keeps its new state.

    Args:
        key: The key whose operation failed
        originalError: The exception raised by the key-level operation
    """

    def __init__(self, key: str, originalError: Optional[Exception] = None):
        super().__init__(f"{key}: {originalError}")
        self.key = key
        self.originalError = originalError


class CacheRegistryError(CacheError):
    """
    Exception raised for unknown or conflicting cache provider names.
    """

    pass


class CacheConfigError(CacheError):
    """
    Exception raised when cache configuration is invalid.

    This exception is raised when:
    - The shard count is not a positive integer
    - The configured provider is not registered
    - A duration string cannot be parsed
    """

    pass
