"""
mapcache - In-process concurrent key/value cache with optional per-entry expiration.
"""

__version__ = "0.1.0"
