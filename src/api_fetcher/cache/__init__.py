"""
API Fetcher - Response Cache.

Pluggable key-value store with per-entry expiry.
"""

from .base import CacheEntry, CacheStore, make_cache_key
from .memory import MemoryCache

__all__ = [
    "CacheEntry",
    "CacheStore",
    "MemoryCache",
    "make_cache_key",
]
