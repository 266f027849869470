"""
In-process cache store.
"""

import time
from typing import Any, Callable

from .base import CacheEntry, CacheStore


def _now_ms() -> float:
    return time.time() * 1000


class MemoryCache(CacheStore):
    """
    Dict-backed cache with lazy expiry.

    There is no size bound: entries leave only through an expired read,
    `delete` or `clear`. Every method completes without awaiting, so
    concurrent tasks on one event loop never observe a half-applied update.
    """

    def __init__(self, clock: Callable[[], float] = _now_ms):
        """
        Initialize the cache.

        Args:
            clock: Returns the current time in epoch milliseconds
        """
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    async def get(self, key: str) -> CacheEntry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_valid(self._clock()):
            # Only drop the entry we inspected; a concurrent set may have replaced it
            if self._entries.get(key) is entry:
                del self._entries[key]
            return None
        return entry

    async def set(self, key: str, value: Any, ttl_ms: float) -> None:
        if isinstance(value, CacheEntry):
            value = value.value
        self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + ttl_ms)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
