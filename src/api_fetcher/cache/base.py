"""
Cache store interface and key derivation.

Stores are shared by every call made through one client and may see
concurrent reads and writes on the same key. Last writer wins.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and its absolute expiry (epoch milliseconds)."""

    value: Any
    expires_at: float

    def is_valid(self, now: float) -> bool:
        """An entry stays valid up to and including its expiry instant."""
        return now <= self.expires_at


class CacheStore(ABC):
    """
    Abstract key-value store with per-entry expiry.

    Implementations must treat expired entries as absent, deleting them
    when an expired read happens rather than on write.
    """

    @abstractmethod
    async def get(self, key: str) -> CacheEntry | None:
        """Return the live entry for key, or None if missing or expired."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_ms: float) -> None:
        """Store value under key, expiring ttl_ms from now."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key. No error if it is absent."""
        ...


def make_cache_key(method: str, url: str, headers: Mapping[str, str] | None = None) -> str:
    """
    Build a deterministic cache key for a request.

    Header names are lower-cased and sorted, so header sets that differ
    only in insertion order or name casing share a key.

    Raises:
        ValueError: If two header names differ only by case
    """
    normalized = sorted((name.lower(), value) for name, value in (headers or {}).items())
    names = [name for name, _ in normalized]
    if len(names) != len(set(names)):
        raise ValueError(f"Duplicate header names differing only by case: {sorted(headers)}")
    return f"{method.upper()}:{url}:{json.dumps(normalized, separators=(',', ':'))}"
