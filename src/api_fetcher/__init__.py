"""
API Fetcher - Resilient JSON GET client.

Response caching, per-attempt timeouts and retry with backoff around a
single outbound request.
"""

import logging

from .cache import CacheEntry, CacheStore, MemoryCache, make_cache_key
from .exceptions import (
    ApiFetcherError,
    NetworkError,
    TimeoutError,
    ParseError,
)
from .fetcher import ApiFetcher, AttemptOutcome, OutcomeKind
from .retry import RetryConfig, calculate_backoff
from .transport import HttpxTransport, Transport, TransportFailure, TransportResponse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "ApiFetcher",
    "AttemptOutcome",
    "OutcomeKind",
    # Cache
    "CacheEntry",
    "CacheStore",
    "MemoryCache",
    "make_cache_key",
    # Transport
    "Transport",
    "TransportFailure",
    "TransportResponse",
    "HttpxTransport",
    # Exceptions
    "ApiFetcherError",
    "NetworkError",
    "TimeoutError",
    "ParseError",
    # Retry
    "RetryConfig",
    "calculate_backoff",
]
