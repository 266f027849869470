"""
API Fetcher - Orchestrator.

Cache lookup, transport calls, classification and backoff for one fetch.
"""

from .client import ApiFetcher, DEFAULT_CACHE_TTL_MS, DEFAULT_TIMEOUT_MS
from .outcome import AttemptOutcome, FetchAttempt, OutcomeKind

__all__ = [
    "ApiFetcher",
    "AttemptOutcome",
    "FetchAttempt",
    "OutcomeKind",
    "DEFAULT_CACHE_TTL_MS",
    "DEFAULT_TIMEOUT_MS",
]
