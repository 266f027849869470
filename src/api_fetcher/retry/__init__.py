"""
API Fetcher - Retry Logic.

Retry configuration and capped exponential backoff with jitter.
"""

from .config import RetryConfig
from .backoff import calculate_backoff

__all__ = [
    "RetryConfig",
    "calculate_backoff",
]
