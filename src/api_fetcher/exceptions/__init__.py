"""
API Fetcher - Exception Hierarchy.

Custom exceptions for fetch operations with retry-awareness.
"""

from .base import (
    ApiFetcherError,
    NetworkError,
    TimeoutError,
    ParseError,
)

__all__ = [
    "ApiFetcherError",
    "NetworkError",
    "TimeoutError",
    "ParseError",
]
