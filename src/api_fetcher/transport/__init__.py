"""
API Fetcher - Transport.

The boundary that performs a single HTTP request.
"""

from .base import Transport, TransportFailure, TransportResponse
from .httpx_transport import HttpxTransport

__all__ = [
    "Transport",
    "TransportFailure",
    "TransportResponse",
    "HttpxTransport",
]
