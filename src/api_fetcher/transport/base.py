"""
Transport boundary.

A transport performs exactly one GET request. Cancellation is delivered
through asyncio: when an attempt times out the pending `request` coroutine
is cancelled, and implementations must let `asyncio.CancelledError`
propagate so the attempt cannot settle afterwards.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class TransportResponse:
    """Status and raw body of one HTTP exchange."""

    status_code: int
    content: bytes = b""
    reason: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class TransportFailure(Exception):
    """Raised by a transport when no response could be obtained."""

    def __init__(self, message: str, *, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out


class Transport(ABC):
    """Performs a single outbound request."""

    @abstractmethod
    async def request(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        """
        Send one GET request.

        Args:
            url: Fully resolved request URL
            headers: Request headers

        Returns:
            The response, whatever its status code

        Raises:
            TransportFailure: If the connection fails or the transport times out
        """
        ...
