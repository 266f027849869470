"""
httpx-backed transport.
"""

import logging
from typing import Mapping

import httpx

from .base import Transport, TransportFailure, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """
    Transport using `httpx.AsyncClient`.

    A fresh client is opened per request; no connections are pooled
    across calls. Timeouts are enforced by the caller, so httpx's own
    timeout is disabled unless one is given here.
    """

    def __init__(
        self,
        default_headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
        timeout: float | None = None,
    ):
        """
        Initialize the transport.

        Args:
            default_headers: Headers sent with every request (per-call headers win)
            follow_redirects: Follow 3xx responses
            timeout: Optional httpx-level timeout in seconds
        """
        self.default_headers = dict(default_headers or {})
        self.follow_redirects = follow_redirects
        self.timeout = timeout

    async def request(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        merged = {**self.default_headers, **headers}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=self.follow_redirects
            ) as client:
                response = await client.get(url, headers=merged)
        except httpx.TimeoutException as e:
            raise TransportFailure(f"Timed out requesting {url}: {e}", timed_out=True) from e
        except httpx.HTTPError as e:
            logger.debug(f"[ApiFetcher] Transport error for {url}: {e!r}")
            raise TransportFailure(f"Failed to request {url}: {e}") from e

        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            reason=response.reason_phrase,
            headers=dict(response.headers),
        )
