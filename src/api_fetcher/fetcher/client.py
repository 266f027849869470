"""
Caching, retrying fetch client.

ApiFetcher wraps a single GET request with a response cache, a per-attempt
timeout and retry with capped exponential backoff.
"""

import asyncio
import json
import logging
import random
from typing import Any, Callable, Mapping

from ..cache import CacheEntry, CacheStore, MemoryCache, make_cache_key
from ..exceptions import ApiFetcherError, NetworkError, ParseError, TimeoutError
from ..retry import RetryConfig, calculate_backoff
from ..transport import HttpxTransport, Transport, TransportFailure, TransportResponse
from .outcome import AttemptOutcome, FetchAttempt, OutcomeKind

DEFAULT_CACHE_TTL_MS = 60_000
DEFAULT_TIMEOUT_MS = 10_000
DIAGNOSTIC_BODY_LIMIT = 200


class ApiFetcher:
    """
    Client for JSON GET endpoints.

    Features:
    - Response cache shared by all calls on the instance
    - Per-attempt timeout that cancels the in-flight request
    - Retry with exponential backoff and jitter
    - Malformed 2xx bodies fail fast without retrying

    Calls are independent and may run concurrently; they share only the
    cache store.
    """

    def __init__(
        self,
        base_url: str | None = None,
        cache_ttl_ms: float = DEFAULT_CACHE_TTL_MS,
        retry_config: RetryConfig | None = None,
        logger: logging.Logger | None = None,
        cache_store: CacheStore | None = None,
        transport: Transport | None = None,
        rng: random.Random | None = None,
        on_retry: Callable[[int, ApiFetcherError, float], None] | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Prefix joined to every request path
            cache_ttl_ms: Lifetime of cached responses in milliseconds
            retry_config: Retry configuration for failed requests
            logger: Logger for diagnostics (default: silent module logger)
            cache_store: Cache backend (default: in-memory)
            transport: Request transport (default: httpx)
            rng: Random source for backoff jitter
            on_retry: Optional callback(attempt, error, delay_ms) called before each retry
        """
        self._base_url = base_url
        self._cache_ttl_ms = cache_ttl_ms
        self._retry_config = retry_config or RetryConfig()
        self._logger = logger or logging.getLogger(__name__)
        self._cache = cache_store if cache_store is not None else MemoryCache()
        self._transport = transport or HttpxTransport()
        self._rng = rng
        self._on_retry = on_retry

    @property
    def base_url(self) -> str | None:
        return self._base_url

    @property
    def cache_ttl_ms(self) -> float:
        return self._cache_ttl_ms

    @property
    def retry_config(self) -> RetryConfig:
        return self._retry_config

    def build_url(self, path: str) -> str:
        """Join base_url and path with exactly one slash between them."""
        if not self._base_url:
            return path
        return f"{self._base_url.rstrip('/')}/{path.lstrip('/')}"

    def cache_key(self, path: str, headers: Mapping[str, str] | None = None) -> str:
        """Return the cache key used for a GET of path with headers."""
        return make_cache_key("GET", self.build_url(path), headers)

    async def fetch_data(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        timeout_ms: float | None = None,
    ) -> Any:
        """
        Fetch and decode a JSON resource, serving from cache when fresh.

        Args:
            path: Resource path, or a full URL when no base_url is set
            headers: Request headers (part of the cache key)
            timeout_ms: Timeout for each individual attempt in milliseconds
                (default: 10000)

        Returns:
            The decoded JSON value

        Raises:
            ParseError: A 2xx response body was not valid JSON (never retried)
            NetworkError: Retries exhausted after HTTP or connection failures
            TimeoutError: Retries exhausted and the last attempt timed out
        """
        if timeout_ms is None:
            timeout_ms = DEFAULT_TIMEOUT_MS
        url = self.build_url(path)
        headers = dict(headers or {})
        key = make_cache_key("GET", url, headers)

        cached = await self._read_cache(key)
        if cached is not None:
            return cached.value

        state = FetchAttempt()
        max_attempts = self._retry_config.max_attempts

        for attempt in range(max_attempts):
            state.index = attempt
            self._logger.info(f"[ApiFetcher] Fetch attempt {attempt + 1}/{max_attempts}: {url}")
            outcome = await self._attempt(url, headers, timeout_ms)

            if outcome.kind is OutcomeKind.SUCCESS:
                await self._write_cache(key, outcome.value)
                return outcome.value

            error = outcome.error
            if not outcome.kind.retryable:
                self._logger.error(f"[ApiFetcher] {error}, not retrying")
                raise error from error.cause

            state.last_error = error
            if attempt >= self._retry_config.max_retries:
                break

            delay = calculate_backoff(attempt + 1, self._retry_config, self._rng)
            if self._on_retry:
                self._on_retry(attempt + 1, error, delay)
            else:
                self._logger.warning(
                    f"[ApiFetcher] {error}, "
                    f"retrying in {delay:.0f}ms ({attempt + 1}/{max_attempts})"
                )
            await asyncio.sleep(delay / 1000)

        error = state.last_error or NetworkError("Failed to fetch", url=url)
        self._logger.error(
            f"[ApiFetcher] Retries exhausted after {state.index + 1} attempts "
            f"({state.elapsed_ms:.0f}ms): {error}"
        )
        raise error from error.cause

    async def invalidate(self, path: str, headers: Mapping[str, str] | None = None) -> None:
        """Drop the cached response for path with headers, if any."""
        key = self.cache_key(path, headers)
        try:
            await self._cache.delete(key)
        except Exception as e:
            self._logger.warning(f"[ApiFetcher] Failed to delete cache entry {key}: {e}")

    async def _read_cache(self, key: str) -> CacheEntry | None:
        try:
            cached = await self._cache.get(key)
        except Exception as e:
            self._logger.warning(f"[ApiFetcher] Cache read failed, treating as miss: {e}")
            return None
        if cached is None:
            self._logger.info(f"[ApiFetcher] Cache miss: {key}")
        else:
            self._logger.info(f"[ApiFetcher] Cache hit: {key}")
        return cached

    async def _write_cache(self, key: str, value: Any) -> None:
        try:
            await self._cache.set(key, value, self._cache_ttl_ms)
        except Exception as e:
            self._logger.warning(f"[ApiFetcher] Failed to set cache: {e}")

    async def _attempt(
        self, url: str, headers: Mapping[str, str], timeout_ms: float
    ) -> AttemptOutcome:
        """Run one transport call and classify what happened."""
        timeout = timeout_ms / 1000
        try:
            response = await asyncio.wait_for(
                self._transport.request(url, headers), timeout=timeout
            )
        except asyncio.TimeoutError as e:
            return AttemptOutcome.failure(
                OutcomeKind.TIMEOUT,
                TimeoutError(f"Request timed out after {timeout_ms:.0f}ms", e, url=url),
            )
        except TransportFailure as e:
            if e.timed_out:
                return AttemptOutcome.failure(
                    OutcomeKind.TIMEOUT, TimeoutError(str(e), e, url=url)
                )
            return AttemptOutcome.failure(
                OutcomeKind.NETWORK, NetworkError(str(e), e, url=url)
            )
        except Exception as e:
            return AttemptOutcome.failure(
                OutcomeKind.NETWORK, NetworkError("Unknown network error", e, url=url)
            )

        if not response.ok:
            message = f"HTTP {response.status_code} {response.reason}".rstrip()
            detail = self._diagnostic_text(response)
            if detail:
                message = f"{message}: {detail}"
            return AttemptOutcome.failure(
                OutcomeKind.NETWORK,
                NetworkError(message, url=url, status_code=response.status_code),
            )

        try:
            value = json.loads(response.content)
        except ValueError as e:
            return AttemptOutcome.failure(
                OutcomeKind.PARSE,
                ParseError("Failed to parse JSON", e, url=url, status_code=response.status_code),
            )
        return AttemptOutcome.success(value)

    def _diagnostic_text(self, response: TransportResponse) -> str:
        """Best-effort excerpt of an error body; never raises."""
        try:
            return response.text.strip()[:DIAGNOSTIC_BODY_LIMIT]
        except Exception as e:
            self._logger.debug(f"[ApiFetcher] Could not read error body: {e}")
            return ""
