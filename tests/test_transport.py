"""Tests for the httpx transport - behavior focused with HTTP mocking."""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from api_fetcher import ApiFetcher, RetryConfig
from api_fetcher.exceptions import NetworkError
from api_fetcher.transport import HttpxTransport, TransportFailure


def create_response(status_code: int, json_data=None, text: str = "") -> httpx.Response:
    """Create a mock response with a proper request object."""
    request = httpx.Request("GET", "http://test")
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, request=request)
    return httpx.Response(status_code, text=text, request=request)


class TestHttpxTransport:
    """Test HttpxTransport request and error mapping."""

    @pytest.mark.asyncio
    async def test_returns_status_and_body(self):
        with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = create_response(200, {"id": 1})

            response = await HttpxTransport().request("http://test/x", {})

        assert response.ok
        assert response.status_code == 200
        assert response.reason == "OK"
        assert json.loads(response.content) == {"id": 1}

    @pytest.mark.asyncio
    async def test_returns_error_status_without_raising(self):
        with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = create_response(502, text="bad gateway")

            response = await HttpxTransport().request("http://test/x", {})

        assert not response.ok
        assert response.text == "bad gateway"

    @pytest.mark.asyncio
    async def test_merges_default_headers(self):
        transport = HttpxTransport(default_headers={"User-Agent": "fetcher", "Accept": "*/*"})

        with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = create_response(200, {})

            await transport.request("http://test/x", {"Accept": "application/json"})

        headers = mock_get.call_args.kwargs.get("headers", {})
        assert headers == {"User-Agent": "fetcher", "Accept": "application/json"}

    @pytest.mark.asyncio
    async def test_connect_error_becomes_transport_failure(self):
        with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mock_get:
            mock_get.side_effect = httpx.ConnectError("Connection refused")

            with pytest.raises(TransportFailure) as exc_info:
                await HttpxTransport().request("http://test/x", {})

        assert exc_info.value.timed_out is False

    @pytest.mark.asyncio
    async def test_timeout_becomes_timed_out_failure(self):
        with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mock_get:
            mock_get.side_effect = httpx.ReadTimeout("too slow")

            with pytest.raises(TransportFailure) as exc_info:
                await HttpxTransport().request("http://test/x", {})

        assert exc_info.value.timed_out is True


class TestFetcherWithHttpx:
    """ApiFetcher end to end over the default transport."""

    @pytest.mark.asyncio
    async def test_fetches_json(self):
        fetcher = ApiFetcher(base_url="http://test", retry_config=RetryConfig.no_retry())

        with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = create_response(200, {"id": 1, "title": "todo"})

            result = await fetcher.fetch_data("/todos/1")
            again = await fetcher.fetch_data("/todos/1")

        assert result == again == {"id": 1, "title": "todo"}
        assert mock_get.call_count == 1
        assert mock_get.call_args.args[0] == "http://test/todos/1"

    @pytest.mark.asyncio
    async def test_connection_failures_exhaust_retries(self):
        fetcher = ApiFetcher(
            base_url="http://test",
            retry_config=RetryConfig(max_retries=2, base_backoff_ms=1, jitter=False),
        )

        with patch.object(httpx.AsyncClient, "get", new_callable=AsyncMock) as mock_get:
            mock_get.side_effect = httpx.ConnectError("Connection refused")

            with pytest.raises(NetworkError):
                await fetcher.fetch_data("/todos/1")

        assert mock_get.call_count == 3
