"""Unit tests for the shared HTTP client."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from staking_calc.data.clients.base import APIError, HTTPClient


class FakeResponse:
    """Async context manager standing in for an aiohttp response."""

    def __init__(self, status=200, payload=None, reason="OK", error=None):
        self.status = status
        self.reason = reason
        self._payload = payload
        self._error = error
        self.json = AsyncMock(return_value=payload)

    async def __aenter__(self):
        if self._error:
            raise self._error
        return self

    async def __aexit__(self, *exc):
        return False


@pytest.fixture
def client(settings):
    return HTTPClient("https://api.example.com/v1/", settings)


def attach_session(client, response):
    session = MagicMock()
    session.closed = False
    session.get = MagicMock(return_value=response)
    session.close = AsyncMock()
    client._session = session
    return session


class TestHTTPClient:
    """Tests for GET handling and error mapping."""

    @pytest.mark.asyncio
    async def test_get_json(self, client):
        session = attach_session(client, FakeResponse(payload={"ok": True}))

        data = await client.get_json("/pools", {"a": 1})

        assert data == {"ok": True}
        session.get.assert_called_once_with("https://api.example.com/v1/pools", params={"a": 1})

    @pytest.mark.asyncio
    async def test_error_status(self, client):
        attach_session(client, FakeResponse(status=404, reason="Not Found"))

        with pytest.raises(APIError, match="API Error: 404 - Not Found") as exc_info:
            await client.get_json("/missing")
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_no_response(self, client):
        attach_session(client, FakeResponse(error=asyncio.TimeoutError()))

        with pytest.raises(APIError, match="No response received from API"):
            await client.get_json("/slow")

    @pytest.mark.asyncio
    async def test_request_error(self, client):
        attach_session(client, FakeResponse(error=aiohttp.ClientError("bad url")))

        with pytest.raises(APIError, match="API Request Error: bad url"):
            await client.get_json("/x")

    @pytest.mark.asyncio
    async def test_close(self, client):
        session = attach_session(client, FakeResponse())

        await client.close()

        session.close.assert_called_once()

    def test_base_url_normalized(self, client):
        assert client.base_url == "https://api.example.com/v1"
        assert client._url("pools") == "https://api.example.com/v1/pools"
