"""Tests for the shared httpx client builder."""

import pytest

from apicall_sdk._internal.http import DEFAULT_TIMEOUT_MS, USER_AGENT, create_http_client


class TestCreateHttpClient:
    """Tests for create_http_client."""

    @pytest.mark.asyncio
    async def test_follows_redirects(self):
        """Clients should follow backend redirects."""
        async with create_http_client() as client:
            assert client.follow_redirects is True

    @pytest.mark.asyncio
    async def test_timeout_in_milliseconds(self):
        """timeout_ms should be converted to seconds."""
        async with create_http_client(timeout_ms=1500) as client:
            assert client.timeout.read == 1.5

    @pytest.mark.asyncio
    async def test_defaults(self):
        """Should use the default timeout, base URL and User-Agent."""
        async with create_http_client(base_url="http://test/api") as client:
            assert client.timeout.read == DEFAULT_TIMEOUT_MS / 1000
            assert str(client.base_url).startswith("http://test/api")
            assert client.headers["user-agent"] == USER_AGENT
