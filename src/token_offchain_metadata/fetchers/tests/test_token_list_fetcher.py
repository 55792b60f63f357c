"""
Unit tests for the aiohttp token list fetcher.

Tests use a fake session and don't make real HTTP calls.
"""

import pytest
from unittest.mock import patch

from token_offchain_metadata.fetchers.base import JsonResponse
from token_offchain_metadata.fetchers.token_list_fetcher import AiohttpTokenListFetcher


class FakeResponse:
    """Async context manager standing in for aiohttp.ClientResponse."""

    def __init__(self, status=200, reason="OK", body="{}", content_type="application/json"):
        self.status = status
        self.reason = reason
        self.headers = {"Content-Type": content_type}
        self._body = body

    async def text(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records requested URLs and replays a canned response."""

    def __init__(self, response):
        self.response = response
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        return self.response


class TestJsonResponse:
    """Test the eagerly-read response object."""

    @pytest.mark.parametrize("status,ok", [(200, True), (204, True), (301, False), (404, False), (500, False)])
    def test_ok_reflects_status(self, status, ok):
        assert JsonResponse(url="https://x/", status=status, status_text="").ok is ok

    @pytest.mark.asyncio
    async def test_json_parses_body(self):
        response = JsonResponse(url="https://x/", status=200, status_text="OK", body='{"name": "L"}')
        assert await response.json() == {"name": "L"}

    @pytest.mark.asyncio
    async def test_json_raises_value_error_on_garbage(self):
        response = JsonResponse(url="https://x/", status=200, status_text="OK", body="<html>")
        with pytest.raises(ValueError):
            await response.json()


class TestAiohttpTokenListFetcher:
    """Test fetcher behaviour against a fake session."""

    @pytest.mark.asyncio
    async def test_successful_fetch(self):
        """Body, status and content type are captured."""
        session = FakeSession(FakeResponse(body='{"tokens": []}', content_type="text/plain"))
        fetcher = AiohttpTokenListFetcher(session=session, timeout_seconds=5)

        response = await fetcher("https://ipfs.io/ipns/tokens.uniswap.org")

        assert response.ok is True
        assert response.status_text == "OK"
        assert response.content_type == "text/plain"
        assert await response.json() == {"tokens": []}
        assert session.requests[0][0] == "https://ipfs.io/ipns/tokens.uniswap.org"

    @pytest.mark.asyncio
    async def test_timeout_is_passed(self):
        """The configured total timeout is applied to each request."""
        session = FakeSession(FakeResponse())
        fetcher = AiohttpTokenListFetcher(session=session, timeout_seconds=7)

        await fetcher("https://example.com/list.json")

        _, kwargs = session.requests[0]
        assert kwargs["timeout"].total == 7

    @pytest.mark.asyncio
    async def test_unsuccessful_fetch_is_returned_not_raised(self):
        """HTTP errors are reported through ok/status_text for the caller to act on."""
        session = FakeSession(FakeResponse(status=404, reason="Not Found", body="missing"))
        fetcher = AiohttpTokenListFetcher(session=session, timeout_seconds=5)

        response = await fetcher("https://example.com/missing.json")

        assert response.ok is False
        assert response.status == 404
        assert response.status_text == "Not Found"

    @pytest.mark.asyncio
    async def test_missing_reason(self):
        session = FakeSession(FakeResponse(status=500, reason=None))
        response = await AiohttpTokenListFetcher(session=session, timeout_seconds=5)("https://x/")
        assert response.status_text == ""

    @pytest.mark.asyncio
    async def test_opens_own_session_when_none_given(self):
        """Without an injected session a short-lived ClientSession is used."""
        session = FakeSession(FakeResponse(body="[]"))

        class FakeClientSession:
            async def __aenter__(self):
                return session

            async def __aexit__(self, exc_type, exc, tb):
                return False

        with patch("token_offchain_metadata.fetchers.token_list_fetcher.aiohttp.ClientSession",
                   return_value=FakeClientSession()):
            response = await AiohttpTokenListFetcher(timeout_seconds=5)("https://example.com/list.json")

        assert await response.json() == []
        assert len(session.requests) == 1

    def test_default_timeout_from_config(self, monkeypatch):
        """FETCH_TIMEOUT_SECONDS is used when no timeout is given."""
        monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "12.5")
        from token_offchain_metadata.config import reload_config
        reload_config()
        try:
            fetcher = AiohttpTokenListFetcher(session=FakeSession(FakeResponse()))
            assert fetcher.timeout.total == 12.5
        finally:
            monkeypatch.delenv("FETCH_TIMEOUT_SECONDS")
            reload_config()
