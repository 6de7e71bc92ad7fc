"""
Unit tests for the Discogs core service: URL building, signing, status
mapping and decoding.
"""

import asyncio
import json

import aiohttp
import pytest
from pydantic import BaseModel

from api.discogs.auth import StaticAuth
from api.discogs.core import DiscogsService, build_url
from api.discogs.errors import (
    DecodeError,
    TransportError,
    UnauthorizedError,
    UpstreamError,
)
from api.discogs.models import Release

pytestmark = pytest.mark.unit


class Thing(BaseModel):
    id: int


class TestBuildURL:
    """Tests for build_url."""

    def test_without_params(self):
        assert build_url("https://api.discogs.com", "/releases/1") == (
            "https://api.discogs.com/releases/1"
        )

    def test_with_params(self):
        params = {"page": 2, "per_page": 50}
        url = build_url("https://api.discogs.com", "/artists/1/releases", params)
        assert url == "https://api.discogs.com/artists/1/releases?page=2&per_page=50"

    def test_drops_none_values(self):
        params = {"curr_abbr": "EUR", "page": None}
        url = build_url("https://api.discogs.com", "/releases/1", params)
        assert url == "https://api.discogs.com/releases/1?curr_abbr=EUR"

    def test_quotes_spaces_as_percent20(self):
        url = build_url("https://api.discogs.com", "/database/search", {"q": "never gonna"})
        assert url.endswith("?q=never%20gonna")


class TestDiscogsService:
    """Tests for DiscogsService construction and requests."""

    def test_init_defaults_to_static_auth(self, options, mock_discogs_token):
        service = DiscogsService(options)

        assert service.base_url == "https://api.discogs.com"
        assert service.timeout == 30
        assert service.auth == StaticAuth(token=mock_discogs_token)

    def test_init_oauth_only_service_has_no_default_auth(self, options):
        class OAuthOnly(DiscogsService):
            requires_oauth = True

        assert OAuthOnly(options).auth is None

    @pytest.mark.asyncio
    async def test_make_request_success(self, options, mock_http):
        session = mock_http(data={"id": 7})
        service = DiscogsService(options)

        result = await service._make_request("/things/7", None, service.auth, Thing)

        assert result == Thing(id=7)
        session.get.assert_called_once()
        assert str(session.get.call_args.args[0]) == "https://api.discogs.com/things/7"

    @pytest.mark.asyncio
    async def test_make_request_sends_static_headers(
        self, options, mock_http, mock_user_agent, mock_discogs_token
    ):
        session = mock_http(data={"id": 7})
        service = DiscogsService(options)

        await service._make_request("/things/7", None, service.auth, Thing)

        headers = session.get.call_args.kwargs["headers"]
        assert headers["User-Agent"] == mock_user_agent
        assert headers["Authorization"] == f"Discogs token={mock_discogs_token}"

    @pytest.mark.asyncio
    async def test_make_request_oauth_signs(self, options, oauth, mock_http):
        session = mock_http(data={"id": 7})
        service = DiscogsService(options)

        await service._make_request("/things/7", {"page": 1}, oauth, Thing)

        headers = session.get.call_args.kwargs["headers"]
        assert headers["Authorization"].startswith("OAuth ")
        assert 'oauth_consumer_key="test_consumer_key"' in headers["Authorization"]
        assert str(session.get.call_args.args[0]) == "https://api.discogs.com/things/7?page=1"

    @pytest.mark.asyncio
    async def test_make_request_401(self, options, mock_http):
        mock_http(status=401, reason="Unauthorized")
        service = DiscogsService(options)

        with pytest.raises(UnauthorizedError) as exc_info:
            await service._make_request("/things/7", None, service.auth, Thing)

        assert exc_info.value.status == 401
        assert exc_info.value.status_text == "401 Unauthorized"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status,reason",
        [
            (404, "Not Found"),
            (500, "Internal Server Error"),
            (429, "Too Many Requests"),
            (204, "No Content"),
        ],
    )
    async def test_make_request_other_status(self, options, mock_http, status, reason):
        mock_http(status=status, reason=reason)
        service = DiscogsService(options)

        with pytest.raises(UpstreamError) as exc_info:
            await service._make_request("/things/7", None, service.auth, Thing)

        assert exc_info.value.status == status
        assert exc_info.value.status_text == f"{status} {reason}"
        assert f"{status} {reason}" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_make_request_invalid_json(self, options, mock_http):
        mock_http(json_error=json.JSONDecodeError("Expecting value", "<html>", 0))
        service = DiscogsService(options)

        with pytest.raises(DecodeError, match="invalid JSON response"):
            await service._make_request("/things/7", None, service.auth, Thing)

    @pytest.mark.asyncio
    async def test_make_request_payload_does_not_fit_model(self, options, mock_http):
        mock_http(data={"id": "not-a-number"})
        service = DiscogsService(options)

        with pytest.raises(DecodeError, match="unexpected Thing payload"):
            await service._make_request("/things/7", None, service.auth, Thing)

    @pytest.mark.asyncio
    async def test_make_request_connection_error(self, options, mock_http):
        mock_http(get_error=aiohttp.ClientConnectionError("connection refused"))
        service = DiscogsService(options)

        with pytest.raises(TransportError, match="connection refused") as exc_info:
            await service._make_request("/things/7", None, service.auth, Thing)

        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_make_request_timeout(self, options, mock_http):
        mock_http(get_error=TimeoutError())
        service = DiscogsService(options)

        with pytest.raises(TransportError, match="TimeoutError"):
            await service._make_request("/things/7", None, service.auth, Thing)

    @pytest.mark.asyncio
    async def test_fetch_cancellation_propagates(self, options, mock_http, spans):
        session = mock_http(data={"id": 7})
        started = asyncio.Event()
        never = asyncio.Event()

        async def slow_response(*args):
            started.set()
            await never.wait()
            return session.response

        session.get.return_value.__aenter__.side_effect = slow_response
        service = DiscogsService(options)

        task = asyncio.create_task(service._fetch("Thing", "fetch thing", "/things/7", Thing))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        session_exit = session.session_class.return_value.__aexit__
        session_exit.assert_awaited_once()
        assert session_exit.await_args.args[0] is asyncio.CancelledError
        session.response.json.assert_not_called()
        (span,) = spans.get_finished_spans()
        assert "error" not in span.attributes

    @pytest.mark.asyncio
    async def test_make_request_without_auth_does_not_touch_network(self, options, mock_http):
        session = mock_http(data={"id": 7})
        service = DiscogsService(options)

        with pytest.raises(UnauthorizedError, match="no OAuth credentials attached") as exc_info:
            await service._make_request("/things/7", None, None, Thing)

        assert exc_info.value.status is None
        session.session_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_fetch_wraps_errors_with_action(self, options, mock_http):
        mock_http(status=503, reason="Service Unavailable")
        service = DiscogsService(options)

        with pytest.raises(UpstreamError) as exc_info:
            await service._fetch("Thing", "fetch thing", "/things/7", Thing)

        assert str(exc_info.value) == (
            "failed to fetch thing: unknown error: 503 Service Unavailable"
        )
        assert exc_info.value.status == 503
        assert isinstance(exc_info.value.__cause__, UpstreamError)
        assert str(exc_info.value.__cause__) == "unknown error: 503 Service Unavailable"

    @pytest.mark.asyncio
    async def test_fetch_null_fields_use_defaults(self, options, mock_http):
        mock_http(data={"id": 1, "title": None, "notes": None, "lowest_price": None})
        service = DiscogsService(options)

        release = await service._fetch("Release", "fetch release", "/releases/1", Release)

        assert release.title == ""
        assert release.notes == ""
        assert release.lowest_price == 0.0
