"""Tests for asynchronous GeoJSON fetching.

HTTP is faked with ``httpx.MockTransport`` so no network is touched.
"""

from __future__ import annotations

import httpx
import pytest

from geojson_scene.core.exceptions import FetchError
from geojson_scene.core.fetch import fetch_json

URL = "https://data.example.com/parcels.geojson"


def _transport(handler: object) -> httpx.MockTransport:
    return httpx.MockTransport(handler)  # type: ignore[arg-type]


class TestFetchJson:
    @pytest.mark.asyncio()
    async def test_returns_parsed_body(self) -> None:
        body = {"type": "Point", "coordinates": [1.0, 2.0]}
        transport = _transport(lambda request: httpx.Response(200, json=body))
        assert await fetch_json(URL, transport=transport) == body

    @pytest.mark.asyncio()
    async def test_sends_accept_and_custom_headers(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        await fetch_json(URL, headers={"User-Agent": "viewer/1.0"}, transport=_transport(handler))
        assert "application/geo+json" in seen[0].headers["Accept"]
        assert seen[0].headers["User-Agent"] == "viewer/1.0"

    @pytest.mark.asyncio()
    async def test_server_error_is_retryable(self) -> None:
        transport = _transport(lambda request: httpx.Response(503))
        with pytest.raises(FetchError) as exc_info:
            await fetch_json(URL, transport=transport)
        assert exc_info.value.status_code == 503
        assert exc_info.value.retryable is True
        assert exc_info.value.url == URL

    @pytest.mark.asyncio()
    async def test_not_found_is_not_retryable(self) -> None:
        transport = _transport(lambda request: httpx.Response(404))
        with pytest.raises(FetchError) as exc_info:
            await fetch_json(URL, transport=transport)
        assert exc_info.value.status_code == 404
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio()
    async def test_invalid_json(self) -> None:
        transport = _transport(lambda request: httpx.Response(200, text="<html>nope</html>"))
        with pytest.raises(FetchError, match="not valid JSON"):
            await fetch_json(URL, transport=transport)

    @pytest.mark.asyncio()
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError, match="connection refused") as exc_info:
            await fetch_json(URL, transport=_transport(handler))
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio()
    async def test_malformed_url_is_not_retryable(self) -> None:
        requested: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request)
            return httpx.Response(200, json={})

        with pytest.raises(FetchError, match="Invalid URL") as exc_info:
            await fetch_json("http://[::1/x", transport=_transport(handler))
        assert exc_info.value.retryable is False
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
        assert requested == []
