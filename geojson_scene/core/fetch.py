"""Asynchronous GeoJSON fetching over HTTP.

Uses ``httpx`` for transport.  Every failure mode (connection error,
timeout, malformed URL, non-2xx status, undecodable body) is normalised to
``FetchError`` so that ``GeoJsonDataSource.load_url`` has a single error
type to redirect to its error event.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from geojson_scene.core.config import DEFAULT_FETCH_TIMEOUT_S, DEFAULT_USER_AGENT
from geojson_scene.core.exceptions import FetchError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("geojson_scene.core.fetch")

_ACCEPT = "application/geo+json, application/json;q=0.9, */*;q=0.1"


async def fetch_json(
    url: str,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT_S,
    follow_redirects: bool = True,
    headers: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Fetch *url* and return its body decoded as JSON.

    Args:
        url: Absolute URL of the GeoJSON document.
        timeout: Total request timeout in seconds.
        follow_redirects: Whether to follow HTTP redirects.
        headers: Extra request headers (merged over the defaults).
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``.

    Returns:
        The parsed JSON value.

    Raises:
        FetchError: On network failure, malformed URL, non-2xx status or
            invalid JSON.  Malformed URLs and 4xx responses are marked
            non-retryable.
    """
    request_headers = {"Accept": _ACCEPT, "User-Agent": DEFAULT_USER_AGENT}
    if headers:
        request_headers.update(headers)

    logger.debug("Fetching GeoJSON | url=%s | timeout=%.1fs", url, timeout)

    try:
        async with httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=follow_redirects,
            headers=request_headers,
            transport=transport,
        ) as client:
            response = await client.get(url)
    except httpx.InvalidURL as exc:
        # Not an HTTPError subclass; raised before any request is sent.
        msg = f"Invalid URL {url!r}: {exc}"
        raise FetchError(url, msg, retryable=False) from exc
    except httpx.HTTPError as exc:
        msg = f"Request for {url} failed: {exc}"
        raise FetchError(url, msg) from exc

    if response.is_error:
        retryable = response.status_code >= 500 or response.status_code == 429
        msg = f"GET {url} returned HTTP {response.status_code}"
        raise FetchError(url, msg, status_code=response.status_code, retryable=retryable)

    try:
        body = response.json()
    except ValueError as exc:
        msg = f"Response from {url} is not valid JSON: {exc}"
        raise FetchError(url, msg, status_code=response.status_code, retryable=False) from exc

    logger.debug(
        "Fetched GeoJSON | url=%s | status=%d | bytes=%d",
        url,
        response.status_code,
        len(response.content),
    )
    return body
