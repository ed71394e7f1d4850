"""Executor behaviour against mocked HTTP exchanges."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from spotiquery.adapters.spotify.errors import (
    BadRequestError,
    NotFoundError,
    ResponseParseError,
    ServiceUnavailableError,
    SpotifyApiError,
    SpotifyTransportError,
    TooManyRequestsError,
    UnauthorizedError,
)
from spotiquery.adapters.spotify.schema import Artist
from tests.helpers.spotify import ACCESS_TOKEN, RecordingHandler

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from spotiquery.api import SpotifyApi


def test_execute_returns_paging_matching_payload(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
    fixture_handler: Callable[[str], RecordingHandler],
) -> None:
    handler = fixture_handler("search_artists.json")
    api = api_for(handler)

    page = api.search_artists("abba").market("SE").limit(2).build().execute()

    assert len(page.items) == 2
    assert page.total == 812
    assert page.limit == 2
    assert page.offset == 0
    assert all(isinstance(item, Artist) for item in page.items)

    sent = handler.last
    assert sent.method == "GET"
    assert sent.url.path == "/v1/search"
    assert sent.url.host == "api.spotify.com"
    assert dict(sent.url.params) == {"q": "abba", "market": "SE", "limit": "2", "type": "artist"}
    assert sent.headers["Authorization"] == f"Bearer {ACCESS_TOKEN}"
    assert sent.headers["Accept"] == "application/json"


def test_execute_async_runs_concurrently(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
    fixture_handler: Callable[[str], RecordingHandler],
) -> None:
    handler = fixture_handler("search_albums.json")
    api = api_for(handler)
    requests = [api.search_albums(f"arrival {index}").build() for index in range(3)]

    async def run_all() -> list[int | None]:
        pages = await asyncio.gather(*(request.execute_async() for request in requests))
        return [page.total for page in pages]

    assert asyncio.run(run_all()) == [1, 1, 1]
    assert sorted(request.url.params["q"] for request in handler.requests) == [
        "arrival 0",
        "arrival 1",
        "arrival 2",
    ]


@pytest.mark.parametrize(
    ("status", "error_type"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (404, NotFoundError),
        (503, ServiceUnavailableError),
        (418, SpotifyApiError),
    ],
)
def test_error_payload_raises_api_error(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
    status: int,
    error_type: type[SpotifyApiError],
) -> None:
    handler = RecordingHandler(
        httpx.Response(status, json={"error": {"status": status, "message": "upstream says no"}})
    )
    request = api_for(handler).search_artists("abba").build()

    with pytest.raises(error_type) as excinfo:
        request.execute()

    error = excinfo.value
    assert type(error) is error_type
    assert error.status == status
    assert error.message == "upstream says no"
    assert isinstance(error.__cause__, httpx.HTTPStatusError)


def test_rate_limit_error_carries_retry_after(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
) -> None:
    handler = RecordingHandler(
        httpx.Response(
            429,
            headers={"Retry-After": "7"},
            json={"error": {"status": 429, "message": "API rate limit exceeded"}},
        )
    )

    with pytest.raises(TooManyRequestsError) as excinfo:
        api_for(handler).get_artist("0LcJLqbBmaGUft1e9Mm8HV").build().execute()

    assert excinfo.value.retry_after == 7
    assert len(handler.requests) == 1


def test_authentication_error_shape(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
) -> None:
    handler = RecordingHandler(
        httpx.Response(
            400, json={"error": "invalid_client", "error_description": "Invalid client"}
        )
    )

    with pytest.raises(BadRequestError, match="Invalid client"):
        api_for(handler).search_artists("abba").build().execute()


def test_error_without_json_body_uses_reason_phrase(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
) -> None:
    handler = RecordingHandler(httpx.Response(502, text="<html>Bad Gateway</html>"))

    with pytest.raises(SpotifyApiError) as excinfo:
        api_for(handler).search_artists("abba").build().execute()

    assert excinfo.value.status == 502
    assert excinfo.value.message == "Bad Gateway"


def test_error_object_in_success_response(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
) -> None:
    handler = RecordingHandler(
        httpx.Response(200, json={"error": {"status": 404, "message": "non existing id"}})
    )

    with pytest.raises(NotFoundError, match="non existing id"):
        api_for(handler).get_artist("missing").build().execute()


def test_non_json_body_raises_parse_error(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
) -> None:
    handler = RecordingHandler(
        httpx.Response(200, text="<html>oops</html>", headers={"Content-Type": "text/html"})
    )

    with pytest.raises(ResponseParseError, match="not valid JSON"):
        api_for(handler).search_artists("abba").build().execute()


def test_empty_body_raises_parse_error(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
) -> None:
    handler = RecordingHandler(httpx.Response(200))

    with pytest.raises(ResponseParseError, match="Empty"):
        api_for(handler).get_artist("x").build().execute()


def test_wrong_shape_raises_parse_error(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
) -> None:
    handler = RecordingHandler(httpx.Response(200, json={"tracks": {"items": []}}))

    with pytest.raises(ResponseParseError, match="'artists'"):
        api_for(handler).search_artists("abba").build().execute()


@pytest.mark.parametrize(
    "exception",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
    ],
)
def test_transport_failure_raises_transport_error(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
    exception: httpx.TransportError,
) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise exception

    with pytest.raises(SpotifyTransportError) as excinfo:
        api_for(handler).search_artists("abba").build().execute()

    assert excinfo.value.__cause__ is exception
    assert len(calls) == 1


def test_transport_and_api_errors_are_distinct() -> None:
    assert not issubclass(SpotifyTransportError, SpotifyApiError)
    assert not issubclass(SpotifyApiError, SpotifyTransportError)
    assert not issubclass(ResponseParseError, SpotifyApiError)


class _RawStream(httpx.AsyncByteStream):
    def __init__(self, data: bytes) -> None:
        self._data = data

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield self._data


def test_undecodable_body_raises_transport_error(
    api_for: Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi],
) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"Content-Encoding": "gzip", "Content-Type": "application/json"},
            stream=_RawStream(b"not gzip"),
        )

    with pytest.raises(SpotifyTransportError) as excinfo:
        api_for(handler).search_artists("abba").build().execute()

    assert isinstance(excinfo.value.__cause__, httpx.DecodingError)
