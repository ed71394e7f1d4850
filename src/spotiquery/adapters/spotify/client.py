"""Executor sending built requests to the Spotify Web API."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, cast

import httpx
from pydantic import ValidationError

from spotiquery.adapters.http_client import ApiClient, RequestOptions

from .errors import (
    ResponseParseError,
    SpotifyApiError,
    SpotifyTransportError,
    api_error_for_status,
)
from .schema import AuthenticationErrorResponse, ErrorResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from spotiquery.config.http import HttpConfig
    from spotiquery.config.spotify import SpotifyConfig

    from .descriptor import RequestDescriptor
    from .request import SpotifyRequest

log = getLogger(__name__)


def _default_client_factory(config: HttpConfig) -> ApiClient:
    return ApiClient(config)


def _parse_retry_after(response: httpx.Response) -> int | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _error_detail(payload: object) -> tuple[int | None, str] | None:
    """Extract ``(status, message)`` from either error body shape the API uses."""

    if not isinstance(payload, Mapping) or "error" not in payload:
        return None
    mapping = cast(Mapping[str, object], payload)
    try:
        detail = ErrorResponse.model_validate(mapping).error
    except ValidationError:
        pass
    else:
        return detail.status, detail.message
    try:
        auth_error = AuthenticationErrorResponse.model_validate(mapping)
    except ValidationError:
        return None
    return None, auth_error.error_description or auth_error.error


def _error_from_response(response: httpx.Response) -> SpotifyApiError:
    status = response.status_code
    try:
        detail = _error_detail(response.json())
    except ValueError:
        detail = None
    message = detail[1] if detail and detail[1] else response.reason_phrase or f"HTTP {status}"
    return api_error_for_status(status, message, retry_after=_parse_retry_after(response))


def read_payload(response: httpx.Response) -> object:
    """Return the decoded JSON body or raise the matching request-layer error."""

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        error = _error_from_response(response)
        log.error(f"Spotify API error {error.status}: {error.message}")
        raise error from exc

    if not response.content:
        raise ResponseParseError(f"Empty response body (HTTP {response.status_code})")
    try:
        payload = response.json()
    except ValueError as exc:
        content_type = response.headers.get("Content-Type", "unknown")
        raise ResponseParseError(f"Response body is not valid JSON ({content_type})") from exc

    detail = _error_detail(payload)
    if detail is not None:
        status, message = detail
        error = api_error_for_status(status, message)
        log.error(f"Spotify API error {error.status}: {error.message}")
        raise error
    return payload


class SpotifyClient:
    """Sends one descriptor per call; never retries, pools or caches."""

    def __init__(
        self,
        *,
        config: SpotifyConfig,
        client_factory: Callable[[HttpConfig], ApiClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or _default_client_factory

    @property
    def config(self) -> SpotifyConfig:
        return self._config

    def execute[T](self, request: SpotifyRequest[T]) -> T:
        return asyncio.run(self.execute_async(request))

    async def execute_async[T](self, request: SpotifyRequest[T]) -> T:
        payload = await self.fetch_json(request.descriptor)
        return request.endpoint.parse(payload)

    async def fetch_json(self, descriptor: RequestDescriptor) -> object:
        log.debug("%s %s %s", descriptor.method, descriptor.path, descriptor.wire_params())
        options: RequestOptions = {
            "params": descriptor.wire_params(),
            "headers": descriptor.header_map,
        }
        if descriptor.body is not None:
            options["json"] = dict(descriptor.body)

        async with self._client_factory(self._config.http) as client:
            try:
                response = await client.request(descriptor.method, descriptor.path, **options)
            except httpx.RequestError as exc:
                message = f"{descriptor.method} {descriptor.path} failed: {exc!r}"
                log.warning(message)
                raise SpotifyTransportError(message) from exc

        return read_payload(response)
