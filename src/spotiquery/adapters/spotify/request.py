"""Request builders and the built, executable request."""

from __future__ import annotations

from dataclasses import dataclass, field
from string import Formatter
from typing import TYPE_CHECKING, Self
from urllib.parse import quote

from .descriptor import RequestDescriptor
from .errors import RequestValidationError
from .validation import require_text

if TYPE_CHECKING:
    from collections.abc import Callable

    from .client import SpotifyClient
    from .descriptor import QueryValue


@dataclass(frozen=True)
class Endpoint[T]:
    """Static description of one remote operation.

    ``path`` may contain ``{name}`` placeholders filled from path parameters;
    ``fixed_params`` are appended to every request (e.g. the search ``type``).
    """

    name: str
    method: str
    path: str
    parse: Callable[[object], T] = field(repr=False)
    fixed_params: tuple[tuple[str, QueryValue], ...] = ()
    required: tuple[str, ...] = ()

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in Formatter().parse(self.path) if name is not None
        )


@dataclass(frozen=True)
class SpotifyRequest[T]:
    """A built request, bound to the client that will send it."""

    descriptor: RequestDescriptor
    endpoint: Endpoint[T]
    client: SpotifyClient = field(repr=False, compare=False)

    def execute(self) -> T:
        """Send the request and block until the typed result is available."""
        return self.client.execute(self)

    async def execute_async(self) -> T:
        return await self.client.execute_async(self)


class RequestBuilder[T]:
    """Accumulates parameters for one endpoint and builds a :class:`SpotifyRequest`.

    Setters validate their value immediately and return the builder, so calls
    chain: ``builder.q("abba").limit(10).build()``.
    """

    def __init__(
        self,
        client: SpotifyClient,
        endpoint: Endpoint[T],
        *,
        access_token: str | None = None,
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._access_token = access_token
        self._query: dict[str, QueryValue] = {}
        self._path_params: dict[str, str] = {}

    @property
    def endpoint(self) -> Endpoint[T]:
        return self._endpoint

    def access_token(self, token: str) -> Self:
        """Override the bearer token configured on the client for this request."""
        self._access_token = require_text("access_token", token)
        return self

    def _set_query(self, name: str, value: QueryValue) -> Self:
        if any(fixed == name for fixed, _ in self._endpoint.fixed_params):
            raise RequestValidationError(
                f"{name} is fixed for {self._endpoint.name} and cannot be set", parameter=name
            )
        self._query[name] = value
        return self

    def _set_path(self, name: str, value: str) -> Self:
        if name not in self._endpoint.path_params:
            raise RequestValidationError(
                f"{self._endpoint.name} has no path parameter {name!r}", parameter=name
            )
        self._path_params[name] = value
        return self

    def build(self) -> SpotifyRequest[T]:
        endpoint = self._endpoint
        missing = [name for name in endpoint.required if name not in self._query]
        missing += [name for name in endpoint.path_params if name not in self._path_params]
        if missing:
            raise RequestValidationError(
                f"{endpoint.name} is missing required parameter(s): {', '.join(missing)}",
                parameter=missing[0],
            )

        token = require_text(
            "access_token", self._access_token or self._client.config.access_token
        )
        path = endpoint.path.format(
            **{name: quote(value, safe="") for name, value in self._path_params.items()}
        )
        descriptor = RequestDescriptor(
            method=endpoint.method,
            path=path,
            query=(*self._query.items(), *endpoint.fixed_params),
            headers=(("Authorization", f"Bearer {token}"),),
        )
        return SpotifyRequest(descriptor=descriptor, endpoint=endpoint, client=self._client)
