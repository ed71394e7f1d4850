"""Album catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from spotiquery.adapters.spotify.parsers import (
    model_parser,
    paging_parser,
    sparse_list_parser,
)
from spotiquery.adapters.spotify.request import Endpoint, RequestBuilder
from spotiquery.adapters.spotify.schema import Album, Paging, TrackSimplified
from spotiquery.adapters.spotify.validation import (
    CATALOG_PAGING,
    require_ids,
    require_limit,
    require_market,
    require_offset,
    require_text,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spotiquery.adapters.spotify.client import SpotifyClient
    from spotiquery.adapters.spotify.markets import Market

MAX_SEVERAL_ALBUMS = 20

GET_ALBUM = Endpoint(
    name="get_album",
    method="GET",
    path="/v1/albums/{id}",
    parse=model_parser(Album),
)
GET_SEVERAL_ALBUMS = Endpoint(
    name="get_several_albums",
    method="GET",
    path="/v1/albums",
    parse=sparse_list_parser(Album, key="albums"),
    required=("ids",),
)
GET_ALBUMS_TRACKS = Endpoint(
    name="get_albums_tracks",
    method="GET",
    path="/v1/albums/{id}/tracks",
    parse=paging_parser(TrackSimplified),
)


class GetAlbumBuilder(RequestBuilder[Album]):
    def __init__(
        self, client: SpotifyClient, album_id: str, *, access_token: str | None = None
    ) -> None:
        super().__init__(client, GET_ALBUM, access_token=access_token)
        self._set_path("id", require_text("id", album_id))

    def market(self, market: Market | str) -> Self:
        return self._set_query("market", require_market("market", market))


class GetSeveralAlbumsBuilder(RequestBuilder[list[Album | None]]):
    """Fetch up to 20 albums at once; unknown ids come back as ``None``."""

    def __init__(
        self,
        client: SpotifyClient,
        album_ids: Iterable[str],
        *,
        access_token: str | None = None,
    ) -> None:
        super().__init__(client, GET_SEVERAL_ALBUMS, access_token=access_token)
        self._set_query("ids", require_ids("ids", album_ids, maximum=MAX_SEVERAL_ALBUMS))

    def market(self, market: Market | str) -> Self:
        return self._set_query("market", require_market("market", market))


class GetAlbumsTracksBuilder(RequestBuilder[Paging[TrackSimplified]]):
    def __init__(
        self, client: SpotifyClient, album_id: str, *, access_token: str | None = None
    ) -> None:
        super().__init__(client, GET_ALBUMS_TRACKS, access_token=access_token)
        self._set_path("id", require_text("id", album_id))

    def market(self, market: Market | str) -> Self:
        return self._set_query("market", require_market("market", market))

    def limit(self, limit: int) -> Self:
        """Maximum number of tracks. Default 20, range 1-50."""
        return self._set_query("limit", require_limit(limit, CATALOG_PAGING))

    def offset(self, offset: int) -> Self:
        return self._set_query("offset", require_offset(offset, CATALOG_PAGING))
