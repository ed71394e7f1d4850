"""Artist catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from spotiquery.adapters.spotify.parsers import (
    list_parser,
    model_parser,
    paging_parser,
    sparse_list_parser,
)
from spotiquery.adapters.spotify.request import Endpoint, RequestBuilder
from spotiquery.adapters.spotify.schema import (
    AlbumGroup,
    AlbumSimplified,
    Artist,
    Paging,
    Track,
)
from spotiquery.adapters.spotify.validation import (
    CATALOG_PAGING,
    require_ids,
    require_limit,
    require_market,
    require_members,
    require_offset,
    require_text,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spotiquery.adapters.spotify.client import SpotifyClient
    from spotiquery.adapters.spotify.markets import Market

MAX_SEVERAL_ARTISTS = 50

GET_ARTIST = Endpoint(
    name="get_artist",
    method="GET",
    path="/v1/artists/{id}",
    parse=model_parser(Artist),
)
GET_SEVERAL_ARTISTS = Endpoint(
    name="get_several_artists",
    method="GET",
    path="/v1/artists",
    parse=sparse_list_parser(Artist, key="artists"),
    required=("ids",),
)
GET_ARTISTS_ALBUMS = Endpoint(
    name="get_artists_albums",
    method="GET",
    path="/v1/artists/{id}/albums",
    parse=paging_parser(AlbumSimplified),
)
GET_ARTISTS_TOP_TRACKS = Endpoint(
    name="get_artists_top_tracks",
    method="GET",
    path="/v1/artists/{id}/top-tracks",
    parse=list_parser(Track, key="tracks"),
    required=("market",),
)


class GetArtistBuilder(RequestBuilder[Artist]):
    def __init__(
        self, client: SpotifyClient, artist_id: str, *, access_token: str | None = None
    ) -> None:
        super().__init__(client, GET_ARTIST, access_token=access_token)
        self._set_path("id", require_text("id", artist_id))


class GetSeveralArtistsBuilder(RequestBuilder[list[Artist | None]]):
    """Fetch up to 50 artists at once; unknown ids come back as ``None``."""

    def __init__(
        self,
        client: SpotifyClient,
        artist_ids: Iterable[str],
        *,
        access_token: str | None = None,
    ) -> None:
        super().__init__(client, GET_SEVERAL_ARTISTS, access_token=access_token)
        self._set_query("ids", require_ids("ids", artist_ids, maximum=MAX_SEVERAL_ARTISTS))


class GetArtistsAlbumsBuilder(RequestBuilder[Paging[AlbumSimplified]]):
    def __init__(
        self, client: SpotifyClient, artist_id: str, *, access_token: str | None = None
    ) -> None:
        super().__init__(client, GET_ARTISTS_ALBUMS, access_token=access_token)
        self._set_path("id", require_text("id", artist_id))

    def include_groups(self, *groups: AlbumGroup | str) -> Self:
        """Restrict results to these album groups (``album``, ``single``...)."""
        return self._set_query(
            "include_groups", require_members("include_groups", groups, AlbumGroup)
        )

    def market(self, market: Market | str) -> Self:
        return self._set_query("market", require_market("market", market))

    def limit(self, limit: int) -> Self:
        return self._set_query("limit", require_limit(limit, CATALOG_PAGING))

    def offset(self, offset: int) -> Self:
        return self._set_query("offset", require_offset(offset, CATALOG_PAGING))


class GetArtistsTopTracksBuilder(RequestBuilder[list[Track]]):
    def __init__(
        self, client: SpotifyClient, artist_id: str, *, access_token: str | None = None
    ) -> None:
        super().__init__(client, GET_ARTISTS_TOP_TRACKS, access_token=access_token)
        self._set_path("id", require_text("id", artist_id))

    def market(self, market: Market | str) -> Self:
        """Required by this endpoint."""
        return self._set_query("market", require_market("market", market))
