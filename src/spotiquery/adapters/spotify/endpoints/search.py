"""Catalog search: ``GET /v1/search`` restricted to one item type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from spotiquery.adapters.spotify.errors import RequestValidationError
from spotiquery.adapters.spotify.parsers import paging_parser
from spotiquery.adapters.spotify.request import Endpoint, RequestBuilder
from spotiquery.adapters.spotify.schema import (
    AlbumSimplified,
    Artist,
    Paging,
    PlaylistSimplified,
    SearchType,
    Track,
)
from spotiquery.adapters.spotify.validation import (
    SEARCH_PAGING,
    require_limit,
    require_market,
    require_offset,
    require_text,
)

if TYPE_CHECKING:
    from pydantic import BaseModel

    from spotiquery.adapters.spotify.client import SpotifyClient
    from spotiquery.adapters.spotify.markets import Market

SEARCH_PATH = "/v1/search"
INCLUDE_EXTERNAL_AUDIO = "audio"


def _search_endpoint[M: BaseModel](
    search_type: SearchType,
    model: type[M],
) -> Endpoint[Paging[M]]:
    return Endpoint(
        name=f"search_{search_type.value}s",
        method="GET",
        path=SEARCH_PATH,
        parse=paging_parser(model, key=f"{search_type.value}s"),
        fixed_params=(("type", search_type),),
        required=("q",),
    )


SEARCH_ARTISTS = _search_endpoint(SearchType.ARTIST, Artist)
SEARCH_ALBUMS = _search_endpoint(SearchType.ALBUM, AlbumSimplified)
SEARCH_TRACKS = _search_endpoint(SearchType.TRACK, Track)
SEARCH_PLAYLISTS = _search_endpoint(SearchType.PLAYLIST, PlaylistSimplified)


class SearchBuilder[M](RequestBuilder[Paging[M]]):
    """Builder shared by the single-type search endpoints."""

    def q(self, q: str) -> Self:
        """Required. Keywords plus optional field filters (``artist:``, ``year:``...)."""
        return self._set_query("q", require_text("q", q))

    def market(self, market: Market | str) -> Self:
        """Only return content playable in this market."""
        return self._set_query("market", require_market("market", market))

    def limit(self, limit: int) -> Self:
        """Maximum number of results. Default 20, range 1-50."""
        return self._set_query("limit", require_limit(limit, SEARCH_PAGING))

    def offset(self, offset: int) -> Self:
        """Index of the first result. Default 0, maximum 100000."""
        return self._set_query("offset", require_offset(offset, SEARCH_PAGING))

    def include_external(self, value: str = INCLUDE_EXTERNAL_AUDIO) -> Self:
        """Mark externally hosted audio content as playable in the response."""
        value = require_text("include_external", value).strip().lower()
        if value != INCLUDE_EXTERNAL_AUDIO:
            raise RequestValidationError(
                f"include_external only accepts {INCLUDE_EXTERNAL_AUDIO!r}, got {value!r}",
                parameter="include_external",
            )
        return self._set_query("include_external", value)
