"""Entry point bundling configuration, executor and endpoint builders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spotiquery.adapters.spotify.client import SpotifyClient
from spotiquery.adapters.spotify.endpoints import (
    SEARCH_ALBUMS,
    SEARCH_ARTISTS,
    SEARCH_PLAYLISTS,
    SEARCH_TRACKS,
    GetAlbumBuilder,
    GetAlbumsTracksBuilder,
    GetArtistBuilder,
    GetArtistsAlbumsBuilder,
    GetArtistsTopTracksBuilder,
    GetSeveralAlbumsBuilder,
    GetSeveralArtistsBuilder,
    SearchBuilder,
)
from spotiquery.config.spotify import get_spotify_config

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spotiquery.adapters.spotify.markets import Market
    from spotiquery.adapters.spotify.schema import (
        AlbumSimplified,
        Artist,
        PlaylistSimplified,
        Track,
    )
    from spotiquery.config.spotify import SpotifyConfig


class SpotifyApi:
    """Factory for endpoint builders sharing one configuration and executor.

    Each method returns a builder pre-filled with the endpoint's required
    arguments; optional parameters are chained before ``build()``::

        api = SpotifyApi.from_environment()
        page = api.search_artists("abba").market("SE").limit(5).build().execute()
    """

    def __init__(self, *, config: SpotifyConfig, client: SpotifyClient | None = None) -> None:
        self._config = config
        self._client = client or SpotifyClient(config=config)

    @classmethod
    def from_environment(cls) -> SpotifyApi:
        return cls(config=get_spotify_config())

    @property
    def config(self) -> SpotifyConfig:
        return self._config

    @property
    def client(self) -> SpotifyClient:
        return self._client

    def search_artists(self, q: str) -> SearchBuilder[Artist]:
        return SearchBuilder(self._client, SEARCH_ARTISTS).q(q)

    def search_albums(self, q: str) -> SearchBuilder[AlbumSimplified]:
        return SearchBuilder(self._client, SEARCH_ALBUMS).q(q)

    def search_tracks(self, q: str) -> SearchBuilder[Track]:
        return SearchBuilder(self._client, SEARCH_TRACKS).q(q)

    def search_playlists(self, q: str) -> SearchBuilder[PlaylistSimplified]:
        return SearchBuilder(self._client, SEARCH_PLAYLISTS).q(q)

    def get_artist(self, artist_id: str) -> GetArtistBuilder:
        return GetArtistBuilder(self._client, artist_id)

    def get_several_artists(self, artist_ids: Iterable[str]) -> GetSeveralArtistsBuilder:
        return GetSeveralArtistsBuilder(self._client, artist_ids)

    def get_artists_albums(self, artist_id: str) -> GetArtistsAlbumsBuilder:
        return GetArtistsAlbumsBuilder(self._client, artist_id)

    def get_artists_top_tracks(
        self, artist_id: str, market: Market | str
    ) -> GetArtistsTopTracksBuilder:
        return GetArtistsTopTracksBuilder(self._client, artist_id).market(market)

    def get_album(self, album_id: str) -> GetAlbumBuilder:
        return GetAlbumBuilder(self._client, album_id)

    def get_several_albums(self, album_ids: Iterable[str]) -> GetSeveralAlbumsBuilder:
        return GetSeveralAlbumsBuilder(self._client, album_ids)

    def get_albums_tracks(self, album_id: str) -> GetAlbumsTracksBuilder:
        return GetAlbumsTracksBuilder(self._client, album_id)
