"""Endpoint definitions and their builders."""

from __future__ import annotations

from .albums import (
    GET_ALBUM,
    GET_ALBUMS_TRACKS,
    GET_SEVERAL_ALBUMS,
    GetAlbumBuilder,
    GetAlbumsTracksBuilder,
    GetSeveralAlbumsBuilder,
)
from .artists import (
    GET_ARTIST,
    GET_ARTISTS_ALBUMS,
    GET_ARTISTS_TOP_TRACKS,
    GET_SEVERAL_ARTISTS,
    GetArtistBuilder,
    GetArtistsAlbumsBuilder,
    GetArtistsTopTracksBuilder,
    GetSeveralArtistsBuilder,
)
from .search import (
    SEARCH_ALBUMS,
    SEARCH_ARTISTS,
    SEARCH_PLAYLISTS,
    SEARCH_TRACKS,
    SearchBuilder,
)

__all__ = [
    "GET_ALBUM",
    "GET_ALBUMS_TRACKS",
    "GET_ARTIST",
    "GET_ARTISTS_ALBUMS",
    "GET_ARTISTS_TOP_TRACKS",
    "GET_SEVERAL_ALBUMS",
    "GET_SEVERAL_ARTISTS",
    "SEARCH_ALBUMS",
    "SEARCH_ARTISTS",
    "SEARCH_PLAYLISTS",
    "SEARCH_TRACKS",
    "GetAlbumBuilder",
    "GetAlbumsTracksBuilder",
    "GetArtistBuilder",
    "GetArtistsAlbumsBuilder",
    "GetArtistsTopTracksBuilder",
    "GetSeveralAlbumsBuilder",
    "GetSeveralArtistsBuilder",
    "SearchBuilder",
]
