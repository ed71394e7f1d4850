"""Spotify Web API request layer."""

from __future__ import annotations

from .client import SpotifyClient, read_payload
from .descriptor import RequestDescriptor
from .endpoints import (
    GetAlbumBuilder,
    GetAlbumsTracksBuilder,
    GetArtistBuilder,
    GetArtistsAlbumsBuilder,
    GetArtistsTopTracksBuilder,
    GetSeveralAlbumsBuilder,
    GetSeveralArtistsBuilder,
    SearchBuilder,
)
from .errors import (
    BadGatewayError,
    BadRequestError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    RequestValidationError,
    ResponseParseError,
    ServiceUnavailableError,
    SpotifyApiError,
    SpotifyError,
    SpotifyTransportError,
    TooManyRequestsError,
    UnauthorizedError,
)
from .markets import Market
from .request import Endpoint, RequestBuilder, SpotifyRequest
from .schema import (
    Album,
    AlbumSimplified,
    Artist,
    ArtistSimplified,
    Paging,
    PlaylistSimplified,
    Track,
    TrackSimplified,
)

__all__ = [
    "Album",
    "AlbumSimplified",
    "Artist",
    "ArtistSimplified",
    "BadGatewayError",
    "BadRequestError",
    "Endpoint",
    "ForbiddenError",
    "GetAlbumBuilder",
    "GetAlbumsTracksBuilder",
    "GetArtistBuilder",
    "GetArtistsAlbumsBuilder",
    "GetArtistsTopTracksBuilder",
    "GetSeveralAlbumsBuilder",
    "GetSeveralArtistsBuilder",
    "InternalServerError",
    "Market",
    "NotFoundError",
    "Paging",
    "PlaylistSimplified",
    "RequestBuilder",
    "RequestDescriptor",
    "RequestValidationError",
    "ResponseParseError",
    "SearchBuilder",
    "ServiceUnavailableError",
    "SpotifyApiError",
    "SpotifyClient",
    "SpotifyError",
    "SpotifyRequest",
    "SpotifyTransportError",
    "TooManyRequestsError",
    "Track",
    "TrackSimplified",
    "UnauthorizedError",
    "read_payload",
]
