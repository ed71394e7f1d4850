"""Pydantic models for the Spotify Web API object model."""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

ItemT = TypeVar("ItemT")


def _lower(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower() or None
    return value


class ObjectType(StrEnum):
    ALBUM = "album"
    ARTIST = "artist"
    AUDIO_FEATURES = "audio_features"
    EPISODE = "episode"
    GENRE = "genre"
    PLAYLIST = "playlist"
    SHOW = "show"
    TRACK = "track"
    USER = "user"


class AlbumType(StrEnum):
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"


class AlbumGroup(StrEnum):
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"
    APPEARS_ON = "appears_on"


class ReleaseDatePrecision(StrEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"


class SearchType(StrEnum):
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    TRACK = "track"
    SHOW = "show"
    EPISODE = "episode"
    AUDIOBOOK = "audiobook"


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Image(SpotifyBaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class Followers(SpotifyBaseModel):
    href: str | None = None
    total: int | None = None


class Restrictions(SpotifyBaseModel):
    reason: str | None = None


class Copyright(SpotifyBaseModel):
    text: str
    type: str | None = None


class Paging(SpotifyBaseModel, Generic[ItemT]):
    """One page of a larger collection.

    ``null`` entries, which the API emits for items removed since indexing, are
    dropped from ``items``; ``total`` is kept as reported upstream.
    """

    href: str | None = None
    items: list[ItemT] = Field(default_factory=list)
    limit: int | None = None
    next: str | None = None
    offset: int | None = None
    previous: str | None = None
    total: int | None = None

    @field_validator("items", mode="before")
    @classmethod
    def _drop_null_items(cls, value: object) -> object:
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    @property
    def has_next(self) -> bool:
        return self.next is not None


class ArtistSimplified(SpotifyBaseModel):
    id: str | None = None
    name: str
    href: str | None = None
    uri: str | None = None
    type: ObjectType = ObjectType.ARTIST
    external_urls: dict[str, str] = Field(default_factory=dict)


class Artist(ArtistSimplified):
    followers: Followers | None = None
    genres: list[str] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list["Image"])
    popularity: int | None = None


class LinkedTrack(SpotifyBaseModel):
    id: str | None = None
    href: str | None = None
    uri: str | None = None
    type: ObjectType = ObjectType.TRACK
    external_urls: dict[str, str] = Field(default_factory=dict)


class TrackSimplified(SpotifyBaseModel):
    id: str | None = None
    name: str
    artists: list[ArtistSimplified] = Field(default_factory=list["ArtistSimplified"])
    available_markets: list[str] = Field(default_factory=list)
    disc_number: int | None = None
    duration_ms: int | None = None
    explicit: bool | None = None
    href: str | None = None
    is_local: bool = False
    is_playable: bool | None = None
    linked_from: LinkedTrack | None = None
    preview_url: str | None = None
    restrictions: Restrictions | None = None
    track_number: int | None = None
    type: ObjectType = ObjectType.TRACK
    uri: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class AlbumSimplified(SpotifyBaseModel):
    id: str | None = None
    name: str
    album_type: AlbumType | None = None
    album_group: AlbumGroup | None = None
    artists: list[ArtistSimplified] = Field(default_factory=list["ArtistSimplified"])
    available_markets: list[str] = Field(default_factory=list)
    href: str | None = None
    images: list[Image] = Field(default_factory=list["Image"])
    release_date: str | None = None
    release_date_precision: ReleaseDatePrecision | None = None
    restrictions: Restrictions | None = None
    total_tracks: int | None = None
    type: ObjectType = ObjectType.ALBUM
    uri: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)

    _normalize_album_type = field_validator("album_type", "album_group", mode="before")(_lower)


class Album(AlbumSimplified):
    copyrights: list[Copyright] = Field(default_factory=list["Copyright"])
    external_ids: dict[str, str] = Field(default_factory=dict)
    genres: list[str] = Field(default_factory=list)
    label: str | None = None
    popularity: int | None = None
    tracks: Paging[TrackSimplified] | None = None


class Track(TrackSimplified):
    album: AlbumSimplified | None = None
    external_ids: dict[str, str] = Field(default_factory=dict)
    popularity: int | None = None


class PlaylistOwner(SpotifyBaseModel):
    id: str | None = None
    display_name: str | None = None
    href: str | None = None
    uri: str | None = None
    type: ObjectType = ObjectType.USER
    external_urls: dict[str, str] = Field(default_factory=dict)


class PlaylistTracksInformation(SpotifyBaseModel):
    href: str | None = None
    total: int | None = None


class PlaylistSimplified(SpotifyBaseModel):
    id: str | None = None
    name: str
    collaborative: bool = False
    description: str | None = None
    href: str | None = None
    images: list[Image] = Field(default_factory=list["Image"])
    owner: PlaylistOwner | None = None
    public: bool | None = None
    snapshot_id: str | None = None
    tracks: PlaylistTracksInformation | None = None
    type: ObjectType = ObjectType.PLAYLIST
    uri: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)

    @field_validator("images", mode="before")
    @classmethod
    def _null_images(cls, value: object) -> object:
        return [] if value is None else value


class ErrorDetail(SpotifyBaseModel):
    status: int
    message: str = ""


class ErrorResponse(SpotifyBaseModel):
    """Regular Web API error body: ``{"error": {"status": ..., "message": ...}}``."""

    error: ErrorDetail


class AuthenticationErrorResponse(SpotifyBaseModel):
    """Accounts-service style error body: ``{"error": ..., "error_description": ...}``."""

    error: str
    error_description: str | None = None
