# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import BaseModel

from spotiquery.adapters.spotify.errors import SpotifyError
from spotiquery.adapters.spotify.schema import (
    AlbumSimplified,
    Artist,
    ArtistSimplified,
    Paging,
    PlaylistSimplified,
    TrackSimplified,
)
from spotiquery.api import SpotifyApi
from spotiquery.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from spotiquery.adapters.spotify.endpoints import (
        GetAlbumsTracksBuilder,
        GetArtistsAlbumsBuilder,
        SearchBuilder,
    )
    from spotiquery.adapters.spotify.request import SpotifyRequest

    type PagedBuilder = SearchBuilder[Any] | GetArtistsAlbumsBuilder | GetAlbumsTracksBuilder

log = logging.getLogger(__name__)

SEARCH_TYPES = ("artist", "album", "track", "playlist")


def _add_paging_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", type=int, help="Maximum number of results (1-50)")
    parser.add_argument("--offset", type=int, help="Index of the first result")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the Spotify Web API catalog")
    parser.add_argument("--debug", action="store_true", help="Log outgoing requests")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search the catalog")
    search.add_argument("type", choices=SEARCH_TYPES, help="Item type to search for")
    search.add_argument("query", help="Search keywords and field filters")
    search.add_argument("--market", type=str, help="ISO 3166-1 alpha-2 country code")
    _add_paging_args(search)

    artist = subparsers.add_parser("artist", help="Show one artist")
    artist.add_argument("id", help="Spotify artist id")

    artist_albums = subparsers.add_parser("artist-albums", help="List an artist's albums")
    artist_albums.add_argument("id", help="Spotify artist id")
    artist_albums.add_argument(
        "--include-groups",
        nargs="+",
        help="Album groups to include (album, single, compilation, appears_on)",
    )
    artist_albums.add_argument("--market", type=str, help="ISO 3166-1 alpha-2 country code")
    _add_paging_args(artist_albums)

    top_tracks = subparsers.add_parser("top-tracks", help="List an artist's top tracks")
    top_tracks.add_argument("id", help="Spotify artist id")
    top_tracks.add_argument(
        "--market", type=str, required=True, help="ISO 3166-1 alpha-2 country code"
    )

    album_tracks = subparsers.add_parser("album-tracks", help="List the tracks of an album")
    album_tracks.add_argument("id", help="Spotify album id")
    album_tracks.add_argument("--market", type=str, help="ISO 3166-1 alpha-2 country code")
    _add_paging_args(album_tracks)

    return parser.parse_args(list(argv))


def _create_api() -> SpotifyApi:
    return SpotifyApi.from_environment()


def _apply_paging(builder: PagedBuilder, args: argparse.Namespace) -> SpotifyRequest[Any]:
    if args.market is not None:
        builder.market(args.market)
    if args.limit is not None:
        builder.limit(args.limit)
    if args.offset is not None:
        builder.offset(args.offset)
    return builder.build()


def _build_request(api: SpotifyApi, args: argparse.Namespace) -> SpotifyRequest[Any]:
    if args.command == "search":
        search = {
            "artist": api.search_artists,
            "album": api.search_albums,
            "track": api.search_tracks,
            "playlist": api.search_playlists,
        }[args.type]
        return _apply_paging(search(args.query), args)
    if args.command == "artist":
        return api.get_artist(args.id).build()
    if args.command == "artist-albums":
        albums = api.get_artists_albums(args.id)
        if args.include_groups:
            albums.include_groups(*args.include_groups)
        return _apply_paging(albums, args)
    if args.command == "top-tracks":
        return api.get_artists_top_tracks(args.id, args.market).build()
    if args.command == "album-tracks":
        return _apply_paging(api.get_albums_tracks(args.id), args)
    raise ValueError(f"Unsupported command: {args.command}")


def _artist_names(artists: Sequence[ArtistSimplified]) -> str:
    return ", ".join(artist.name for artist in artists)


def format_item(item: BaseModel) -> str:
    """Render one result item as a single tab-separated line."""

    if isinstance(item, Artist):
        genres = ", ".join(item.genres)
        return f"{item.id}\t{item.name}\t{genres}"
    if isinstance(item, ArtistSimplified):
        return f"{item.id}\t{item.name}"
    if isinstance(item, AlbumSimplified):
        return f"{item.id}\t{_artist_names(item.artists)} - {item.name}\t{item.release_date or ''}"
    if isinstance(item, TrackSimplified):
        return f"{item.id}\t{_artist_names(item.artists)} - {item.name}"
    if isinstance(item, PlaylistSimplified):
        owner = item.owner.display_name if item.owner else None
        return f"{item.id}\t{item.name}\t{owner or ''}"
    return str(item)


def _print_result(result: object) -> None:
    if isinstance(result, Paging):
        for item in result.items:
            print(format_item(item))
        if result.total is not None:
            first = (result.offset or 0) + 1 if result.items else 0
            last = (result.offset or 0) + len(result.items)
            log.info("Showing %s-%s of %s", first, last, result.total)
        if result.has_next:
            next_offset = (result.offset or 0) + (result.limit or len(result.items))
            log.info("More results available, rerun with --offset %s", next_offset)
        return
    if isinstance(result, list):
        for item in result:
            if item is not None:
                print(format_item(item))
        return
    if isinstance(result, BaseModel):
        print(format_item(result))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.debug else logging.INFO)

    try:
        request = _build_request(_create_api(), parsed_args)
    except ConfigurationError as exc:
        log.error("Check %s in the environment or .env file: %s", ", ".join(exc.names), exc)
        sys.exit(2)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        result = request.execute()
    except SpotifyError:
        log.exception("Spotify request failed")
        sys.exit(1)

    _print_result(result)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
