from __future__ import annotations

from importlib import metadata

from spotiquery.api import SpotifyApi

try:
    __version__ = metadata.version("spotiquery")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = ["SpotifyApi", "__version__"]
