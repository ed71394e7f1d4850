"""Spotify Web API configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, optional_float_env_var, require_env_vars
from .http import HttpConfig

SPOTIFY_API_BASE_URL = "https://api.spotify.com"
SPOTIFY_TIMEOUT_SECONDS = 10.0


def default_http_config(
    *,
    base_url: str | None = None,
    timeout_seconds: float | None = None,
) -> HttpConfig:
    return HttpConfig(
        name="spotify",
        base_url=base_url or SPOTIFY_API_BASE_URL,
        timeout_seconds=timeout_seconds or SPOTIFY_TIMEOUT_SECONDS,
        default_headers={"Accept": "application/json"},
    )


@dataclass(frozen=True)
class SpotifyConfig:
    """Holds the bearer token and transport settings for Web API calls."""

    access_token: str = field(repr=False)
    http: HttpConfig = field(default_factory=default_http_config)


def get_spotify_config(*, http: HttpConfig | None = None) -> SpotifyConfig:
    values = require_env_vars(("SPOTIFY_ACCESS_TOKEN",))
    return SpotifyConfig(
        access_token=values["SPOTIFY_ACCESS_TOKEN"],
        http=http
        or default_http_config(
            base_url=optional_env_var("SPOTIFY_API_BASE_URL"),
            timeout_seconds=optional_float_env_var("SPOTIFY_TIMEOUT_SECONDS"),
        ),
    )
