"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_float_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http import HttpConfig, ResponseHook
from .logging import configure_logging
from .spotify import (
    SPOTIFY_API_BASE_URL,
    SPOTIFY_TIMEOUT_SECONDS,
    SpotifyConfig,
    default_http_config,
    get_spotify_config,
)

__all__ = [
    "SPOTIFY_API_BASE_URL",
    "SPOTIFY_TIMEOUT_SECONDS",
    "ConfigurationError",
    "HttpConfig",
    "MissingConfigurationError",
    "ResponseHook",
    "SpotifyConfig",
    "configure_logging",
    "default_http_config",
    "get_spotify_config",
    "optional_env_var",
    "optional_float_env_var",
    "require_env_vars",
]
