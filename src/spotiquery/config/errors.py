"""Errors raised while reading spotiquery settings from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A configuration value is present but unusable.

    ``names`` lists the environment variables at fault so the CLI can point
    the user at the right line of their ``.env`` file.
    """

    def __init__(self, message: str, *, names: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.names = names


class MissingConfigurationError(ConfigurationError):
    """A required variable such as ``SPOTIFY_ACCESS_TOKEN`` is unset or blank."""
