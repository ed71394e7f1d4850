from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from spotiquery.adapters.spotify.client import SpotifyClient
from spotiquery.api import SpotifyApi
from spotiquery.config.spotify import SpotifyConfig
from tests.helpers.spotify import (
    ACCESS_TOKEN,
    RecordingHandler,
    fail_on_network,
    load_fixture,
    make_client_factory,
)

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def spotify_config() -> SpotifyConfig:
    return SpotifyConfig(access_token=ACCESS_TOKEN)


@pytest.fixture
def offline_client(spotify_config: SpotifyConfig) -> SpotifyClient:
    """Client whose transport fails the test if anything reaches the network."""
    return SpotifyClient(
        config=spotify_config, client_factory=make_client_factory(fail_on_network)
    )


@pytest.fixture
def offline_api(spotify_config: SpotifyConfig, offline_client: SpotifyClient) -> SpotifyApi:
    return SpotifyApi(config=spotify_config, client=offline_client)


@pytest.fixture
def api_for(
    spotify_config: SpotifyConfig,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], SpotifyApi]:
    def build(handler: Callable[[httpx.Request], httpx.Response]) -> SpotifyApi:
        client = SpotifyClient(config=spotify_config, client_factory=make_client_factory(handler))
        return SpotifyApi(config=spotify_config, client=client)

    return build


@pytest.fixture
def fixture_handler() -> Callable[[str], RecordingHandler]:
    def build(fixture_name: str) -> RecordingHandler:
        return RecordingHandler(httpx.Response(200, json=load_fixture(fixture_name)))

    return build
