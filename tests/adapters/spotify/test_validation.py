from __future__ import annotations

import pytest

from spotiquery.adapters.spotify.errors import RequestValidationError
from spotiquery.adapters.spotify.markets import Market
from spotiquery.adapters.spotify.schema import AlbumGroup
from spotiquery.adapters.spotify.validation import (
    CATALOG_PAGING,
    SEARCH_PAGING,
    require_ids,
    require_int_range,
    require_limit,
    require_market,
    require_members,
    require_offset,
    require_text,
)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_text_rejects_missing_values(value: str | None) -> None:
    with pytest.raises(RequestValidationError) as excinfo:
        require_text("q", value)

    assert excinfo.value.parameter == "q"


def test_require_text_returns_value_unchanged() -> None:
    assert require_text("q", " abba ") == " abba "


@pytest.mark.parametrize("limit", [-1, 0, 51, 1000])
def test_search_limit_outside_bounds_rejected(limit: int) -> None:
    with pytest.raises(RequestValidationError, match="limit must be between 1 and 50"):
        require_limit(limit, SEARCH_PAGING)


@pytest.mark.parametrize("limit", [1, 20, 50])
def test_search_limit_inside_bounds_accepted(limit: int) -> None:
    assert require_limit(limit, SEARCH_PAGING) == limit


@pytest.mark.parametrize("offset", [-1, 100_001])
def test_search_offset_outside_bounds_rejected(offset: int) -> None:
    with pytest.raises(RequestValidationError) as excinfo:
        require_offset(offset, SEARCH_PAGING)

    assert excinfo.value.parameter == "offset"


@pytest.mark.parametrize("offset", [0, 100_000])
def test_search_offset_bounds_are_inclusive(offset: int) -> None:
    assert require_offset(offset, SEARCH_PAGING) == offset


def test_catalog_offset_is_unbounded_above() -> None:
    assert require_offset(250_000, CATALOG_PAGING) == 250_000


@pytest.mark.parametrize("value", [None, True, 1.5, "10"])
def test_require_int_range_rejects_non_integers(value: object) -> None:
    with pytest.raises(RequestValidationError):
        require_int_range("limit", value, minimum=1, maximum=50)  # type: ignore[arg-type]


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="limit"):
        require_limit(0, SEARCH_PAGING)


def test_require_market_accepts_members_and_codes() -> None:
    assert require_market("market", Market.SE) is Market.SE
    assert require_market("market", "de") is Market.DE
    assert require_market("market", "XK") is Market.XK


@pytest.mark.parametrize("value", [None, "", "ZZ", "SWE", 46])
def test_require_market_rejects_unknown_codes(value: object) -> None:
    with pytest.raises(RequestValidationError):
        require_market("market", value)  # type: ignore[arg-type]


def test_require_ids_joins_with_commas() -> None:
    assert require_ids("ids", ["a", "b", "c"], maximum=3) == "a,b,c"


def test_require_ids_rejects_plain_string() -> None:
    with pytest.raises(RequestValidationError, match="sequence"):
        require_ids("ids", "abc", maximum=50)


@pytest.mark.parametrize("ids", [[], ["a", ""], ["a"] * 4])
def test_require_ids_rejects_invalid_sequences(ids: list[str]) -> None:
    with pytest.raises(RequestValidationError):
        require_ids("ids", ids, maximum=3)


def test_require_members_normalises_and_deduplicates() -> None:
    value = require_members(
        "include_groups", ["Album", AlbumGroup.SINGLE, "album"], AlbumGroup
    )

    assert value == "album,single"


def test_require_members_rejects_unknown_value() -> None:
    with pytest.raises(RequestValidationError, match="appears_on"):
        require_members("include_groups", ["ep"], AlbumGroup)
