"""Parameter checks shared by every request builder.

Each function validates one value and returns its wire form; failures raise
:class:`RequestValidationError` immediately so that no malformed request ever
reaches the network.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import RequestValidationError
from .markets import Market

if TYPE_CHECKING:
    from collections.abc import Iterable
    from enum import StrEnum


@dataclass(slots=True, frozen=True)
class PagingBounds:
    min_limit: int = 1
    max_limit: int = 50
    max_offset: int | None = None


SEARCH_PAGING = PagingBounds(max_limit=50, max_offset=100_000)
CATALOG_PAGING = PagingBounds(max_limit=50)


def require_text(name: str, value: str | None) -> str:
    if value is None:
        raise RequestValidationError(f"{name} must not be None", parameter=name)
    if not isinstance(value, str):
        raise RequestValidationError(f"{name} must be a string", parameter=name)
    if not value.strip():
        raise RequestValidationError(f"{name} must not be empty", parameter=name)
    return value


def require_int_range(
    name: str,
    value: int | None,
    *,
    minimum: int,
    maximum: int | None = None,
) -> int:
    if value is None:
        raise RequestValidationError(f"{name} must not be None", parameter=name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise RequestValidationError(f"{name} must be an integer", parameter=name)
    if value < minimum or (maximum is not None and value > maximum):
        bound = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        raise RequestValidationError(f"{name} must be {bound}, got {value}", parameter=name)
    return value


def require_limit(value: int | None, bounds: PagingBounds) -> int:
    return require_int_range(
        "limit", value, minimum=bounds.min_limit, maximum=bounds.max_limit
    )


def require_offset(value: int | None, bounds: PagingBounds) -> int:
    return require_int_range("offset", value, minimum=0, maximum=bounds.max_offset)


def require_market(name: str, value: Market | str | None) -> Market:
    if value is None:
        raise RequestValidationError(f"{name} must not be None", parameter=name)
    if isinstance(value, Market):
        return value
    if not isinstance(value, str):
        raise RequestValidationError(f"{name} must be a country code", parameter=name)
    try:
        return Market.parse(value)
    except ValueError:
        raise RequestValidationError(
            f"{name} must be an ISO 3166-1 alpha-2 country code, got {value!r}",
            parameter=name,
        ) from None


def require_ids(name: str, ids: Iterable[str] | None, *, maximum: int) -> str:
    if ids is None:
        raise RequestValidationError(f"{name} must not be None", parameter=name)
    if isinstance(ids, str):
        raise RequestValidationError(f"{name} must be a sequence of ids", parameter=name)
    values = [require_text(name, value) for value in ids]
    if not values:
        raise RequestValidationError(f"{name} must not be empty", parameter=name)
    if len(values) > maximum:
        raise RequestValidationError(
            f"{name} accepts at most {maximum} ids, got {len(values)}", parameter=name
        )
    return ",".join(values)


def require_members[E: StrEnum](
    name: str,
    values: Iterable[E | str] | None,
    enum: type[E],
) -> str:
    if values is None:
        raise RequestValidationError(f"{name} must not be None", parameter=name)
    if isinstance(values, str):
        values = [values]
    members: list[E] = []
    for value in values:
        try:
            member = enum(value.strip().lower() if isinstance(value, str) else value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum)
            raise RequestValidationError(
                f"{name} values must be one of: {allowed}; got {value!r}", parameter=name
            ) from None
        if member not in members:
            members.append(member)
    if not members:
        raise RequestValidationError(f"{name} must not be empty", parameter=name)
    return ",".join(member.value for member in members)
