"""Immutable description of one outgoing Web API request."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

type QueryValue = str | int | StrEnum


def render_query_value(value: QueryValue) -> str:
    if isinstance(value, StrEnum):
        return value.value
    return str(value)


@dataclass(slots=True, frozen=True)
class RequestDescriptor:
    """Fully specified request: method, path, query, optional JSON body and headers.

    ``query`` keeps the typed values exactly as the builder stored them;
    ``wire_params`` renders them to the strings sent on the wire.
    """

    method: str
    path: str
    query: tuple[tuple[str, QueryValue], ...] = ()
    body: Mapping[str, object] | None = None
    headers: tuple[tuple[str, str], ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if self.body is not None and not isinstance(self.body, MappingProxyType):
            object.__setattr__(self, "body", MappingProxyType(deepcopy(dict(self.body))))

    @property
    def params(self) -> dict[str, QueryValue]:
        return dict(self.query)

    @property
    def header_map(self) -> dict[str, str]:
        return dict(self.headers)

    def wire_params(self) -> dict[str, str]:
        return {name: render_query_value(value) for name, value in self.query}
