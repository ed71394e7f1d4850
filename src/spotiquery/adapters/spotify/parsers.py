"""Factories turning decoded JSON payloads into typed results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import ResponseParseError
from .schema import Paging

if TYPE_CHECKING:
    from collections.abc import Callable


def _unwrap(payload: object, key: str | None) -> object:
    if not isinstance(payload, Mapping):
        raise ResponseParseError(f"Expected a JSON object, got {type(payload).__name__}")
    if key is None:
        return payload
    mapping = cast(Mapping[str, object], payload)
    if key not in mapping:
        raise ResponseParseError(f"Response payload is missing the {key!r} field")
    return mapping[key]


def _validate[R](adapter: TypeAdapter[R], data: object) -> R:
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise ResponseParseError(
            f"Response does not match the expected schema ({exc.error_count()} error(s))"
        ) from exc


def model_parser[M: BaseModel](
    model: type[M],
    *,
    key: str | None = None,
) -> Callable[[object], M]:
    adapter = TypeAdapter(model)

    def parse(payload: object) -> M:
        return _validate(adapter, _unwrap(payload, key))

    return parse


def paging_parser[M: BaseModel](
    model: type[M],
    *,
    key: str | None = None,
) -> Callable[[object], Paging[M]]:
    adapter: TypeAdapter[Paging[M]] = TypeAdapter(Paging[model])

    def parse(payload: object) -> Paging[M]:
        return _validate(adapter, _unwrap(payload, key))

    return parse


def list_parser[M: BaseModel](model: type[M], *, key: str) -> Callable[[object], list[M]]:
    adapter: TypeAdapter[list[M]] = TypeAdapter(list[model])

    def parse(payload: object) -> list[M]:
        return _validate(adapter, _unwrap(payload, key))

    return parse


def sparse_list_parser[M: BaseModel](
    model: type[M],
    *,
    key: str,
) -> Callable[[object], list[M | None]]:
    """Parse ``{key: [...]}`` where unknown ids come back as ``null`` entries."""

    adapter: TypeAdapter[list[M | None]] = TypeAdapter(list[model | None])

    def parse(payload: object) -> list[M | None]:
        return _validate(adapter, _unwrap(payload, key))

    return parse
