# src/todoist_rest/resources/common.py

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from ..api.client import TodoistResponse
from ..errors import DecodeError, InvalidInputError

T = TypeVar("T")


def require_input(params: T | None, message: str) -> T:
    if params is None:
        raise InvalidInputError(message)
    return params


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def id_param(entity_id: int | str) -> dict[str, str]:
    return {"id": str(entity_id)}


def _build(from_api: Callable[[Mapping[str, Any]], T], data: Mapping[str, Any]) -> T:
    try:
        return from_api(data)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"unexpected field shape: {e}") from e


def decode_one(resp: TodoistResponse, from_api: Callable[[Mapping[str, Any]], T]) -> T:
    data = resp.json()
    if not isinstance(data, Mapping):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
    return _build(from_api, data)


def decode_many(resp: TodoistResponse, from_api: Callable[[Mapping[str, Any]], T]) -> list[T]:
    data = resp.json()
    if not isinstance(data, list):
        raise DecodeError(f"expected a JSON array, got {type(data).__name__}")
    out: list[T] = []
    for item in data:
        if not isinstance(item, Mapping):
            raise DecodeError(f"expected JSON objects in array, got {type(item).__name__}")
        out.append(_build(from_api, item))
    return out
