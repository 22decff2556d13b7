# src/todo_cli/core/coerce.py

"""
Leaf coercion for decoded documents.

JSON/YAML/TOML hand back typed leaves. XML written by hand (no `type`
attributes) hands back strings. These helpers accept both and raise
DecodeError on anything else, so from_data() stays strict about shape.
"""

from __future__ import annotations

from typing import Any

from .errors import DecodeError

_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}


def as_str(value: Any, *, field: str, default: str | None = None) -> str:
    if value is None:
        if default is None:
            raise DecodeError(f"missing field `{field}`")
        return default
    if isinstance(value, bool) or not isinstance(value, str):
        raise DecodeError(f"invalid type for `{field}`: expected a string")
    return value


def as_bool(value: Any, *, field: str, default: bool | None = None) -> bool:
    if value is None:
        if default is None:
            raise DecodeError(f"missing field `{field}`")
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise DecodeError(f"invalid type for `{field}`: expected a boolean")


def _is_decimal(text: str) -> bool:
    # str.isdigit() alone also accepts digits int() refuses, such as "²".
    return text.isascii() and text.isdigit()


def as_index(value: Any, *, field: str = "index") -> int:
    if isinstance(value, bool):
        raise DecodeError(f"invalid type for `{field}`: expected an integer")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _is_decimal(value.strip()):
        number = int(value)
    else:
        raise DecodeError(f"invalid type for `{field}`: expected an integer")
    if number < 0:
        raise DecodeError(f"invalid value for `{field}`: {number} is negative")
    return number


def as_record_list(value: Any, *, field: str, item: str) -> list[dict[str, Any]]:
    """
    A list of mappings.

    Un-typed XML needs some slack: `<tasks/>` reads as "", a lone
    `<tasks><task>..</task></tasks>` reads as {"task": {...}}, and a bare
    record reads as one mapping.
    """
    if value is None or value == "":
        return []
    if isinstance(value, dict) and set(value) == {item}:
        value = value[item]
    if isinstance(value, dict):
        return [value]
    if not isinstance(value, list):
        raise DecodeError(f"invalid type for `{field}`: expected a sequence")
    for record in value:
        if not isinstance(record, dict):
            raise DecodeError(f"invalid type for `{field}` item: expected a mapping")
    return value
