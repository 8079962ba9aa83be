"""Guarded access helpers for untyped bid request payloads.

Bid requests arrive as arbitrary JSON trees. Every rule reads through these
helpers so that a missing key, a ``null`` or a value of the wrong shape never
raises; it simply reads as missing.
"""

from __future__ import annotations

import json
import math
import re
from itertools import chain
from typing import Any, Iterable, Iterator
from urllib.parse import urlsplit

_MISSING = object()

MACRO_PATTERN = re.compile(r"\[\w+\]|\{\w+\}", re.ASCII)
_URL_SCHEME_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")


def lookup(node: Any, *path: str | int, default: Any = None) -> Any:
    """Walk ``path`` through nested dicts/lists, returning ``default`` on any miss."""
    current = node
    for key in path:
        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return default
            current = current[key]
            continue
        if not isinstance(current, dict):
            return default
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return default
    return current


def has_key(node: Any, *path: str | int) -> bool:
    """True when the final key exists, even if its value is ``null``."""
    if not path:
        return False
    parent = lookup(node, *path[:-1], default=_MISSING)
    last = path[-1]
    if isinstance(parent, dict):
        return last in parent
    if isinstance(parent, list) and isinstance(last, int) and not isinstance(last, bool):
        return -len(parent) <= last < len(parent)
    return False


def as_object(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def is_truthy(value: Any) -> bool:
    """JSON truthiness: ``null``, ``false``, ``0`` and ``""`` are falsy; containers are not."""
    if value is None or value is False:
        return False
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def number_equals(value: Any, expected: int) -> bool:
    """Strict numeric equality (``true`` is not ``1``)."""
    return is_number(value) and value == expected


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def is_non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def contains_number(values: Any, expected: int) -> bool:
    if not isinstance(values, list):
        return False
    return any(number_equals(item, expected) for item in values)


def iter_objects(values: Any) -> Iterator[tuple[int, dict[str, Any]]]:
    """Yield ``(index, object)`` pairs; non-object entries read as empty objects."""
    if not isinstance(values, list):
        return
    for index, item in enumerate(values):
        yield index, as_object(item)


def iter_strings(node: Any) -> Iterator[str]:
    """Depth-first walk over every object key and string value."""
    stack: list[Iterator[Any]] = [iter((node,))]
    while stack:
        item = next(stack[-1], _MISSING)
        if item is _MISSING:
            stack.pop()
        elif isinstance(item, str):
            yield item
        elif isinstance(item, dict):
            stack.append(chain.from_iterable((str(key), value) for key, value in item.items()))
        elif isinstance(item, list):
            stack.append(iter(item))


def find_macros(node: Any) -> list[str]:
    """Unresolved ``[MACRO]`` / ``{MACRO}`` tokens in keys and string values."""
    found: list[str] = []
    for text in iter_strings(node):
        found.extend(match.group(0) for match in MACRO_PATTERN.finditer(text))
    return found


def is_valid_url(value: Any) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return False
    if not parts.scheme or not _URL_SCHEME_RE.fullmatch(parts.scheme):
        return False
    return bool(parts.netloc)


def describe(value: Any) -> str:
    """Render a value the way it would appear in the JSON document."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(value)


def format_number(value: Any) -> str:
    """Integers render exactly, floats in short form (``1280``, ``2.5``)."""
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return str(value)
        except ValueError:
            return f"<{value.bit_length()}-bit integer>"
    return f"{value:g}"


def ordered_unique(items: Iterable[Any]) -> tuple[Any, ...]:
    values: list[Any] = []
    for item in items:
        if item in values:
            continue
        values.append(item)
    return tuple(values)


__all__ = [
    "as_object",
    "contains_number",
    "describe",
    "find_macros",
    "format_number",
    "has_key",
    "is_integer",
    "is_non_empty_list",
    "is_non_empty_string",
    "is_number",
    "is_truthy",
    "is_valid_url",
    "iter_objects",
    "iter_strings",
    "lookup",
    "number_equals",
    "ordered_unique",
]
