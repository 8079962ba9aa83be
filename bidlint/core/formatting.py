"""Strict JSON parsing plus the pretty-print / minify helpers."""

from __future__ import annotations

import json
from typing import Any


class MalformedInputError(ValueError):
    """The input text is not a valid JSON document."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


def _coerce_text(raw: str | bytes | bytearray) -> str:
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"Input is not valid UTF-8: {exc}") from exc
    if not isinstance(raw, str):
        raise MalformedInputError(f"Expected JSON text, got {type(raw).__name__}")
    return raw


def parse_json(raw: str | bytes | bytearray) -> Any:
    text = _coerce_text(raw)
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedInputError(str(exc)) from exc
    except RecursionError as exc:
        raise MalformedInputError(f"JSON nesting is too deep: {exc}") from exc


def format_json(raw: str | bytes | bytearray, indent: int = 2) -> str:
    return json.dumps(parse_json(raw), indent=indent, ensure_ascii=False)


def minify_json(raw: str | bytes | bytearray) -> str:
    return json.dumps(parse_json(raw), separators=(",", ":"), ensure_ascii=False)


def check_json_syntax(raw: str | bytes | bytearray) -> dict[str, Any]:
    """Report whether ``raw`` parses, without raising."""
    try:
        parse_json(raw)
    except MalformedInputError as exc:
        return {"is_valid": False, "error": str(exc)}
    return {"is_valid": True, "error": None}


__all__ = [
    "MalformedInputError",
    "check_json_syntax",
    "format_json",
    "minify_json",
    "parse_json",
]
