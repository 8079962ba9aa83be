"""Stable public API facade for the bidlint core engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .catalog import Rule
from .catalog import list_rules as _list_rules
from .config import CoreConfig, config_from_env
from .examples import get_example, list_examples
from .formatting import MalformedInputError, check_json_syntax, format_json, minify_json
from .validate.engine import validate_bid_request, validate_payload
from .validate.report import ValidationResult


def validate(
    raw: str | bytes | Path,
    *,
    rule_groups: str | list[str] | None = None,
) -> ValidationResult:
    """Validate JSON text, bytes or a file path.

    ``rule_groups`` defaults to ``BIDLINT_RULE_GROUPS`` and then to every group.
    """
    config = config_from_env(rule_groups=rule_groups)
    return validate_bid_request(_coerce_text(raw), groups=config.rule_groups)


def validate_object(
    bid_request: Any,
    *,
    rule_groups: str | list[str] | None = None,
) -> ValidationResult:
    config = config_from_env(rule_groups=rule_groups)
    return validate_payload(bid_request, groups=config.rule_groups)


def list_rules(prefix: str | None = None) -> list[dict[str, Any]]:
    return [rule.to_dict() for rule in _list_rules(prefix)]


def _coerce_text(value: str | bytes | Path) -> str | bytes:
    if isinstance(value, Path):
        return value.read_bytes()
    return value


__all__ = [
    "CoreConfig",
    "MalformedInputError",
    "Rule",
    "check_json_syntax",
    "config_from_env",
    "format_json",
    "get_example",
    "list_examples",
    "list_rules",
    "minify_json",
    "validate",
    "validate_object",
]
