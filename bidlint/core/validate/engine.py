"""Validation orchestrator: parse once, detect, then run every category in order."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..catalog import normalize_rule_groups
from ..detect.characteristics import detect_characteristics
from ..formatting import parse_json
from ..registry import get_category, list_categories
from .report import ValidationIssue, ValidationResult
from .rules.base import run_rule_sets

logger = logging.getLogger("bidlint.core")


def validate_payload(bid_request: Any, *, groups: Iterable[str] | str | None = None) -> ValidationResult:
    """Validate an already-parsed bid request.

    Site and app presence is an exchange rule (``EQ-BR-001``), so a request
    validated with only the ``core`` group is not flagged for lacking both.
    """
    enabled = normalize_rule_groups(groups)
    characteristics = detect_characteristics(bid_request)

    issues: list[ValidationIssue] = []
    for category in list_categories():
        found = run_rule_sets(get_category(category), bid_request, enabled)
        if found:
            logger.debug("Category %s reported %d issue(s)", category, len(found))
        issues.extend(found)

    result = ValidationResult(detected_characteristics=characteristics, issues=tuple(issues))
    logger.debug(
        "Validated bid request: valid=%s issues=%d groups=%s",
        result.is_valid,
        len(result.issues),
        ",".join(sorted(enabled)),
    )
    return result


def validate_bid_request(
    raw: str | bytes | bytearray,
    *,
    groups: Iterable[str] | str | None = None,
) -> ValidationResult:
    """Parse ``raw`` and validate it.

    Raises ``MalformedInputError`` before any rule runs when ``raw`` is not
    valid JSON, and ``ValueError`` for an unknown rule group. Any valid JSON
    document otherwise yields a result.
    """
    normalize_rule_groups(groups)
    bid_request = parse_json(raw)
    return validate_payload(bid_request, groups=groups)


__all__ = ["validate_bid_request", "validate_payload"]
