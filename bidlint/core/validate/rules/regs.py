"""Regulatory signals: COPPA, GDPR/TCF and GPP."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import has_key, is_truthy, lookup, number_equals
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets


def _is_binary_flag(value: Any) -> bool:
    return number_equals(value, 0) or number_equals(value, 1)


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    regs = lookup(bid_request, "regs")
    if not is_truthy(regs):
        return

    if has_key(regs, "coppa") and not _is_binary_flag(lookup(regs, "coppa")):
        yield issue("Core-Regs-001", "regs.coppa", lookup(regs, "coppa"))

    gdpr = lookup(regs, "ext", "gdpr")
    if has_key(regs, "ext", "gdpr") and not _is_binary_flag(gdpr):
        yield issue("Core-Regs-002", "regs.ext.gdpr", gdpr)

    if number_equals(gdpr, 1) and not is_truthy(lookup(bid_request, "user", "ext", "consent")):
        yield issue("Core-Regs-003", "user.ext.consent")

    if is_truthy(lookup(regs, "gpp")) and not is_truthy(lookup(regs, "gpp_sid")):
        yield issue("Core-Regs-004", "regs.gpp_sid")


RULE_SETS: tuple[RuleSet, ...] = (RuleSet("regs.core", "core", _core_rules),)


def validate_regs(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "validate_regs"]
