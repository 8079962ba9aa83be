"""User object checks."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import is_truthy, lookup
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    user = lookup(bid_request, "user")
    if not is_truthy(user):
        return
    if not is_truthy(lookup(user, "id")):
        yield issue("Core-User-001", "user.id")
    if not is_truthy(lookup(user, "buyeruid")):
        yield issue("Core-User-002", "user.buyeruid")


RULE_SETS: tuple[RuleSet, ...] = (RuleSet("user.core", "core", _core_rules),)


def validate_user(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "validate_user"]
