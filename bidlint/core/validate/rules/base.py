"""Rule set plumbing shared by every category validator."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ...catalog import normalize_rule_groups
from ..report import ValidationIssue

CheckFn = Callable[[Any], Iterable[ValidationIssue]]


@dataclass(frozen=True)
class RuleSet:
    """An ordered batch of checks from one rule group.

    A halting rule set stops the rest of its category once it reports
    anything, for checks that later rule sets rely on.
    """

    name: str
    group: str
    check: CheckFn
    halts: bool = False


def run_rule_sets(
    rule_sets: Iterable[RuleSet],
    bid_request: Any,
    groups: Iterable[str] | None = None,
) -> tuple[ValidationIssue, ...]:
    enabled = normalize_rule_groups(groups)
    issues: list[ValidationIssue] = []
    for rule_set in rule_sets:
        if rule_set.group not in enabled:
            continue
        found = tuple(rule_set.check(bid_request))
        issues.extend(found)
        if found and rule_set.halts:
            break
    return tuple(issues)


__all__ = ["CheckFn", "RuleSet", "run_rule_sets"]
