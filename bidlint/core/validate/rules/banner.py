"""Banner sizing: explicit w/h or a list of allowed formats."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import has_key, is_non_empty_list, is_truthy, iter_objects, lookup
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets
from .impression import imp_path


def _check_banner(banner: Any, path: str) -> Iterator[ValidationIssue]:
    has_size = has_key(banner, "w") and has_key(banner, "h")
    formats = lookup(banner, "format")
    if not has_size and not is_non_empty_list(formats):
        yield issue("Banner-B-001", path)

    if not isinstance(formats, list):
        return
    for index, entry in enumerate(formats):
        size = entry if isinstance(entry, dict) else {}
        if not is_truthy(size.get("w")) or not is_truthy(size.get("h")):
            yield issue("Banner-B-002", f"{path}.format[{index}]", entry)


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    for index, imp in iter_objects(lookup(bid_request, "imp")):
        banner = imp.get("banner")
        if is_truthy(banner):
            yield from _check_banner(banner, f"{imp_path(index)}.banner")


RULE_SETS: tuple[RuleSet, ...] = (RuleSet("banner.core", "core", _core_rules),)


def validate_banner(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "validate_banner"]
