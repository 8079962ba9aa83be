"""Site object checks."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import is_truthy, is_valid_url, lookup
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    site = lookup(bid_request, "site")
    if not is_truthy(site):
        return

    page = lookup(site, "page")
    if not isinstance(page, str) or page == "":
        yield issue("Core-Site-001", "site.page", page)
    elif not is_valid_url(page):
        yield issue("Core-Site-002", "site.page", page)

    publisher = lookup(site, "publisher")
    if not is_truthy(publisher):
        yield issue("Core-Site-003", "site.publisher")
    else:
        publisher_id = lookup(publisher, "id")
        if not isinstance(publisher_id, str) or publisher_id == "":
            yield issue("Core-Site-004", "site.publisher.id", publisher_id)


RULE_SETS: tuple[RuleSet, ...] = (RuleSet("site.core", "core", _core_rules),)


def validate_site(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "validate_site"]
