"""Cross-object pass over the whole request: macros, app/site consistency, EIDs."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import find_macros, is_truthy, lookup, number_equals
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets
from .request import ROOT


def _check_eids(eids: Any) -> Iterator[ValidationIssue]:
    if not isinstance(eids, list):
        yield issue("Advanced-004", "user.eids", eids)
        return

    for index, eid in enumerate(eids):
        path = f"user.eids[{index}]"
        source = lookup(eid, "source")
        uids = lookup(eid, "uids")
        if not is_truthy(source) or not is_truthy(uids):
            yield issue("Advanced-005", path, eid)
            continue
        if not isinstance(uids, list):
            continue
        for uid_index, uid in enumerate(uids):
            if not is_truthy(lookup(uid, "id")):
                yield issue("Advanced-006", f"{path}.uids[{uid_index}]")


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    macros = find_macros(bid_request)
    if macros:
        yield issue("Advanced-001", ROOT, ", ".join(macros))

    is_app = lookup(bid_request, "device", "ext", "is_app")
    if number_equals(is_app, 1) and not is_truthy(lookup(bid_request, "app")):
        yield issue("Advanced-002", ROOT)
    if number_equals(is_app, 0) and not is_truthy(lookup(bid_request, "site")):
        yield issue("Advanced-003", ROOT)

    eids = lookup(bid_request, "user", "eids")
    if is_truthy(eids):
        yield from _check_eids(eids)


RULE_SETS: tuple[RuleSet, ...] = (RuleSet("advanced.core", "core", _core_rules),)


def validate_advanced(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "validate_advanced"]
