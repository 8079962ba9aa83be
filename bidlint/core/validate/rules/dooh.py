"""Digital out-of-home profile, applied when ``device.devicetype`` is 6."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import is_truthy, iter_objects, lookup, number_equals
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets
from .impression import imp_path
from .request import ROOT

DOOH_DEVICE_TYPE = 6


def iter_dooh_objects(bid_request: Any) -> Iterator[tuple[str, Any]]:
    """Request-level ``dooh`` first, then each impression's, with their paths."""
    request_dooh = lookup(bid_request, "dooh")
    if is_truthy(request_dooh):
        yield "dooh", request_dooh
    for index, imp in iter_objects(lookup(bid_request, "imp")):
        dooh = imp.get("dooh")
        if is_truthy(dooh):
            yield f"{imp_path(index)}.dooh", dooh


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    if not is_truthy(lookup(bid_request, "device")):
        return
    if not number_equals(lookup(bid_request, "device", "devicetype"), DOOH_DEVICE_TYPE):
        return

    dooh_objects = list(iter_dooh_objects(bid_request))
    if not dooh_objects:
        yield issue("DOOH-001", ROOT)

    for path, dooh in dooh_objects:
        if not is_truthy(lookup(dooh, "venuetype")):
            yield issue("DOOH-002", f"{path}.venuetype")
        if not is_truthy(lookup(dooh, "venuetypetax")):
            yield issue("DOOH-003", f"{path}.venuetypetax")


RULE_SETS: tuple[RuleSet, ...] = (RuleSet("dooh.core", "core", _core_rules),)


def validate_dooh(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["DOOH_DEVICE_TYPE", "RULE_SETS", "iter_dooh_objects", "validate_dooh"]
