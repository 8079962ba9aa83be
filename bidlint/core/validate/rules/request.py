"""Top-level BidRequest structure."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import has_key, is_non_empty_list, is_non_empty_string, is_number, is_truthy, lookup, number_equals
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets

ROOT = "BidRequest"


def _exchange_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    if not is_truthy(lookup(bid_request, "site")) and not is_truthy(lookup(bid_request, "app")):
        yield issue("EQ-BR-001", ROOT)
    if not is_truthy(lookup(bid_request, "device")):
        yield issue("EQ-BR-002", "device")
    if not is_non_empty_list(lookup(bid_request, "imp")):
        yield issue("EQ-BR-003", "imp")
    if not is_truthy(lookup(bid_request, "source")):
        yield issue("EQ-BR-004", "source")
    if not is_truthy(lookup(bid_request, "user")):
        yield issue("EQ-BR-005", "user")

    if has_key(bid_request, "ext", "partnerIsCalled"):
        partner_is_called = lookup(bid_request, "ext", "partnerIsCalled")
        if partner_is_called is not True:
            yield issue("EQ-BR-006", "ext.partnerIsCalled", partner_is_called)


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    request_id = lookup(bid_request, "id")
    if not is_non_empty_string(request_id):
        yield issue("Core-BR-001", "id", request_id)

    imps = lookup(bid_request, "imp")
    if not is_truthy(imps):
        yield issue("Core-BR-002", "imp")
    elif not is_non_empty_list(imps):
        yield issue("Core-BR-003", "imp", imps)

    auction_type = lookup(bid_request, "at")
    if not is_number(auction_type):
        yield issue("Core-BR-004", "at", auction_type)

    if is_truthy(lookup(bid_request, "site")) and is_truthy(lookup(bid_request, "app")):
        yield issue("Core-BR-006", ROOT, "Both site and app present")

    if has_key(bid_request, "test"):
        test = lookup(bid_request, "test")
        if not (number_equals(test, 0) or number_equals(test, 1)):
            yield issue("Core-BR-007", "test", test)

    tmax = lookup(bid_request, "tmax")
    if not is_number(tmax) or tmax <= 0:
        yield issue("Core-BR-009", "tmax", tmax)


RULE_SETS: tuple[RuleSet, ...] = (
    RuleSet("request.exchange", "eq", _exchange_rules),
    RuleSet("request.core", "core", _core_rules),
)


def validate_request(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["ROOT", "RULE_SETS", "validate_request"]
