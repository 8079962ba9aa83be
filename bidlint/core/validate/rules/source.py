"""Source object and supply chain (schain) checks."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import has_key, is_non_empty_list, is_truthy, lookup, number_equals
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets


def _exchange_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    # The exchange also accepts the pre-2.6 location under source.ext.
    has_schain = is_truthy(lookup(bid_request, "source", "schain")) or is_truthy(
        lookup(bid_request, "source", "ext", "schain")
    )
    if not has_schain:
        yield issue("EQ-Source-021", "source.schain")


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    source = lookup(bid_request, "source")
    if not is_truthy(source):
        return

    schain = lookup(source, "schain")
    if not is_truthy(schain):
        yield issue("Core-Source-001", "source.schain")
        return

    complete = lookup(schain, "complete")
    if not number_equals(complete, 1):
        yield issue("Core-Source-002", "source.schain.complete", complete)

    nodes = lookup(schain, "nodes")
    if not is_non_empty_list(nodes):
        yield issue("Core-Source-003", "source.schain.nodes", nodes)
        return

    for index, node in enumerate(nodes):
        complete_node = (
            isinstance(node, dict)
            and is_truthy(node.get("asi"))
            and is_truthy(node.get("sid"))
            and has_key(node, "hp")
        )
        if not complete_node:
            yield issue("Core-Source-004", f"source.schain.nodes[{index}]", node)


RULE_SETS: tuple[RuleSet, ...] = (
    RuleSet("source.exchange", "eq", _exchange_rules),
    RuleSet("source.core", "core", _core_rules),
)


def validate_source(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "validate_source"]
