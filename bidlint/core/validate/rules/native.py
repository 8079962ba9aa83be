"""Native impressions: the embedded ``native.request`` JSON document."""

import json
from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import as_object, is_non_empty_list, is_truthy, iter_objects, lookup
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets
from .impression import imp_path

ASSET_TYPES = ("title", "img", "video", "data")


def _check_assets(assets: list[Any], path: str) -> Iterator[ValidationIssue]:
    for index, asset in iter_objects(assets):
        asset_path = f"{path}.assets[{index}]"
        if not is_truthy(asset.get("id")):
            yield issue("Native-N-004", f"{asset_path}.id")

        type_count = sum(1 for key in ASSET_TYPES if is_truthy(asset.get(key)))
        if type_count == 0:
            yield issue("Native-N-005", asset_path)
        elif type_count > 1:
            present = [key for key in ASSET_TYPES if is_truthy(asset.get(key))]
            yield issue("Native-N-007", asset_path, ", ".join(present))


def _check_native(native: Any, path: str) -> Iterator[ValidationIssue]:
    request = lookup(native, "request")
    request_path = f"{path}.request"
    if not isinstance(request, str) or request == "":
        yield issue("Native-N-001", request_path, request)
        return

    try:
        parsed = json.loads(request)
    except (ValueError, RecursionError):
        yield issue("Native-N-006", request_path, request)
        return

    native_request = as_object(parsed)
    if not is_truthy(native_request.get("ver")):
        yield issue("Native-N-002", f"{request_path}.ver")

    assets = native_request.get("assets")
    if not is_non_empty_list(assets):
        yield issue("Native-N-003", f"{request_path}.assets", assets)
    else:
        yield from _check_assets(assets, request_path)


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    for index, imp in iter_objects(lookup(bid_request, "imp")):
        native = imp.get("native")
        if is_truthy(native):
            yield from _check_native(native, f"{imp_path(index)}.native")


RULE_SETS: tuple[RuleSet, ...] = (RuleSet("native.core", "core", _core_rules),)


def validate_native(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["ASSET_TYPES", "RULE_SETS", "validate_native"]
