"""Connected TV profile, applied when ``device.devicetype`` is 5."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import format_number, has_key, is_number, is_truthy, iter_objects, lookup, number_equals
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets
from .video import iter_videos

CTV_DEVICE_TYPE = 5
TARGET_ASPECT_RATIO = 16 / 9
ASPECT_RATIO_TOLERANCE = 0.1


def is_ctv_request(bid_request: Any) -> bool:
    return is_truthy(lookup(bid_request, "device")) and number_equals(
        lookup(bid_request, "device", "devicetype"), CTV_DEVICE_TYPE
    )


def aspect_ratio_mismatch(width: Any, height: Any) -> str | None:
    """``"WxH (R:1)"`` when the size strays from 16:9, else ``None``."""
    if not (is_number(width) and is_number(height)) or not (is_truthy(width) and is_truthy(height)):
        return None
    size = f"{format_number(width)}x{format_number(height)}"
    try:
        ratio = width / height
    except OverflowError:
        return f"{size} (out of range)"
    if abs(ratio - TARGET_ASPECT_RATIO) <= ASPECT_RATIO_TOLERANCE:
        return None
    return f"{size} ({ratio:.2f}:1)"


def _exchange_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    if not is_ctv_request(bid_request):
        return
    if not is_truthy(lookup(bid_request, "app")):
        yield issue("EQ-CTV-054", "app")

    for path, video in iter_videos(bid_request):
        if not has_key(video, "pos"):
            yield issue("EQ-CTV-051", f"{path}.pos")
        elif not number_equals(lookup(video, "pos"), 7):
            yield issue("EQ-CTV-052", f"{path}.pos", lookup(video, "pos"))

        mismatch = aspect_ratio_mismatch(lookup(video, "w"), lookup(video, "h"))
        if mismatch is not None:
            yield issue("EQ-CTV-053", path, mismatch)


def _has_device_id(device: Any) -> bool:
    return (
        is_truthy(lookup(device, "ifa"))
        or is_truthy(lookup(device, "ext", "ids", "idfa"))
        or is_truthy(lookup(device, "ext", "ids", "rida"))
    )


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    if not is_ctv_request(bid_request):
        return

    has_video = any(is_truthy(imp.get("video")) for _, imp in iter_objects(lookup(bid_request, "imp")))
    if not has_video:
        yield issue("CTV-001", "imp")
    if not is_truthy(lookup(bid_request, "app")):
        yield issue("CTV-002", "app")

    device = lookup(bid_request, "device")
    if not _has_device_id(device):
        yield issue("CTV-003", "device")
    make = lookup(device, "make")
    model = lookup(device, "model")
    if not is_truthy(make) or not is_truthy(model):
        yield issue("CTV-004", "device", f"make: {make}, model: {model}")

    for path, video in iter_videos(bid_request):
        for key, expected, rule_id in (
            ("placement", 1, "CTV-005"),
            ("linearity", 1, "CTV-006"),
            ("pos", 7, "CTV-007"),
        ):
            value = lookup(video, key)
            if not number_equals(value, expected):
                yield issue(rule_id, f"{path}.{key}", value)


RULE_SETS: tuple[RuleSet, ...] = (
    RuleSet("ctv.exchange", "eq", _exchange_rules),
    RuleSet("ctv.core", "core", _core_rules),
)


def validate_ctv(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = [
    "ASPECT_RATIO_TOLERANCE",
    "CTV_DEVICE_TYPE",
    "RULE_SETS",
    "TARGET_ASPECT_RATIO",
    "aspect_ratio_mismatch",
    "is_ctv_request",
    "validate_ctv",
]
