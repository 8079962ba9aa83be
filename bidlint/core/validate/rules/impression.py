"""Per-impression structure, plus the exchange video requirements."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import (
    as_object,
    contains_number,
    format_number,
    has_key,
    is_integer,
    is_number,
    is_truthy,
    iter_objects,
    lookup,
    number_equals,
)
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets

_MEDIA_KEYS = ("video", "native", "banner")


def imp_path(index: int) -> str:
    return f"imp[{index}]"


def _is_binary_flag(value: Any) -> bool:
    return number_equals(value, 0) or number_equals(value, 1)


def _exchange_video_rules(video: dict[str, Any], path: str) -> Iterator[ValidationIssue]:
    minduration = video.get("minduration")
    maxduration = video.get("maxduration")
    if is_truthy(minduration) and is_truthy(maxduration) and is_number(minduration) and is_number(maxduration):
        try:
            duration_diff = maxduration - minduration
        except OverflowError:
            # float mixed with an integer beyond float range
            duration_diff = None
        if duration_diff is None:
            if maxduration < minduration:
                yield issue("EQ-Video-037", path, "out of range")
        elif duration_diff < 30:
            yield issue("EQ-Video-037", path, f"{format_number(duration_diff)} seconds")

    playbackmethod = video.get("playbackmethod")
    if not is_truthy(playbackmethod):
        yield issue("EQ-Video-038", f"{path}.playbackmethod")

    if not has_key(video, "placement"):
        yield issue("EQ-Video-039", f"{path}.placement")

    if number_equals(video.get("placement"), 1) and is_truthy(playbackmethod):
        if not contains_number(playbackmethod, 1):
            yield issue("EQ-Video-040", f"{path}.playbackmethod", playbackmethod)

    if not has_key(video, "linearity"):
        yield issue("EQ-Video-041", f"{path}.linearity")
    if not has_key(video, "pos"):
        yield issue("EQ-Video-042", f"{path}.pos")
    if not is_truthy(video.get("protocols")):
        yield issue("EQ-Video-043", f"{path}.protocols")

    mimes = video.get("mimes")
    if not isinstance(mimes, list):
        yield issue("EQ-Video-044", f"{path}.mimes", mimes)
    elif "video/mp4" not in mimes:
        yield issue("EQ-Video-045", f"{path}.mimes", mimes)

    if not is_truthy(video.get("w")):
        yield issue("EQ-Video-046", f"{path}.w")
    if not is_truthy(video.get("h")):
        yield issue("EQ-Video-047", f"{path}.h")

    if not has_key(video, "startdelay"):
        yield issue("EQ-Video-049", f"{path}.startdelay")
    elif not is_integer(video.get("startdelay")):
        yield issue("EQ-Video-050", f"{path}.startdelay", video.get("startdelay"))


def _exchange_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    for index, imp in iter_objects(lookup(bid_request, "imp")):
        path = imp_path(index)
        if has_key(imp, "secure") and not _is_binary_flag(imp.get("secure")):
            yield issue("EQ-Imp-036", f"{path}.secure", imp.get("secure"))

        video = imp.get("video")
        if is_truthy(video):
            yield from _exchange_video_rules(as_object(video), f"{path}.video")
            if not is_truthy(lookup(imp, "ext", "wopv")):
                yield issue("EQ-Imp-048", f"{path}.ext.wopv")


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    seen_ids: set[str] = set()
    for index, imp in iter_objects(lookup(bid_request, "imp")):
        path = imp_path(index)

        imp_id = imp.get("id")
        if not is_truthy(imp_id) or not isinstance(imp_id, str):
            yield issue("Core-Imp-001", f"{path}.id", imp_id)
        elif imp_id in seen_ids:
            yield issue("Core-Imp-001b", f"{path}.id", imp_id)
        else:
            seen_ids.add(imp_id)

        media_count = sum(1 for key in _MEDIA_KEYS if is_truthy(imp.get(key)))
        if media_count == 0:
            yield issue("Core-Imp-002", path)
        elif media_count > 1:
            yield issue("Core-Imp-003", path, "Multiple media types present")

        if has_key(imp, "bidfloor"):
            bidfloor = imp.get("bidfloor")
            if not is_number(bidfloor) or bidfloor < 0:
                yield issue("Core-Imp-004", f"{path}.bidfloor", bidfloor)
            if not is_truthy(imp.get("bidfloorcur")):
                yield issue("Core-Imp-005", f"{path}.bidfloorcur")

        if has_key(imp, "secure") and not _is_binary_flag(imp.get("secure")):
            yield issue("Core-Imp-006", f"{path}.secure", imp.get("secure"))


RULE_SETS: tuple[RuleSet, ...] = (
    RuleSet("impression.exchange", "eq", _exchange_rules),
    RuleSet("impression.core", "core", _core_rules),
)


def validate_impressions(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "imp_path", "validate_impressions"]
