"""Video object checks for every impression carrying one."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...payload import format_number, has_key, is_integer, is_non_empty_list, is_truthy, iter_objects, lookup
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets
from .impression import imp_path


def iter_videos(bid_request: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(path, video)`` for each impression with a video object."""
    for index, imp in iter_objects(lookup(bid_request, "imp")):
        video = imp.get("video")
        if is_truthy(video):
            yield f"{imp_path(index)}.video", video


def _is_positive_integer(value: Any) -> bool:
    return is_integer(value) and value > 0


def _check_video(video: Any, path: str) -> Iterator[ValidationIssue]:
    mimes = lookup(video, "mimes")
    if not is_non_empty_list(mimes):
        yield issue("Video-V-001", f"{path}.mimes", mimes)
    elif not all(isinstance(mime, str) for mime in mimes):
        yield issue("Video-V-002", f"{path}.mimes", mimes)
    elif "video/mp4" not in mimes:
        yield issue("Video-V-003", f"{path}.mimes", mimes)

    minduration = lookup(video, "minduration")
    maxduration = lookup(video, "maxduration")
    if not is_integer(minduration):
        yield issue("Video-V-004", f"{path}.minduration", minduration)
    if not is_integer(maxduration):
        yield issue("Video-V-005", f"{path}.maxduration", maxduration)
    if (
        is_integer(minduration)
        and is_integer(maxduration)
        and is_truthy(minduration)
        and is_truthy(maxduration)
        and maxduration < minduration
    ):
        yield issue("Video-V-006", path, f"min: {format_number(minduration)}, max: {format_number(maxduration)}")

    protocols = lookup(video, "protocols")
    if not is_non_empty_list(protocols):
        yield issue("Video-V-007", f"{path}.protocols", protocols)

    for key, rule_id in (("w", "Video-V-008"), ("h", "Video-V-009")):
        if not _is_positive_integer(lookup(video, key)):
            yield issue(rule_id, f"{path}.{key}", lookup(video, key))

    for key, rule_id in (("linearity", "Video-V-010"), ("placement", "Video-V-011"), ("startdelay", "Video-V-012")):
        if not has_key(video, key) or not is_integer(lookup(video, key)):
            yield issue(rule_id, f"{path}.{key}", lookup(video, key))


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    for path, video in iter_videos(bid_request):
        yield from _check_video(video, path)


RULE_SETS: tuple[RuleSet, ...] = (RuleSet("video.core", "core", _core_rules),)


def validate_video(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "iter_videos", "validate_video"]
