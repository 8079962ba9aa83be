"""Summarise what kind of bid request a payload is."""

from typing import Any

from ..payload import is_number, is_truthy, iter_objects, lookup, number_equals, ordered_unique
from ..validate.report import AdPodDetails, DetectedCharacteristics

# Checked in this order for every impression.
_FORMAT_LABELS: tuple[tuple[str, str], ...] = (
    ("video", "Video"),
    ("native", "Native"),
    ("banner", "Display"),
    ("audio", "Audio"),
)

_DEVICE_TYPE_LABELS: dict[int, str] = {
    1: "Mobile/Tablet",
    2: "Desktop",
    5: "Connected TV",
    6: "Digital Out-of-Home",
    7: "Phone",
}


def _device_info(device: Any) -> str | None:
    if not is_truthy(device):
        return None
    devicetype = lookup(device, "devicetype")
    label = next(
        (text for code, text in _DEVICE_TYPE_LABELS.items() if number_equals(devicetype, code)),
        "",
    )
    os_name = lookup(device, "os")
    if is_truthy(os_name):
        label = f"{label} ({os_name})".strip()
    return label or None


def _privacy_signals(bid_request: Any) -> tuple[str, ...]:
    signals: list[str] = []
    if number_equals(lookup(bid_request, "regs", "ext", "gdpr"), 1):
        signals.append("GDPR Applicable")
    if is_truthy(lookup(bid_request, "user", "ext", "consent")):
        signals.append("TCF String Present")
    if is_truthy(lookup(bid_request, "regs", "ext", "us_privacy")):
        signals.append("CCPA String Present")
    if is_truthy(lookup(bid_request, "regs", "gpp")):
        signals.append("GPP String Present")
    return tuple(signals)


def detect_characteristics(bid_request: Any) -> DetectedCharacteristics:
    imps = lookup(bid_request, "imp")
    primary_type = "Unknown"
    media_formats: tuple[str, ...] | None = None

    if isinstance(imps, list):
        labels: list[str] = []
        mimes: list[Any] = []
        for _, imp in iter_objects(imps):
            for key, label in _FORMAT_LABELS:
                if is_truthy(imp.get(key)):
                    labels.append(label)
            video_mimes = lookup(imp, "video", "mimes")
            if isinstance(video_mimes, list):
                mimes.extend(video_mimes)
        unique_labels = ordered_unique(labels)
        if unique_labels:
            primary_type = ", ".join(unique_labels)
        media_formats = ordered_unique(mimes)

    if is_truthy(lookup(bid_request, "app")):
        platform = "Mobile App"
    elif is_truthy(lookup(bid_request, "site")):
        platform = "Website"
    else:
        platform = None

    is_ad_pod = False
    ad_pod_details = None
    pod_videos = [imp["video"] for _, imp in iter_objects(imps) if is_truthy(lookup(imp, "video", "podid"))]
    if pod_videos:
        is_ad_pod = True
        durations = [lookup(imp, "video", "poddur") for _, imp in iter_objects(imps)]
        durations = [poddur for poddur in durations if is_truthy(poddur) and is_number(poddur)]
        whole = sum(poddur for poddur in durations if isinstance(poddur, int))
        fractional = sum(poddur for poddur in durations if isinstance(poddur, float))
        try:
            total_duration = whole + fractional if fractional else whole
        except OverflowError:
            # integer beyond float range
            total_duration = whole
        ad_pod_details = AdPodDetails(slots=len(pod_videos), total_duration=total_duration)

    return DetectedCharacteristics(
        primary_type=primary_type,
        media_formats=media_formats,
        platform=platform,
        device_info=_device_info(lookup(bid_request, "device")),
        privacy_signals=_privacy_signals(bid_request),
        is_ad_pod=is_ad_pod,
        ad_pod_details=ad_pod_details,
    )


__all__ = ["detect_characteristics"]
