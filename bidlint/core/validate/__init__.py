"""Bid request validation: report types, category rules and the orchestrator."""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AdPodDetails": ("bidlint.core.validate.report", "AdPodDetails"),
    "DetectedCharacteristics": ("bidlint.core.validate.report", "DetectedCharacteristics"),
    "ValidationIssue": ("bidlint.core.validate.report", "ValidationIssue"),
    "ValidationResult": ("bidlint.core.validate.report", "ValidationResult"),
    "validate_bid_request": ("bidlint.core.validate.engine", "validate_bid_request"),
    "validate_payload": ("bidlint.core.validate.engine", "validate_payload"),
}

__all__ = [
    "AdPodDetails",
    "DetectedCharacteristics",
    "ValidationIssue",
    "ValidationResult",
    "validate_bid_request",
    "validate_payload",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
