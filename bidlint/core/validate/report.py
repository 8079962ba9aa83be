"""Validation report types for bid request checks."""


from dataclasses import dataclass, field
from typing import Any, Literal

Severity = Literal["error", "warning", "info"]
SEVERITIES: tuple[str, ...] = ("error", "warning", "info")


@dataclass(frozen=True)
class ValidationIssue:
    id: str
    severity: Severity
    field_path: str
    message: str
    actual_value: Any = None
    expected_value: str | None = None
    spec_reference: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "severity": self.severity,
            "field_path": self.field_path,
            "message": self.message,
        }
        for key in ("actual_value", "expected_value", "spec_reference"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload


@dataclass(frozen=True)
class AdPodDetails:
    slots: int
    total_duration: int | float


@dataclass(frozen=True)
class DetectedCharacteristics:
    primary_type: str = "Unknown"
    media_formats: tuple[str, ...] | None = None
    platform: str | None = None
    device_info: str | None = None
    privacy_signals: tuple[str, ...] = ()
    is_ad_pod: bool = False
    ad_pod_details: AdPodDetails | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary_type": self.primary_type,
            "media_formats": list(self.media_formats) if self.media_formats is not None else None,
            "platform": self.platform,
            "device_info": self.device_info,
            "privacy_signals": list(self.privacy_signals),
            "is_ad_pod": self.is_ad_pod,
            "ad_pod_details": (
                {
                    "slots": self.ad_pod_details.slots,
                    "total_duration": self.ad_pod_details.total_duration,
                }
                if self.ad_pod_details is not None
                else None
            ),
        }


@dataclass(frozen=True)
class ValidationResult:
    detected_characteristics: DetectedCharacteristics
    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not any(issue.severity == "error" for issue in self.issues)

    def issues_by_severity(self, severity: str) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.severity == severity)

    def summary(self) -> dict[str, int]:
        counts = {severity: 0 for severity in SEVERITIES}
        for issue in self.issues:
            counts[issue.severity] = counts.get(issue.severity, 0) + 1
        counts["total"] = len(self.issues)
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "detected_characteristics": self.detected_characteristics.to_dict(),
            "issues": [issue.to_dict() for issue in self.issues],
            "is_valid": self.is_valid,
        }


__all__ = [
    "AdPodDetails",
    "DetectedCharacteristics",
    "SEVERITIES",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
]
