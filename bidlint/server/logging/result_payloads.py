from typing import Any

from ...core.validate.report import ValidationResult
from ..config import get_settings

_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def validation_result_to_loggable(
    result: ValidationResult,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    if level == "extrahigh":
        return result.to_dict()

    summary: dict[str, Any] = {
        "is_valid": result.is_valid,
        "counts": result.summary(),
    }
    if level == "low":
        return summary

    characteristics = result.detected_characteristics
    summary["primary_type"] = characteristics.primary_type
    summary["platform"] = characteristics.platform
    if level == "medium":
        summary["issue_ids"] = [issue.id for issue in result.issues]
        return summary

    issues = []
    for issue in result.issues:
        data = issue.to_dict()
        data.pop("actual_value", None)
        issues.append(data)
    summary["issues"] = issues
    return summary
