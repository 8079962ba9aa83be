"""Validation helpers shared by the JSON API routes."""

from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO

from fastapi import HTTPException

from ...core.api import validate, validate_object
from ...core.formatting import MalformedInputError
from ...core.validate.report import SEVERITIES, ValidationResult
from ..config import get_settings
from ..logging import validation_result_to_loggable

settings = get_settings()
logger = logging.getLogger("uvicorn.error")


def ensure_within_limit(raw: str | bytes) -> None:
    size = len(raw.encode("utf-8")) if isinstance(raw, str) else len(raw)
    if size > settings.max_payload_bytes:
        limit_mb = settings.max_payload_bytes / (1024 * 1024)
        raise HTTPException(
            status_code=413,
            detail=f"Payload of {size} bytes exceeds {limit_mb:g} MB limit.",
        )


def read_upload(upload: BinaryIO) -> bytes:
    """Read an uploaded file, stopping one byte past the size limit."""
    raw = upload.read(settings.max_payload_bytes + 1)
    if len(raw) > settings.max_payload_bytes:
        limit_mb = settings.max_payload_bytes / (1024 * 1024)
        raise HTTPException(status_code=413, detail=f"Upload exceeds {limit_mb:g} MB limit.")
    return raw


def _resolve_rule_groups(rule_groups: list[str] | None) -> list[str] | None:
    if rule_groups:
        return rule_groups
    return list(settings.rule_groups) or None


def run_validation(payload: Any, *, rule_groups: list[str] | None = None) -> ValidationResult:
    """Validate JSON text/bytes, or an already-decoded JSON value."""
    groups = _resolve_rule_groups(rule_groups)
    try:
        if isinstance(payload, (str, bytes)):
            ensure_within_limit(payload)
            result = validate(payload, rule_groups=groups)
        else:
            result = validate_object(payload, rule_groups=groups)
    except MalformedInputError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid JSON format: {exc}") from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    logger.debug(
        "Validation summary:\n%s",
        json.dumps(validation_result_to_loggable(result), ensure_ascii=False, indent=2, default=str),
    )
    return result


def serialize_result(result: ValidationResult, *, severity: str | None = None) -> dict[str, Any]:
    """Result dict plus ``summary``; ``severity`` narrows only the returned issues."""
    data = result.to_dict()
    if severity:
        normalized = severity.strip().lower()
        if normalized not in SEVERITIES:
            raise HTTPException(
                status_code=422,
                detail=f"severity must be one of: {', '.join(SEVERITIES)}",
            )
        data["issues"] = [item for item in data["issues"] if item["severity"] == normalized]
    data["summary"] = result.summary()
    return data


def payload_to_text(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, ensure_ascii=False)


__all__ = ["ensure_within_limit", "payload_to_text", "read_upload", "run_validation", "serialize_result"]
