"""JSON API routes: /health, /api/v1/*."""

from typing import Any

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile

from ...core.api import get_example, list_examples, list_rules
from ...core.formatting import MalformedInputError, format_json, minify_json
from ..config import get_settings
from ..helpers.validating import ensure_within_limit, payload_to_text, read_upload, run_validation, serialize_result
from ..schemas import JsonTextRequest, ValidateRequest

settings = get_settings()
router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.post("/api/v1/validate")
def validate_from_api(
    payload: ValidateRequest,
    severity: str | None = Query(None, description="Only return issues of this severity"),
) -> dict:
    result = run_validation(payload.payload, rule_groups=payload.rule_groups)
    return serialize_result(result, severity=severity)


@router.post("/api/v1/validate/file")
def validate_file_api(
    file: UploadFile = File(...),
    rule_groups: str = Form(""),
    severity: str | None = Query(None, description="Only return issues of this severity"),
) -> dict:
    raw = read_upload(file.file)
    groups = [group.strip() for group in rule_groups.split(",") if group.strip()]
    result = run_validation(raw, rule_groups=groups or None)
    data = serialize_result(result, severity=severity)
    data["filename"] = file.filename
    return data


def _reformat(payload: JsonTextRequest, *, minify: bool) -> dict:
    text = payload_to_text(payload.payload)
    ensure_within_limit(text)
    try:
        output = minify_json(text) if minify else format_json(text, indent=payload.indent)
    except MalformedInputError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid JSON format: {exc}") from exc
    return {"result": output}


@router.post("/api/v1/format")
def format_api(payload: JsonTextRequest) -> dict:
    return _reformat(payload, minify=False)


@router.post("/api/v1/minify")
def minify_api(payload: JsonTextRequest) -> dict:
    return _reformat(payload, minify=True)


@router.get("/api/v1/rules")
def rules_api(prefix: str | None = Query(None, description="Rule id prefix, e.g. EQ-Device")) -> dict:
    rules = list_rules(prefix)
    return {"count": len(rules), "rules": rules}


@router.get("/api/v1/examples")
def examples_api() -> dict:
    return {"examples": list_examples()}


@router.get("/api/v1/examples/{name}")
def example_api(name: str) -> Any:
    try:
        return get_example(name)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown example: {name}") from exc
