import json

import pytest

from bidlint.core import MalformedInputError, validate_bid_request
from bidlint.core.examples import get_example, list_examples
from bidlint.core.validate.engine import validate_payload
from bidlint.core.validate.report import ValidationResult
from tests.helpers._payloads import display_request, ids


@pytest.mark.parametrize("name", [name for name in list_examples() if name != "gdpr_missing_consent"])
def test_bundled_examples_validate_cleanly(name: str) -> None:
    result = validate_payload(get_example(name))

    assert result.issues == ()
    assert result.is_valid is True


def test_gdpr_example_reports_missing_consent() -> None:
    result = validate_payload(get_example("gdpr_missing_consent"))

    assert ids(result.issues) == ["Core-Regs-003"]
    assert result.is_valid is False
    assert result.detected_characteristics.privacy_signals == ("GDPR Applicable",)


def test_empty_object_reports_missing_top_level_fields() -> None:
    result = validate_bid_request("{}")

    found = set(ids(result.issues))
    assert {
        "EQ-BR-001",
        "EQ-BR-002",
        "EQ-BR-003",
        "EQ-BR-004",
        "EQ-BR-005",
        "Core-BR-001",
        "Core-BR-002",
        "Core-BR-004",
    } <= found
    assert result.is_valid is False
    assert result.detected_characteristics.primary_type == "Unknown"


@pytest.mark.parametrize("raw", ["", "{", "not json", '{"id": NaN}', b"\xff\xfe"])
def test_malformed_input_raises_before_any_rule(raw) -> None:
    with pytest.raises(MalformedInputError):
        validate_bid_request(raw)


def test_non_object_json_is_validated_not_rejected() -> None:
    result = validate_bid_request("[]")

    assert result.is_valid is False
    assert "Core-BR-001" in ids(result.issues)


def test_bytes_with_bom_are_accepted() -> None:
    raw = b"\xef\xbb\xbf" + json.dumps(display_request()).encode("utf-8")

    assert validate_bid_request(raw).is_valid is True


def test_validation_is_deterministic() -> None:
    raw = json.dumps({"id": "", "imp": [{"id": "1"}], "device": {"ip": "10.0.0.0"}})

    first = validate_bid_request(raw)
    second = validate_bid_request(raw)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_is_valid_ignores_warnings() -> None:
    payload = display_request(user={"ext": {}, "eids": {"source": "x"}})

    result = validate_payload(payload)

    assert result.issues
    assert {issue.severity for issue in result.issues} == {"warning"}
    assert result.is_valid is True
    assert result.summary() == {"error": 0, "warning": 3, "info": 0, "total": 3}


def test_rule_groups_filter_issues() -> None:
    raw = json.dumps({})

    exchange = validate_bid_request(raw, groups=["eq"])
    core = validate_bid_request(raw, groups="core")

    assert exchange.issues
    assert all(issue.id.startswith("EQ-") for issue in exchange.issues)
    assert core.issues
    assert not any(issue.id.startswith("EQ-") for issue in core.issues)
    assert len(exchange.issues) + len(core.issues) == len(validate_bid_request(raw).issues)


def test_unknown_rule_group_is_rejected_before_parsing() -> None:
    with pytest.raises(ValueError, match="Unknown rule group"):
        validate_bid_request("{", groups=["prebid"])


def test_issue_order_follows_category_order() -> None:
    payload = display_request()
    payload["id"] = ""
    payload["imp"][0]["secure"] = 3
    payload["device"]["ua"] = None
    payload["site"]["page"] = "https://www.example.com/[PAGE]"

    result = validate_payload(payload)

    assert ids(result.issues) == [
        "Core-BR-001",
        "EQ-Imp-036",
        "Core-Imp-006",
        "EQ-Device-034",
        "Core-Device-001",
        "Advanced-001",
    ]


def test_result_dict_shape() -> None:
    payload = display_request()
    payload["tmax"] = 0

    data = validate_payload(payload).to_dict()

    assert data["is_valid"] is True
    assert data["issues"] == [
        {
            "id": "Core-BR-009",
            "severity": "warning",
            "field_path": "tmax",
            "message": "tmax (timeout) should be present and greater than 0",
            "actual_value": 0,
            "expected_value": "Positive integer (milliseconds)",
            "spec_reference": "OpenRTB 2.6 §3.2.1",
        }
    ]
    assert data["detected_characteristics"]["platform"] == "Website"
    assert data["detected_characteristics"]["primary_type"] == "Display"


_HUGE = "1" + "0" * 400


def _with_imp(imp: str, **extra: str) -> str:
    fields = [f'"{key}": {value}' for key, value in extra.items()]
    return "{" + ", ".join([f'"imp": [{imp}]', *fields]) + "}"


@pytest.mark.parametrize(
    "raw",
    [
        _with_imp(f'{{"id": "1", "video": {{"minduration": {_HUGE}, "maxduration": 5}}}}'),
        _with_imp(f'{{"id": "1", "video": {{"minduration": 5.5, "maxduration": {_HUGE}}}}}'),
        _with_imp(
            f'{{"id": "1", "video": {{"w": {_HUGE}, "h": 1, "pos": 7}}}}',
            device='{"devicetype": 5}',
        ),
        _with_imp(
            f'{{"id": "1", "video": {{"podid": "p", "poddur": {_HUGE}}}}}, '
            '{"id": "2", "video": {"podid": "p", "poddur": 1.5}}'
        ),
        _with_imp('{"id": "1", "banner": {"w": 300, "h": 250}}', tmax=_HUGE, at=f"-{_HUGE}"),
        _with_imp('{"id": "1", "banner": {"w": 300, "h": 250}}', ext="[" * 5000 + "]" * 5000),
        _with_imp('{"id": "1", "native": {"request": "' + "[" * 5000 + "]" * 5000 + '"}}'),
        _with_imp('{"id": "1", "video": 1}'),
        _with_imp('{"id": "1", "native": true}'),
        _with_imp('{"id": "1", "banner": "300x250"}'),
        _with_imp('1, "imp", null', device='"ua"', user="[1]", source="2", regs='"x"'),
        '{"site": [], "app": 0.5, "dooh": "d", "imp": {}}',
        "42",
        '"bid"',
        "null",
    ],
)
def test_valid_json_never_raises_beyond_malformed_input(raw: str) -> None:
    try:
        result = validate_bid_request(raw)
    except MalformedInputError:
        return

    assert isinstance(result, ValidationResult)
    json.dumps(result.to_dict())


def test_excessive_nesting_is_malformed_input() -> None:
    raw = _with_imp('{"id": "1", "banner": {"w": 300, "h": 250}}', ext="[" * 100_000 + "]" * 100_000)

    with pytest.raises(MalformedInputError):
        validate_bid_request(raw)


def test_deep_objects_are_validated_without_raising() -> None:
    payload = display_request()
    nested = "[MACRO]"
    for _ in range(5000):
        nested = {"child": nested}
    payload["ext"] = nested

    assert ids(validate_payload(payload).issues) == ["Advanced-001"]


def test_core_group_alone_does_not_require_site_or_app() -> None:
    core = validate_bid_request("{}", groups=["core"])
    exchange = validate_bid_request("{}", groups=["eq"])

    assert "EQ-BR-001" not in ids(core.issues)
    assert "EQ-BR-001" in ids(exchange.issues)
