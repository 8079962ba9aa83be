from bidlint.core.validate.rules import validate_impressions, validate_request
from tests.helpers._payloads import by_id, display_request, ids, video_app_request


def test_valid_request_has_no_request_or_impression_issues() -> None:
    payload = display_request()

    assert validate_request(payload) == ()
    assert validate_impressions(payload) == ()


def test_empty_request_reports_missing_objects() -> None:
    rule_ids = ids(validate_request({}))

    assert rule_ids == [
        "EQ-BR-001",
        "EQ-BR-002",
        "EQ-BR-003",
        "EQ-BR-004",
        "EQ-BR-005",
        "Core-BR-001",
        "Core-BR-002",
        "Core-BR-004",
        "Core-BR-009",
    ]


def test_request_field_types() -> None:
    payload = display_request(id="", imp=[], at="1", test=2, tmax=0, app={"bundle": "x"})

    issues = validate_request(payload, groups=["core"])

    assert ids(issues) == ["Core-BR-001", "Core-BR-003", "Core-BR-004", "Core-BR-006", "Core-BR-007", "Core-BR-009"]
    assert by_id(issues, "Core-BR-007")[0].severity == "warning"
    assert by_id(issues, "Core-BR-006")[0].field_path == "BidRequest"


def test_partner_is_called_must_be_true_when_present() -> None:
    assert ids(validate_request(display_request(ext={"partnerIsCalled": True}))) == []

    issues = validate_request(display_request(ext={"partnerIsCalled": "true"}))
    assert ids(issues) == ["EQ-BR-006"]
    assert issues[0].field_path == "ext.partnerIsCalled"
    assert issues[0].actual_value == "true"


def test_impression_media_and_ids() -> None:
    payload = display_request(
        imp=[
            {"id": "1", "banner": {"w": 300, "h": 250}, "video": {"mimes": ["video/mp4"]}},
            {"id": "1", "native": {"request": "{}"}},
            {"banner": None},
            "not-an-object",
        ]
    )

    issues = validate_impressions(payload, groups=["core"])

    assert [(issue.id, issue.field_path) for issue in issues] == [
        ("Core-Imp-003", "imp[0]"),
        ("Core-Imp-001b", "imp[1].id"),
        ("Core-Imp-001", "imp[2].id"),
        ("Core-Imp-002", "imp[2]"),
        ("Core-Imp-001", "imp[3].id"),
        ("Core-Imp-002", "imp[3]"),
    ]


def test_impression_floor_and_secure() -> None:
    payload = display_request(imp=[{"id": "1", "banner": {"w": 1, "h": 1}, "bidfloor": -1, "secure": 2}])

    issues = validate_impressions(payload)

    assert ids(issues) == ["EQ-Imp-036", "Core-Imp-004", "Core-Imp-005", "Core-Imp-006"]
    assert by_id(issues, "Core-Imp-004")[0].severity == "warning"


def test_exchange_video_requirements() -> None:
    payload = video_app_request(
        imp=[
            {
                "id": "1",
                "video": {
                    "mimes": ["video/webm"],
                    "minduration": 10,
                    "maxduration": 30,
                    "placement": 1,
                    "playbackmethod": [2],
                    "startdelay": 1.5,
                },
            }
        ]
    )

    issues = validate_impressions(payload, groups=["eq"])

    assert ids(issues) == [
        "EQ-Video-037",
        "EQ-Video-040",
        "EQ-Video-041",
        "EQ-Video-042",
        "EQ-Video-043",
        "EQ-Video-045",
        "EQ-Video-046",
        "EQ-Video-047",
        "EQ-Video-050",
        "EQ-Imp-048",
    ]
    assert by_id(issues, "EQ-Video-037")[0].actual_value == "20 seconds"
    assert by_id(issues, "EQ-Video-045")[0].severity == "warning"


def test_exchange_video_rules_see_explicit_null_as_defined() -> None:
    payload = video_app_request()
    payload["imp"][0]["video"]["pos"] = None

    assert "EQ-Video-042" not in ids(validate_impressions(payload))


def test_exchange_video_rules_read_non_object_video_as_empty() -> None:
    payload = video_app_request(imp=[{"id": "1", "video": 1}])

    assert ids(validate_impressions(payload, groups=["eq"])) == [
        "EQ-Video-038",
        "EQ-Video-039",
        "EQ-Video-041",
        "EQ-Video-042",
        "EQ-Video-043",
        "EQ-Video-044",
        "EQ-Video-046",
        "EQ-Video-047",
        "EQ-Video-049",
        "EQ-Imp-048",
    ]


def test_duration_gap_renders_integers_beyond_float_range() -> None:
    huge = 10**400
    payload = video_app_request()
    payload["imp"][0]["video"].update(minduration=huge, maxduration=5)

    issues = by_id(validate_impressions(payload), "EQ-Video-037")

    assert issues[0].actual_value == f"{5 - huge} seconds"


def test_duration_gap_between_float_and_huge_integer() -> None:
    huge = 10**400
    payload = video_app_request()
    video = payload["imp"][0]["video"]

    video.update(minduration=huge, maxduration=5.5)
    assert by_id(validate_impressions(payload), "EQ-Video-037")[0].actual_value == "out of range"

    video.update(minduration=5.5, maxduration=huge)
    assert by_id(validate_impressions(payload), "EQ-Video-037") == []
