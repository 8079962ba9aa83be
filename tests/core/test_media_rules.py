import json

from bidlint.core.validate.rules import validate_banner, validate_native, validate_video
from tests.helpers._payloads import by_id, display_request, ids, video_app_request


def _native_imp(request):
    return [{"id": "1", "native": {"request": request}}]


def test_valid_video_has_no_issues() -> None:
    assert validate_video(video_app_request()) == ()


def test_video_missing_everything() -> None:
    payload = video_app_request(imp=[{"id": "1", "video": {"mimes": []}}])

    assert ids(validate_video(payload)) == [
        "Video-V-001",
        "Video-V-004",
        "Video-V-005",
        "Video-V-007",
        "Video-V-008",
        "Video-V-009",
        "Video-V-010",
        "Video-V-011",
        "Video-V-012",
    ]


def test_video_mime_checks_are_exclusive() -> None:
    payload = video_app_request()
    payload["imp"][0]["video"]["mimes"] = ["video/mp4", 3]
    assert ids(validate_video(payload)) == ["Video-V-002"]

    payload["imp"][0]["video"]["mimes"] = ["video/webm"]
    issues = validate_video(payload)
    assert ids(issues) == ["Video-V-003"]
    assert issues[0].severity == "warning"


def test_video_duration_order() -> None:
    payload = video_app_request()
    payload["imp"][0]["video"].update(minduration=30, maxduration=15)

    issues = validate_video(payload)

    assert ids(issues) == ["Video-V-006"]
    assert issues[0].field_path == "imp[0].video"
    assert issues[0].actual_value == "min: 30, max: 15"


def test_video_size_must_be_positive_integers() -> None:
    payload = video_app_request()
    payload["imp"][0]["video"].update(w=0, h=720.5)

    assert ids(validate_video(payload)) == ["Video-V-008", "Video-V-009"]


def test_native_request_must_be_json_string() -> None:
    missing = display_request(imp=[{"id": "1", "native": {"ver": "1.2"}}])
    assert ids(validate_native(missing)) == ["Native-N-001"]

    broken = display_request(imp=_native_imp("{not json"))
    issues = validate_native(broken)
    assert ids(issues) == ["Native-N-006"]
    assert issues[0].field_path == "imp[0].native.request"
    assert issues[0].actual_value == "{not json"


def test_native_request_contents() -> None:
    request = json.dumps(
        {
            "assets": [
                {"id": 1, "title": {"len": 25}},
                {"img": {"type": 3}},
                {"id": 3},
                {"id": 4, "title": {"len": 25}, "data": {"type": 2}},
            ]
        }
    )

    issues = validate_native(display_request(imp=_native_imp(request)))

    assert [(issue.id, issue.field_path) for issue in issues] == [
        ("Native-N-002", "imp[0].native.request.ver"),
        ("Native-N-004", "imp[0].native.request.assets[1].id"),
        ("Native-N-005", "imp[0].native.request.assets[2]"),
        ("Native-N-007", "imp[0].native.request.assets[3]"),
    ]
    assert by_id(issues, "Native-N-007")[0].actual_value == "title, data"


def test_native_request_needs_assets() -> None:
    issues = validate_native(display_request(imp=_native_imp('{"ver": "1.2", "assets": []}')))

    assert ids(issues) == ["Native-N-003"]


def test_native_request_non_object_reads_as_empty() -> None:
    issues = validate_native(display_request(imp=_native_imp("[1, 2]")))

    assert ids(issues) == ["Native-N-002", "Native-N-003"]


def test_banner_size_sources() -> None:
    assert validate_banner(display_request()) == ()

    only_format = display_request(imp=[{"id": "1", "banner": {"format": [{"w": 728, "h": 90}]}}])
    assert validate_banner(only_format) == ()

    no_size = display_request(imp=[{"id": "1", "banner": {"pos": 1}}])
    issues = validate_banner(no_size)
    assert ids(issues) == ["Banner-B-001"]
    assert issues[0].field_path == "imp[0].banner"


def test_banner_format_entries_need_width_and_height() -> None:
    payload = display_request(imp=[{"id": "1", "banner": {"format": [{"w": 300}, {"w": 300, "h": 250}, 5]}}])

    issues = validate_banner(payload)

    assert ids(issues) == ["Banner-B-002", "Banner-B-002"]
    assert [issue.field_path for issue in issues] == ["imp[0].banner.format[0]", "imp[0].banner.format[2]"]


def test_banner_empty_format_list_is_not_a_size() -> None:
    payload = display_request(imp=[{"id": "1", "banner": {"format": []}}])

    assert ids(validate_banner(payload)) == ["Banner-B-001"]


def test_video_duration_order_with_integers_beyond_float_range() -> None:
    huge = 10**400
    payload = video_app_request()
    payload["imp"][0]["video"].update(minduration=huge, maxduration=5)

    issues = validate_video(payload)

    assert ids(issues) == ["Video-V-006"]
    assert issues[0].actual_value == f"min: {huge}, max: 5"


def test_deeply_nested_native_request_is_malformed() -> None:
    request = "[" * 100_000 + "]" * 100_000

    issues = validate_native(display_request(imp=_native_imp(request)))

    assert ids(issues) == ["Native-N-006"]
