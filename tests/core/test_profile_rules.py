from bidlint.core.examples import get_example
from bidlint.core.validate.rules import validate_ctv, validate_dooh
from bidlint.core.validate.rules.ctv import aspect_ratio_mismatch, is_ctv_request
from tests.helpers._payloads import by_id, display_request, ids


def test_ctv_profile_only_applies_to_connected_tv() -> None:
    assert is_ctv_request(get_example("ctv_app")) is True
    assert is_ctv_request(get_example("video_app")) is False
    assert validate_ctv(get_example("video_app")) == ()
    assert validate_ctv(get_example("ctv_app")) == ()


def test_ctv_without_app_and_with_outstream_placement() -> None:
    payload = get_example("ctv_app")
    payload.pop("app")
    payload["imp"][0]["video"]["placement"] = 2

    issues = validate_ctv(payload)

    assert ids(issues) == ["EQ-CTV-054", "CTV-002", "CTV-005"]
    assert by_id(issues, "CTV-005")[0].field_path == "imp[0].video.placement"
    assert by_id(issues, "CTV-005")[0].actual_value == 2


def test_ctv_aspect_ratio() -> None:
    payload = get_example("ctv_app")
    payload["imp"][0]["video"].update(w=640, h=480)

    issues = validate_ctv(payload)

    assert ids(issues) == ["EQ-CTV-053"]
    assert issues[0].field_path == "imp[0].video"
    assert issues[0].actual_value == "640x480 (1.33:1)"
    assert issues[0].expected_value == "16:9 aspect ratio"


def test_aspect_ratio_tolerance() -> None:
    assert aspect_ratio_mismatch(1920, 1080) is None
    assert aspect_ratio_mismatch(1280, 760) is None
    assert aspect_ratio_mismatch(480, 640) == "480x640 (0.75:1)"
    assert aspect_ratio_mismatch(0, 1080) is None
    assert aspect_ratio_mismatch("1920", 1080) is None


def test_ctv_position_and_linearity() -> None:
    payload = get_example("ctv_app")
    video = payload["imp"][0]["video"]
    video.pop("pos")
    video["linearity"] = 2

    issues = validate_ctv(payload)

    assert ids(issues) == ["EQ-CTV-051", "CTV-006", "CTV-007"]

    video["pos"] = 1
    assert ids(validate_ctv(payload)) == ["EQ-CTV-052", "CTV-006", "CTV-007"]


def test_ctv_device_identity() -> None:
    payload = get_example("ctv_app")
    device = payload["device"]
    device.pop("ifa")
    device.pop("model")

    issues = validate_ctv(payload)

    assert ids(issues) == ["CTV-003", "CTV-004"]
    assert by_id(issues, "CTV-004")[0].actual_value == "make: Roku, model: None"

    device["ext"]["ids"] = {"rida": "b5d8f6e2-1d3c-4a8e-9f7a-2c1e0b9d8a76"}
    assert ids(validate_ctv(payload)) == ["CTV-004"]


def test_ctv_requires_video_impressions() -> None:
    payload = get_example("ctv_app")
    payload["imp"] = [{"id": "1", "banner": {"w": 1920, "h": 1080}}]

    assert ids(validate_ctv(payload)) == ["CTV-001"]


def test_dooh_profile() -> None:
    assert validate_dooh(get_example("dooh")) == ()
    assert validate_dooh(display_request()) == ()


def test_dooh_requires_venue_object() -> None:
    payload = get_example("dooh")
    payload.pop("dooh")

    issues = validate_dooh(payload)

    assert ids(issues) == ["DOOH-001"]
    assert issues[0].field_path == "BidRequest"


def test_dooh_objects_checked_at_request_and_impression_level() -> None:
    payload = get_example("dooh")
    payload["dooh"] = {"venuetypetax": 1}
    payload["imp"][0]["dooh"] = {"venuetype": ["retail"]}

    issues = validate_dooh(payload)

    assert [(issue.id, issue.field_path) for issue in issues] == [
        ("DOOH-002", "dooh.venuetype"),
        ("DOOH-003", "imp[0].dooh.venuetypetax"),
    ]
    assert issues[1].severity == "warning"


def test_aspect_ratio_beyond_float_range_is_a_mismatch() -> None:
    huge = 10**400

    assert aspect_ratio_mismatch(huge, 1) == f"{huge}x1 (out of range)"
    assert aspect_ratio_mismatch(1920.5, huge) == f"1920.5x{huge} (out of range)"

    payload = get_example("ctv_app")
    payload["imp"][0]["video"].update(w=huge, h=1)
    assert ids(validate_ctv(payload)) == ["EQ-CTV-053"]
