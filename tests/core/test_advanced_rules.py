from bidlint.core.validate.rules import validate_advanced
from tests.helpers._payloads import display_request, ids


def test_clean_request_has_no_cross_object_issues() -> None:
    assert validate_advanced(display_request()) == ()


def test_unreplaced_macros_are_listed() -> None:
    payload = display_request()
    payload["site"]["page"] = "https://www.example.com/?cb=[CACHEBUSTER]&ts={TIMESTAMP}"

    issues = validate_advanced(payload)

    assert ids(issues) == ["Advanced-001"]
    assert issues[0].actual_value == "[CACHEBUSTER], {TIMESTAMP}"
    assert issues[0].field_path == "BidRequest"


def test_numeric_arrays_are_not_macros() -> None:
    payload = display_request()
    payload["imp"][0]["banner"]["api"] = [3]
    payload["wlang"] = ["en"]

    assert validate_advanced(payload) == ()


def test_is_app_consistency() -> None:
    app_flag = display_request()
    app_flag["device"]["ext"]["is_app"] = 1
    assert ids(validate_advanced(app_flag)) == ["Advanced-002"]

    site_flag = display_request(app={"bundle": "x"})
    site_flag.pop("site")
    assert ids(validate_advanced(site_flag)) == ["Advanced-003"]


def test_eids_must_be_a_list() -> None:
    issues = validate_advanced(display_request(user={"eids": {"source": "x"}}))

    assert ids(issues) == ["Advanced-004"]
    assert issues[0].severity == "warning"


def test_eid_and_uid_shape() -> None:
    payload = display_request(
        user={
            "eids": [
                {"source": "id5-sync.com"},
                {"source": "liveramp.com", "uids": [{"id": "XY1"}, {"atype": 3}]},
                "eid",
            ]
        }
    )

    issues = validate_advanced(payload)

    assert [(issue.id, issue.field_path) for issue in issues] == [
        ("Advanced-005", "user.eids[0]"),
        ("Advanced-006", "user.eids[1].uids[1]"),
        ("Advanced-005", "user.eids[2]"),
    ]
