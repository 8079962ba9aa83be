from bidlint.core.validate.rules import cross_validate_store_bundle, validate_app
from tests.helpers._payloads import by_id, ids, video_app_request


def _app(**fields):
    app = {"id": "app-1", "publisher": {"id": "pub-1"}}
    app.update(fields)
    return app


def test_matching_ios_bundle_has_no_issues() -> None:
    payload = video_app_request(
        app=_app(storeurl="https://apps.apple.com/us/app/id123456789", bundle="123456789")
    )

    assert validate_app(payload) == ()


def test_ios_bundle_mismatch_names_both_values() -> None:
    payload = video_app_request(app=_app(storeurl="https://apps.apple.com/us/app/id123456789", bundle="999"))

    issues = validate_app(payload)

    assert ids(issues) == ["EQ-App-IOS-015"]
    mismatch = issues[0]
    assert mismatch.severity == "error"
    assert "999" in mismatch.message
    assert "123456789" in mismatch.message
    assert mismatch.actual_value == "999"
    assert mismatch.expected_value == "123456789"


def test_bundle_format_checked_against_matched_store() -> None:
    issues = cross_validate_store_bundle("https://apps.apple.com/us/app/id123456789", "com.example.app")

    assert ids(issues) == ["EQ-App-IOS-010", "EQ-App-IOS-015"]
    assert issues[0].message == "ios: bundle must match store-specific pattern"
    assert issues[0].expected_value == r"Pattern: \d+"


def test_unknown_store_url_reports_single_issue() -> None:
    issues = cross_validate_store_bundle("https://example.com/app/1", "1")

    assert ids(issues) == ["EQ-App-016"]
    assert issues[0].field_path == "app.storeurl"


def test_missing_storeurl_stops_app_checks() -> None:
    payload = video_app_request(app=_app(bundle="[BUNDLE]"))

    issues = validate_app(payload)

    assert ids(issues) == ["EQ-App-007"]


def test_missing_bundle_stops_app_checks() -> None:
    payload = video_app_request(app=_app(storeurl="https://apps.apple.com/us/app/id1", bundle=42))

    issues = validate_app(payload)

    assert ids(issues) == ["EQ-App-008"]
    assert issues[0].actual_value == 42


def test_prerequisites_do_not_halt_when_exchange_rules_disabled() -> None:
    payload = video_app_request(app={"storeurl": "https://apps.apple.com/us/app/id1"})

    issues = validate_app(payload, groups=["core"])

    assert ids(issues) == ["Core-App-001", "Core-App-005"]


def test_macros_in_app_fields() -> None:
    payload = video_app_request(
        app=_app(
            storeurl="https://play.google.com/store/apps/details?id=[BUNDLE]",
            bundle="[BUNDLE]",
            name="{APP_NAME}",
        )
    )

    issues = validate_app(payload)

    assert ids(issues) == [
        "EQ-App-016",
        "EQ-App-017",
        "EQ-App-018",
        "EQ-App-019",
        "Core-App-004",
    ]


def test_core_app_url_and_publisher() -> None:
    payload = video_app_request(app={"id": "a", "bundle": "b", "storeurl": "itunes app 1", "publisher": {}})

    issues = validate_app(payload, groups=["core"])

    assert ids(issues) == ["Core-App-003", "Core-App-006"]


def test_app_id_recommended() -> None:
    payload = video_app_request(
        app={
            "bundle": "123456789",
            "storeurl": "https://apps.apple.com/us/app/id123456789",
            "publisher": {"id": "p"},
        }
    )

    issues = validate_app(payload)

    assert ids(issues) == ["EQ-App-020"]
    assert by_id(issues, "EQ-App-020")[0].severity == "warning"


def test_no_app_object_is_not_an_app_issue() -> None:
    payload = video_app_request()
    payload.pop("app")

    assert validate_app(payload) == ()
