from bidlint.core.detect.store import detect_store_url, match_store_url
from bidlint.core.patterns import (
    COUNTRY_CONTINENTS,
    STORE_PLATFORM_KEYS,
    continent_for_country,
    find_data_center,
)


def test_detect_ios_store_url_shapes() -> None:
    short = detect_store_url("https://apps.apple.com/us/app/id123456789")
    assert short["store"] == "ios"
    assert short["platform"] == "iOS/tvOS"
    assert short["app_id"] == "123456789"

    named = detect_store_url("https://apps.apple.com/gb/app/some-game/id987654")
    assert named["store"] == "ios"
    assert named["app_id"] == "987654"


def test_detect_android_and_ctv_store_urls() -> None:
    android = detect_store_url("https://play.google.com/store/apps/details?id=com.example.news")
    assert android["store"] == "android"
    assert android["app_id"] == "com.example.news"

    roku = detect_store_url("https://channelstore.roku.com/details/12345/example-channel")
    assert roku["store"] == "roku"
    assert roku["app_id"] == "12345"

    samsung = detect_store_url("https://www.samsung.com/us/appstore/app/G19068012619")
    assert samsung["store"] == "samsung"
    assert samsung["app_id"] == "G19068012619"

    vizio = detect_store_url("https://www.vizio.com/smart-tv-apps?appName=Example&appId=vizio.example")
    assert vizio["store"] == "vizio"
    assert vizio["app_id"] == "vizio.example"

    huawei = detect_store_url("https://appgallery.huawei.com/#/app/C100123456")
    assert huawei["store"] == "huawei"
    assert huawei["app_id"] == "C100123456"


def test_detect_store_url_unknown_returns_empty_result() -> None:
    result = detect_store_url("https://example.com/apps/123")
    assert result == {"store": None, "platform": None, "app_id": None, "bundle_pattern": None}
    assert match_store_url(None) is None


def test_store_order_is_fixed() -> None:
    assert STORE_PLATFORM_KEYS[:3] == ("ios", "android", "roku")
    assert len(STORE_PLATFORM_KEYS) == 11


def test_geography_tables() -> None:
    assert continent_for_country("USA") == "Americas"
    assert continent_for_country("FRA") == "Europe"
    assert continent_for_country("usa") is None
    assert continent_for_country(None) is None
    assert len(COUNTRY_CONTINENTS) == 226

    assert find_data_center(3).continent == "Europe"
    assert find_data_center(12).name == "USE1"
    assert find_data_center(2).continent is None
    assert find_data_center(99) is None
    assert find_data_center("3") is None
