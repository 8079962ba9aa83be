"""App store URL detection."""

from ..patterns import STORE_URL_PATTERNS, StorePattern


def match_store_url(store_url: str) -> tuple[StorePattern, str] | None:
    """Return the first store whose URL shape matches, with the captured app id."""
    if not isinstance(store_url, str):
        return None
    for store in STORE_URL_PATTERNS:
        for pattern in store.url_patterns:
            match = pattern.fullmatch(store_url)
            if match:
                return store, match.group("app_id")
    return None


def detect_store_url(store_url: str) -> dict:
    """
    Returns: {'store', 'platform', 'app_id', 'bundle_pattern'}
    """
    res = {"store": None, "platform": None, "app_id": None, "bundle_pattern": None}
    matched = match_store_url(store_url)
    if matched is None:
        return res
    store, app_id = matched
    res.update(
        store=store.key,
        platform=store.platform,
        app_id=app_id,
        bundle_pattern=store.bundle_pattern.pattern,
    )
    return res


__all__ = ["detect_store_url", "match_store_url"]
