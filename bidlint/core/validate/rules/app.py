"""App object checks, including store URL / bundle consistency."""

from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...detect.store import match_store_url
from ...payload import find_macros, is_truthy, is_valid_url, lookup
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets


def _app(bid_request: Any) -> Any:
    app = lookup(bid_request, "app")
    return app if is_truthy(app) else None


def _is_present_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def cross_validate_store_bundle(store_url: str, bundle: str) -> list[ValidationIssue]:
    """Check ``bundle`` against the store whose URL shape matches ``store_url``."""
    matched = match_store_url(store_url)
    if matched is None:
        return [issue("EQ-App-016", "app.storeurl", store_url)]

    store, app_id = matched
    suffix = store.key.upper()
    issues: list[ValidationIssue] = []
    if not store.bundle_pattern.fullmatch(bundle):
        issues.append(issue(f"EQ-App-{suffix}-010", "app.bundle", bundle, platform=store.key))
    if app_id != bundle:
        issues.append(issue(f"EQ-App-{suffix}-015", "app", bundle, bundle=bundle, app_id=app_id))
    return issues


def _require_storeurl(bid_request: Any) -> Iterator[ValidationIssue]:
    app = _app(bid_request)
    if app is None:
        return
    store_url = lookup(app, "storeurl")
    if not _is_present_string(store_url):
        yield issue("EQ-App-007", "app.storeurl", store_url)


def _require_bundle(bid_request: Any) -> Iterator[ValidationIssue]:
    app = _app(bid_request)
    if app is None:
        return
    bundle = lookup(app, "bundle")
    if not _is_present_string(bundle):
        yield issue("EQ-App-008", "app.bundle", bundle)


def _exchange_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    app = _app(bid_request)
    if app is None:
        return
    store_url = lookup(app, "storeurl")
    bundle = lookup(app, "bundle")
    # Reached without the prerequisites only when those rule sets are disabled.
    if not _is_present_string(store_url) or not _is_present_string(bundle):
        return

    yield from cross_validate_store_bundle(store_url, bundle)

    if find_macros(bundle):
        yield issue("EQ-App-017", "app.bundle", bundle)
    if find_macros(store_url):
        yield issue("EQ-App-018", "app.storeurl", store_url)
    if find_macros(app):
        yield issue("EQ-App-019", "app")
    if not is_truthy(lookup(app, "id")):
        yield issue("EQ-App-020", "app.id")


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    app = _app(bid_request)
    if app is None:
        return

    bundle = lookup(app, "bundle")
    if not _is_present_string(bundle):
        yield issue("Core-App-001", "app.bundle", bundle)

    store_url = lookup(app, "storeurl")
    if not _is_present_string(store_url):
        yield issue("Core-App-002", "app.storeurl", store_url)
    else:
        if not is_valid_url(store_url):
            yield issue("Core-App-003", "app.storeurl", store_url)
        if "{" in store_url or "[" in store_url:
            yield issue("Core-App-004", "app.storeurl", store_url)

    publisher = lookup(app, "publisher")
    if not is_truthy(publisher):
        yield issue("Core-App-005", "app.publisher")
    else:
        publisher_id = lookup(publisher, "id")
        if not _is_present_string(publisher_id):
            yield issue("Core-App-006", "app.publisher.id", publisher_id)


RULE_SETS: tuple[RuleSet, ...] = (
    RuleSet("app.exchange.storeurl", "eq", _require_storeurl, halts=True),
    RuleSet("app.exchange.bundle", "eq", _require_bundle, halts=True),
    RuleSet("app.exchange", "eq", _exchange_rules),
    RuleSet("app.core", "core", _core_rules),
)


def validate_app(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = ["RULE_SETS", "cross_validate_store_bundle", "validate_app"]
