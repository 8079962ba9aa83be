"""Device object checks: identity, network address, geo and IFA."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterator
from typing import Any

from ...catalog import issue
from ...patterns import continent_for_country, find_data_center
from ...payload import has_key, is_integer, is_truthy, lookup, number_equals
from ..report import ValidationIssue
from .base import RuleSet, run_rule_sets

ZERO_IFA = "00000000-0000-0000-0000-000000000000"


def is_valid_ipv4(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        return isinstance(ipaddress.ip_address(value), ipaddress.IPv4Address)
    except ValueError:
        return False


def is_valid_ipv6(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        return isinstance(ipaddress.ip_address(value), ipaddress.IPv6Address)
    except ValueError:
        return False


def is_truncated_ip(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return value.endswith(".0") or "xxx" in value or "***" in value


def is_truncated_ipv6(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return "::" in value and len(value) < 15


def _device(bid_request: Any) -> Any:
    device = lookup(bid_request, "device")
    return device if is_truthy(device) else None


def _country_datacenter_mismatch(country: Any, datacenter_id: Any) -> ValidationIssue | None:
    if not is_truthy(datacenter_id):
        return None
    country_continent = continent_for_country(country)
    if country_continent is None:
        return None
    datacenter = find_data_center(datacenter_id)
    if datacenter is None or not datacenter.continent:
        return None
    if datacenter.continent == country_continent:
        return None
    return issue(
        "EQ-Device-024",
        "device.geo.country",
        f"{country} ({country_continent}) vs Datacenter: {datacenter.name} ({datacenter.continent})",
    )


def _exchange_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    device = _device(bid_request)
    if device is None:
        return
    truncated_flag = lookup(device, "ext", "truncated_ip")
    truncated_flag_set = number_equals(truncated_flag, 1)

    geo = lookup(device, "geo")
    if not is_truthy(geo):
        yield issue("EQ-Device-022", "device.geo")
    else:
        country = lookup(geo, "country")
        if not is_truthy(country):
            yield issue("EQ-Device-023", "device.geo.country")
        else:
            mismatch = _country_datacenter_mismatch(country, lookup(bid_request, "ext", "auctionDatacenterId"))
            if mismatch is not None:
                yield mismatch

    if not is_truthy(lookup(device, "make")):
        yield issue("EQ-Device-025", "device.make")
    if not is_truthy(lookup(device, "model")):
        yield issue("EQ-Device-026", "device.model")

    ifa = lookup(device, "ifa")
    if not is_truthy(ifa):
        yield issue("EQ-Device-027", "device.ifa")
    elif ifa == ZERO_IFA and not truncated_flag_set:
        yield issue("EQ-Device-032", "device.ext.truncated_ip", truncated_flag)

    ip = lookup(device, "ip")
    ipv6 = lookup(device, "ipv6")
    if not is_truthy(ip) and not is_truthy(ipv6):
        yield issue("EQ-Device-028", "device")
    if is_truthy(ip) and not is_valid_ipv4(ip):
        yield issue("EQ-Device-029", "device.ip", ip)
    if is_truthy(ip) and is_truncated_ip(ip) and not truncated_flag_set:
        yield issue("EQ-Device-030", "device.ext.truncated_ip", truncated_flag)
    if is_truthy(ipv6) and is_truncated_ipv6(ipv6) and not truncated_flag_set:
        yield issue("EQ-Device-031", "device.ext.truncated_ip", truncated_flag)

    if not has_key(device, "devicetype"):
        yield issue("EQ-Device-033", "device.devicetype")
    if not is_truthy(lookup(device, "ua")):
        yield issue("EQ-Device-034", "device.ua")

    if number_equals(lookup(device, "ext", "is_app"), 1) and not is_truthy(lookup(bid_request, "app")):
        yield issue("EQ-Device-035", "device.ext.is_app")


def _core_rules(bid_request: Any) -> Iterator[ValidationIssue]:
    device = _device(bid_request)
    if device is None:
        return

    ua = lookup(device, "ua")
    if not isinstance(ua, str) or ua == "":
        yield issue("Core-Device-001", "device.ua", ua)

    ip = lookup(device, "ip")
    ipv6 = lookup(device, "ipv6")
    if not is_truthy(ip) and not is_truthy(ipv6):
        yield issue("Core-Device-002", "device")
    if is_truthy(ip) and not is_valid_ipv4(ip):
        yield issue("Core-Device-003", "device.ip", ip)
    if is_truthy(ipv6) and not is_valid_ipv6(ipv6):
        yield issue("Core-Device-004", "device.ipv6", ipv6)

    devicetype = lookup(device, "devicetype")
    if not is_integer(devicetype) or not 1 <= devicetype <= 7:
        yield issue("Core-Device-005", "device.devicetype", devicetype)

    geo = lookup(device, "geo")
    if not is_truthy(geo):
        yield issue("Core-Device-006", "device.geo")
    else:
        country = lookup(geo, "country")
        if not isinstance(country, str) or country == "":
            yield issue("Core-Device-007", "device.geo.country", country)
        elif len(country) != 3:
            yield issue("Core-Device-008", "device.geo.country", country)

    ifa = lookup(device, "ifa")
    if not number_equals(lookup(device, "lmt"), 1) and (not is_truthy(ifa) or ifa == ZERO_IFA):
        yield issue("Core-Device-009", "device.ifa", ifa)


RULE_SETS: tuple[RuleSet, ...] = (
    RuleSet("device.exchange", "eq", _exchange_rules),
    RuleSet("device.core", "core", _core_rules),
)


def validate_device(bid_request: Any, *, groups=None) -> tuple[ValidationIssue, ...]:
    return run_rule_sets(RULE_SETS, bid_request, groups)


__all__ = [
    "RULE_SETS",
    "ZERO_IFA",
    "is_truncated_ip",
    "is_truncated_ipv6",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "validate_device",
]
