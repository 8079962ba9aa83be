"""Rule catalog: every rule id maps to one severity and message template.

Ids are stable and grouped by prefix (``Core-BR-*``, ``EQ-Device-*``,
``Video-V-*`` ...). Ids starting with ``EQ-`` form the exchange rule group,
every other id belongs to the core group.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable

from .patterns import STORE_URL_PATTERNS
from .validate.report import Severity, ValidationIssue

RULE_GROUPS: tuple[str, ...] = ("eq", "core")

_REF_REQUEST = "OpenRTB 2.6 §3.2.1"
_REF_SOURCE = "OpenRTB 2.6 §3.2.2"
_REF_REGS = "OpenRTB 2.6 §3.2.3"
_REF_IMP = "OpenRTB 2.6 §3.2.4"
_REF_BANNER = "OpenRTB 2.6 §3.2.6"
_REF_VIDEO = "OpenRTB 2.6 §3.2.7"
_REF_NATIVE = "OpenRTB Native 1.2 §4"
_REF_FORMAT = "OpenRTB 2.6 §3.2.10"
_REF_SITE = "OpenRTB 2.6 §3.2.13"
_REF_APP = "OpenRTB 2.6 §3.2.14"
_REF_PUBLISHER = "OpenRTB 2.6 §3.2.15"
_REF_DEVICE = "OpenRTB 2.6 §3.2.18"
_REF_GEO = "OpenRTB 2.6 §3.2.19"
_REF_USER = "OpenRTB 2.6 §3.2.20"
_REF_SCHAIN = "OpenRTB 2.6 §3.2.25"
_REF_SCHAIN_NODE = "OpenRTB 2.6 §3.2.26"
_REF_EID = "OpenRTB 2.6 §3.2.27"
_REF_UID = "OpenRTB 2.6 §3.2.28"
_REF_DOOH = "OpenRTB 2.6 DOOH object"


@dataclass(frozen=True)
class Rule:
    id: str
    severity: Severity
    message: str
    expected_value: str | None = None
    reference: str | None = None

    @property
    def group(self) -> str:
        return rule_group(self.id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "severity": self.severity,
            "message": self.message,
            "expected_value": self.expected_value,
            "reference": self.reference,
            "group": self.group,
        }


def rule_group(rule_id: str) -> str:
    return "eq" if rule_id.startswith("EQ-") else "core"


def normalize_rule_groups(groups: Iterable[str] | str | None) -> frozenset[str]:
    """Resolve a group selection; ``None`` or an empty selection enables every group."""
    if groups is None:
        return frozenset(RULE_GROUPS)
    if isinstance(groups, str):
        groups = groups.split(",")
    normalized = {str(group).strip().lower() for group in groups if str(group).strip()}
    if not normalized:
        return frozenset(RULE_GROUPS)
    unknown = sorted(normalized.difference(RULE_GROUPS))
    if unknown:
        raise ValueError(
            f"Unknown rule group(s): {', '.join(unknown)}. Expected any of: {', '.join(RULE_GROUPS)}"
        )
    return frozenset(normalized)


_RULES: list[Rule] = [
    # Request
    Rule("EQ-BR-001", "error", "BidRequest must contain either a site or an app object", "Either site or app object", _REF_REQUEST),
    Rule("EQ-BR-002", "error", "BidRequest must contain a device object", "Device object", _REF_REQUEST),
    Rule("EQ-BR-003", "error", "BidRequest must contain a non-empty impression array", "Non-empty array of impressions", _REF_REQUEST),
    Rule("EQ-BR-004", "error", "BidRequest must contain a source object", "Source object", _REF_REQUEST),
    Rule("EQ-BR-005", "error", "BidRequest must contain a user object", "User object", _REF_REQUEST),
    Rule("EQ-BR-006", "error", "partnerIsCalled must be true when present", "true", _REF_REQUEST),
    Rule("Core-BR-001", "error", "BidRequest.id must be present and be a non-empty string", "Non-empty string", _REF_REQUEST),
    Rule("Core-BR-002", "error", "BidRequest.imp array must be present", "Array of impression objects", _REF_REQUEST),
    Rule("Core-BR-003", "error", "BidRequest.imp must be a non-empty array", "Non-empty array", _REF_REQUEST),
    Rule("Core-BR-004", "error", "BidRequest.at (auction type) must be present and be an integer", "Integer (typically 1 or 2)", _REF_REQUEST),
    Rule("Core-BR-006", "error", "BidRequest must not contain both site and app objects", "Either site or app, not both", _REF_REQUEST),
    Rule("Core-BR-007", "warning", "test should be 0 (production) or 1 (test)", "0 or 1", _REF_REQUEST),
    Rule("Core-BR-009", "warning", "tmax (timeout) should be present and greater than 0", "Positive integer (milliseconds)", _REF_REQUEST),
    # Impression
    Rule("EQ-Imp-036", "error", "imp.secure must be either 0 or 1", "0 or 1", _REF_IMP),
    Rule("EQ-Imp-048", "warning", "imp.ext.wopv is recommended for video impressions", "WOPV (Won on Programmatic Video) flag", _REF_IMP),
    Rule("Core-Imp-001", "error", "Each impression must contain a unique id (string)", "Non-empty string", _REF_IMP),
    Rule("Core-Imp-001b", "error", "Impression id must be unique within the request", "Unique string", _REF_IMP),
    Rule("Core-Imp-002", "error", "Each impression must contain either video, native, or banner object", "One of: video, native, or banner", _REF_IMP),
    Rule("Core-Imp-003", "error", "Each impression must contain only one of video, native, or banner", "Only one of: video, native, or banner", _REF_IMP),
    Rule("Core-Imp-004", "warning", "bidfloor must be a non-negative number", "Non-negative number", _REF_IMP),
    Rule("Core-Imp-005", "error", "bidfloorcur must be present when bidfloor is specified", 'Currency code (e.g., "USD")', _REF_IMP),
    Rule("Core-Imp-006", "error", "secure must be 0 or 1", "0 or 1", _REF_IMP),
    # Video, exchange generation
    Rule("EQ-Video-037", "error", "imp.video.maxduration - imp.video.minduration must be greater than 30 seconds", "Greater than 30 seconds", _REF_VIDEO),
    Rule("EQ-Video-038", "error", "imp.video.playbackmethod must be defined", "Array of playback method integers", _REF_VIDEO),
    Rule("EQ-Video-039", "error", "imp.video.placement must be defined", "Integer placement type", _REF_VIDEO),
    Rule("EQ-Video-040", "error", "imp.video.playbackmethod must include 1 (Autoplay Sounds On) for In-Stream placement", "Array including 1", _REF_VIDEO),
    Rule("EQ-Video-041", "error", "imp.video.linearity must be defined", "Integer linearity type", _REF_VIDEO),
    Rule("EQ-Video-042", "error", "imp.video.pos (position) must be set", "Integer position value", _REF_VIDEO),
    Rule("EQ-Video-043", "error", "imp.video.protocols must be defined", "Array of protocol integers", _REF_VIDEO),
    Rule("EQ-Video-044", "error", "imp.video.mimes must be defined as an array", "Array of MIME type strings", _REF_VIDEO),
    Rule("EQ-Video-045", "warning", "video/mp4 mime is not set. Usually video bid requests contain video/mp4 mimes", 'Array including "video/mp4"', _REF_VIDEO),
    Rule("EQ-Video-046", "error", "imp.video.w (width) must be defined", "Integer width", _REF_VIDEO),
    Rule("EQ-Video-047", "error", "imp.video.h (height) must be defined", "Integer height", _REF_VIDEO),
    Rule("EQ-Video-049", "warning", "imp.video.startdelay is recommended", "Integer start delay", _REF_VIDEO),
    Rule("EQ-Video-050", "error", "imp.video.startdelay must be an integer (positive, negative or zero)", "Integer value", _REF_VIDEO),
    # Video
    Rule("Video-V-001", "error", "video.mimes must be present and be a non-empty array of strings", 'Array of MIME types (e.g., ["video/mp4"])', _REF_VIDEO),
    Rule("Video-V-002", "error", "video.mimes must contain only strings", "Array of string MIME types", _REF_VIDEO),
    Rule("Video-V-003", "warning", 'video.mimes should typically include "video/mp4"', 'Array including "video/mp4"', _REF_VIDEO),
    Rule("Video-V-004", "error", "video.minduration must be present and be an integer", "Integer (seconds)", _REF_VIDEO),
    Rule("Video-V-005", "error", "video.maxduration must be present and be an integer", "Integer (seconds)", _REF_VIDEO),
    Rule("Video-V-006", "error", "video.maxduration must be greater than or equal to minduration", "maxduration >= minduration", _REF_VIDEO),
    Rule("Video-V-007", "error", "video.protocols must be present and be a non-empty array of integers", "Array of protocol integers", _REF_VIDEO),
    Rule("Video-V-008", "error", "video.w (width) must be present and be a positive integer", "Positive integer", _REF_VIDEO),
    Rule("Video-V-009", "error", "video.h (height) must be present and be a positive integer", "Positive integer", _REF_VIDEO),
    Rule("Video-V-010", "error", "video.linearity must be present and be an integer", "Integer (1=linear, 2=non-linear)", _REF_VIDEO),
    Rule("Video-V-011", "error", "video.placement must be present and be an integer", "Integer placement type", _REF_VIDEO),
    Rule("Video-V-012", "error", "video.startdelay must be an integer", "Integer start delay", _REF_VIDEO),
    # Native
    Rule("Native-N-001", "error", "native.request must be present and be a string", "JSON string", _REF_NATIVE),
    Rule("Native-N-002", "error", "Native request must contain ver (version string)", 'Version string (e.g., "1.2")', _REF_NATIVE),
    Rule("Native-N-003", "error", "Native request must contain a non-empty assets array", "Non-empty array of asset objects", _REF_NATIVE),
    Rule("Native-N-004", "error", "Each native asset must have an id", "Integer asset ID", _REF_NATIVE),
    Rule("Native-N-005", "error", "Each asset must have either title, img, video, or data", "One of: title, img, video, or data object", _REF_NATIVE),
    Rule("Native-N-006", "error", "native.request must be valid JSON", "Valid JSON string", _REF_NATIVE),
    Rule("Native-N-007", "error", "Each asset must have only one of title, img, video, or data", "Exactly one of: title, img, video, or data object", _REF_NATIVE),
    # Banner
    Rule("Banner-B-001", "error", "banner must contain either w/h or format array", "Width/height integers or format array", _REF_BANNER),
    Rule("Banner-B-002", "error", "Each format entry must have w and h", "Object with w and h properties", _REF_FORMAT),
    # Site
    Rule("Core-Site-001", "error", "site.page must be present and be a string URL", "Valid URL string", _REF_SITE),
    Rule("Core-Site-002", "error", "site.page must be a valid URL", "Valid URL", _REF_SITE),
    Rule("Core-Site-003", "error", "site.publisher object must be present", "Publisher object with id", _REF_PUBLISHER),
    Rule("Core-Site-004", "error", "site.publisher.id must be present and be a string", "Non-empty string", _REF_PUBLISHER),
    # App
    Rule("EQ-App-007", "error", "app.storeurl must be present and be a string", "Valid store URL string", _REF_APP),
    Rule("EQ-App-008", "error", "app.bundle must be present and be a string", "Bundle identifier string", _REF_APP),
    Rule("EQ-App-016", "error", "Store URL does not match any known platform patterns", "Valid store URL for supported platforms", _REF_APP),
    Rule("EQ-App-017", "error", "app.bundle must not contain un-replaced macros", "Bundle without macros", _REF_APP),
    Rule("EQ-App-018", "error", "app.storeurl must not contain un-replaced macros", "Store URL without macros", _REF_APP),
    Rule("EQ-App-019", "error", "app object must not contain potential macros", "App object without macros", _REF_APP),
    Rule("EQ-App-020", "warning", "app.id is recommended for better identification", "App identifier string", _REF_APP),
    Rule("Core-App-001", "error", "app.bundle must be present and be a string", 'String (e.g., "com.example.app")', _REF_APP),
    Rule("Core-App-002", "error", "app.storeurl must be present and be a string", "Valid URL string", _REF_APP),
    Rule("Core-App-003", "error", "app.storeurl must be a valid URL", "Valid URL", _REF_APP),
    Rule("Core-App-004", "error", "app.storeurl contains un-replaced macros", "URL without macros", _REF_APP),
    Rule("Core-App-005", "error", "app.publisher object must be present", "Publisher object with id", _REF_PUBLISHER),
    Rule("Core-App-006", "error", "app.publisher.id must be present and be a string", "Non-empty string", _REF_PUBLISHER),
    # Device
    Rule("EQ-Device-022", "error", "device.geo object must be present", "Geo object", _REF_GEO),
    Rule("EQ-Device-023", "error", "device.geo.country must be present", "ISO 3166-1 Alpha-3 country code", _REF_GEO),
    Rule("EQ-Device-024", "warning", "Country continent mismatch with datacenter continent", "Country continent should match datacenter continent", _REF_GEO),
    Rule("EQ-Device-025", "error", "device.make must be present", "Device manufacturer string", _REF_DEVICE),
    Rule("EQ-Device-026", "error", "device.model must be present", "Device model string", _REF_DEVICE),
    Rule("EQ-Device-027", "error", "device.ifa (ID for Advertising) must be present", "Valid advertising identifier", _REF_DEVICE),
    Rule("EQ-Device-028", "error", "device must contain either ip (IPv4) or ipv6", "Valid IP address", _REF_DEVICE),
    Rule("EQ-Device-029", "error", "device.ip must be a valid IPv4 address", "Valid IPv4 address", _REF_DEVICE),
    Rule("EQ-Device-030", "error", "truncated_ip flag must be set to 1 when device.ip is truncated", "1", _REF_DEVICE),
    Rule("EQ-Device-031", "error", "truncated_ip flag must be set to 1 when device.ipv6 is truncated", "1", _REF_DEVICE),
    Rule("EQ-Device-032", "error", "truncated_ip flag must be set to 1 when device.ifa is all zeros", "1", _REF_DEVICE),
    Rule("EQ-Device-033", "error", "device.devicetype must be present", "Integer 1-7", _REF_DEVICE),
    Rule("EQ-Device-034", "error", "device.ua (User Agent) must be present", "User Agent string", _REF_DEVICE),
    Rule("EQ-Device-035", "error", "device.ext.is_app=1 but no app object present", "App object when is_app=1", _REF_DEVICE),
    Rule("Core-Device-001", "error", "device.ua (User Agent) must be present and be a string", "User Agent string", _REF_DEVICE),
    Rule("Core-Device-002", "error", "device must contain either ip (IPv4) or ipv6", "Valid IP address", _REF_DEVICE),
    Rule("Core-Device-003", "error", "device.ip must be a valid IPv4 address", "Valid IPv4 address", _REF_DEVICE),
    Rule("Core-Device-004", "error", "device.ipv6 must be a valid IPv6 address", "Valid IPv6 address", _REF_DEVICE),
    Rule("Core-Device-005", "error", "device.devicetype must be an integer between 1-7", "Integer 1-7", _REF_DEVICE),
    Rule("Core-Device-006", "error", "device.geo object must be present", "Geo object with country", _REF_GEO),
    Rule("Core-Device-007", "error", "device.geo.country must be present and be a string", "ISO 3166-1 Alpha-3 country code", _REF_GEO),
    Rule("Core-Device-008", "error", "device.geo.country must be a valid ISO 3166-1 Alpha-3 code", '3-letter country code (e.g., "USA")', _REF_GEO),
    Rule("Core-Device-009", "warning", "device.ifa (ID for Advertising) should be present unless lmt=1", "Valid advertising ID", _REF_DEVICE),
    # User
    Rule("Core-User-001", "warning", "user.id (Exchange User ID) should be present", "String user identifier", _REF_USER),
    Rule("Core-User-002", "warning", "user.buyeruid (DSP User ID) should be present for DSPs", "DSP-specific user identifier", _REF_USER),
    # Regs
    Rule("Core-Regs-001", "error", "regs.coppa must be 0 or 1", "0 or 1", _REF_REGS),
    Rule("Core-Regs-002", "warning", "regs.ext.gdpr must be 0 or 1", "0 or 1", _REF_REGS),
    Rule("Core-Regs-003", "error", "user.ext.consent (TCF String) must be present when gdpr=1", "Valid TCF consent string", _REF_USER),
    Rule("Core-Regs-004", "error", "regs.gpp_sid must be present when gpp is specified", "Array of GPP section IDs", _REF_REGS),
    # Source
    Rule("EQ-Source-021", "error", "source.schain must be defined", "Supply chain object", _REF_SOURCE),
    Rule("Core-Source-001", "error", "source.schain (SupplyChain Object) must be present", "SupplyChain object", _REF_SCHAIN),
    Rule("Core-Source-002", "error", "schain.complete must be 1", "1", _REF_SCHAIN),
    Rule("Core-Source-003", "error", "schain.nodes must be a non-empty array", "Non-empty array of supply chain nodes", _REF_SCHAIN),
    Rule("Core-Source-004", "error", "Each schain node must contain asi, sid, and hp", "Object with asi, sid, and hp properties", _REF_SCHAIN_NODE),
    # CTV
    Rule("EQ-CTV-051", "error", "CTV: imp.video.pos must be defined", "Integer position value", _REF_VIDEO),
    Rule("EQ-CTV-052", "error", "CTV: imp.video.pos must be set to 7 (Full Screen)", "7", _REF_VIDEO),
    Rule("EQ-CTV-053", "error", "CTV: imp.video.h and imp.video.w should match a 16:9 aspect ratio", "16:9 aspect ratio", _REF_VIDEO),
    Rule("EQ-CTV-054", "error", "app object must be defined for CTV requests", "App object for CTV application", _REF_APP),
    Rule("CTV-001", "error", "CTV requests must contain video impressions", "At least one impression with video object", _REF_IMP),
    Rule("CTV-002", "error", "CTV requests must contain app object", "App object for CTV application", _REF_APP),
    Rule("CTV-003", "error", "CTV requests must contain device.ifa or equivalent ID", "Valid device identifier", _REF_DEVICE),
    Rule("CTV-004", "error", "CTV requests must contain device.make and device.model", "Both make and model strings", _REF_DEVICE),
    Rule("CTV-005", "error", "CTV video placement must be 1 (In-Stream)", "1", _REF_VIDEO),
    Rule("CTV-006", "error", "CTV video linearity must be 1 (Linear)", "1", _REF_VIDEO),
    Rule("CTV-007", "error", "CTV video pos must be 7 (Full Screen)", "7", _REF_VIDEO),
    # DOOH
    Rule("DOOH-001", "error", "DOOH requests must contain dooh object in impression or bid request", "DOOH object with venue information", _REF_DOOH),
    Rule("DOOH-002", "error", "DOOH object must contain venuetype", "Venue type identifier", _REF_DOOH),
    Rule("DOOH-003", "warning", "DOOH object should contain venuetypetax", "Venue type taxonomy identifier", _REF_DOOH),
    # Cross-object
    Rule("Advanced-001", "error", "Bid request contains un-replaced macros", "No macros in bid request"),
    Rule("Advanced-002", "error", "device.ext.is_app=1 but no app object present", "App object when is_app=1", _REF_DEVICE),
    Rule("Advanced-003", "error", "device.ext.is_app=0 but no site object present", "Site object when is_app=0", _REF_DEVICE),
    Rule("Advanced-004", "warning", "user.eids must be an array", "Array of EID objects", _REF_EID),
    Rule("Advanced-005", "error", "Each EID must have source and uids", "Object with source and uids properties", _REF_EID),
    Rule("Advanced-006", "error", "Each UID must have an id", "Object with id property", _REF_UID),
]

for _store in STORE_URL_PATTERNS:
    _suffix = _store.key.upper()
    _RULES.append(
        Rule(
            f"EQ-App-{_suffix}-010",
            "error",
            "{platform}: bundle must match store-specific pattern",
            f"Pattern: {_store.bundle_pattern.pattern}",
            _REF_APP,
        )
    )
    _RULES.append(
        Rule(
            f"EQ-App-{_suffix}-015",
            "error",
            "Bundle ID mismatch: bundle ({bundle}) doesn't match store URL ({app_id})",
            "{app_id}",
            _REF_APP,
        )
    )

RULES = MappingProxyType({rule.id: rule for rule in _RULES})
del _RULES


def get_rule(rule_id: str) -> Rule:
    rule = RULES.get(rule_id)
    if rule is None:
        raise KeyError(f"Unknown rule id: {rule_id}")
    return rule


def list_rules(prefix: str | None = None) -> list[Rule]:
    rules = sorted(RULES.values(), key=lambda rule: rule.id)
    if prefix:
        rules = [rule for rule in rules if rule.id.startswith(prefix)]
    return rules


def issue(rule_id: str, field_path: str, actual_value: Any = None, **params: Any) -> ValidationIssue:
    """Build the issue for ``rule_id``; ``params`` fill the message/expected templates."""
    rule = get_rule(rule_id)
    message = rule.message.format(**params) if params else rule.message
    expected = rule.expected_value
    if expected is not None and params:
        expected = expected.format(**params)
    return ValidationIssue(
        id=rule.id,
        severity=rule.severity,
        field_path=field_path,
        message=message,
        actual_value=actual_value,
        expected_value=expected,
        spec_reference=rule.reference,
    )


__all__ = [
    "RULES",
    "RULE_GROUPS",
    "Rule",
    "get_rule",
    "issue",
    "list_rules",
    "normalize_rule_groups",
    "rule_group",
]
