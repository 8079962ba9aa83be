"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends.
"""

from typing import Any

# `validate` is served by `bidlint.core.api`; here the name is the subpackage.
_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "CoreConfig": ("bidlint.core.config", "CoreConfig"),
    "DetectedCharacteristics": ("bidlint.core.validate.report", "DetectedCharacteristics"),
    "MalformedInputError": ("bidlint.core.formatting", "MalformedInputError"),
    "ValidationIssue": ("bidlint.core.validate.report", "ValidationIssue"),
    "ValidationResult": ("bidlint.core.validate.report", "ValidationResult"),
    "check_json_syntax": ("bidlint.core.formatting", "check_json_syntax"),
    "config_from_env": ("bidlint.core.config", "config_from_env"),
    "detect_characteristics": ("bidlint.core.detect.characteristics", "detect_characteristics"),
    "detect_store_url": ("bidlint.core.detect.store", "detect_store_url"),
    "format_json": ("bidlint.core.formatting", "format_json"),
    "get_category": ("bidlint.core.registry", "get_category"),
    "get_example": ("bidlint.core.examples", "get_example"),
    "list_categories": ("bidlint.core.registry", "list_categories"),
    "list_examples": ("bidlint.core.examples", "list_examples"),
    "list_rules": ("bidlint.core.api", "list_rules"),
    "minify_json": ("bidlint.core.formatting", "minify_json"),
    "register_category": ("bidlint.core.registry", "register_category"),
    "register_rule_set": ("bidlint.core.registry", "register_rule_set"),
    "validate_bid_request": ("bidlint.core.validate.engine", "validate_bid_request"),
    "validate_object": ("bidlint.core.api", "validate_object"),
}

__all__ = [
    "CoreConfig",
    "DetectedCharacteristics",
    "MalformedInputError",
    "ValidationIssue",
    "ValidationResult",
    "check_json_syntax",
    "config_from_env",
    "detect_characteristics",
    "detect_store_url",
    "format_json",
    "get_category",
    "get_example",
    "list_categories",
    "list_examples",
    "list_rules",
    "minify_json",
    "register_category",
    "register_rule_set",
    "validate_bid_request",
    "validate_object",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
