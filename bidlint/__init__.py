"""Public package entrypoint for the bidlint engine.

This package provides a stable import surface for the OpenRTB bid request
validation engine, plus optional frontend adapters (CLI and FastAPI server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "MalformedInputError": ("bidlint.core", "MalformedInputError"),
    "ValidationResult": ("bidlint.core", "ValidationResult"),
    "app": ("bidlint.server.main", "app"),
    "create_app": ("bidlint.server.main", "create_app"),
    "detect_characteristics": ("bidlint.core", "detect_characteristics"),
    "format_json": ("bidlint.core", "format_json"),
    "list_rules": ("bidlint.core", "list_rules"),
    "minify_json": ("bidlint.core", "minify_json"),
    "validate": ("bidlint.core.api", "validate"),
}

try:
    __version__ = version("bidlint")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "MalformedInputError",
    "ValidationResult",
    "__version__",
    "app",
    "create_app",
    "detect_characteristics",
    "format_json",
    "list_rules",
    "minify_json",
    "validate",
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
