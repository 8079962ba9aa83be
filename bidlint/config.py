"""Shared runtime settings for the server and CLI adapters.

This module owns environment-backed application settings. It is intentionally
separate from ``bidlint.core.config`` because core config stays minimal and
framework-agnostic.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MAX_PAYLOAD_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_tagline: str
    debug: bool
    log_verbosity: str
    cors_allow_origins: tuple[str, ...]
    rule_groups: tuple[str, ...]
    max_payload_bytes: int


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        parsed = int(val.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _env_list(name: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in os.getenv(name, "").split(",") if item.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = _env_list("CORS_ALLOW_ORIGINS")
    return Settings(
        app_name=os.getenv("APP_NAME", "bidlint"),
        app_tagline=os.getenv(
            "APP_TAGLINE",
            "OpenRTB bid request validator.",
        ),
        debug=_env_bool("DEBUG", default=False),
        log_verbosity=_env_choice(
            "LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high", "extrahigh"},
        ),
        cors_allow_origins=origins or ("*",),
        rule_groups=_env_list("BIDLINT_RULE_GROUPS"),
        max_payload_bytes=_env_int("MAX_PAYLOAD_BYTES", DEFAULT_MAX_PAYLOAD_BYTES),
    )


__all__ = ["DEFAULT_MAX_PAYLOAD_BYTES", "Settings", "get_settings"]
