"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .catalog import normalize_rule_groups


@dataclass(frozen=True)
class CoreConfig:
    rule_groups: frozenset[str] = frozenset(("eq", "core"))
    debug: bool = False


def config_from_env(*, rule_groups: str | list[str] | None = None, debug: bool = False) -> CoreConfig:
    """Explicit ``rule_groups`` win over ``BIDLINT_RULE_GROUPS``."""
    selected = rule_groups if rule_groups is not None else os.getenv("BIDLINT_RULE_GROUPS")
    return CoreConfig(
        rule_groups=normalize_rule_groups(selected),
        debug=debug,
    )


__all__ = ["CoreConfig", "config_from_env"]
