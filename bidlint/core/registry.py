"""Registry of validator categories and the rule sets they run."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .validate.rules.base import RuleSet


@dataclass
class Registry:
    categories: dict[str, list[RuleSet]] = field(default_factory=dict)

    def register_category(self, key: str, rule_sets: Iterable[RuleSet]) -> None:
        """Add or replace a category; new categories run after existing ones."""
        self.categories[_normalize(key)] = list(rule_sets)

    def register_rule_set(self, key: str, rule_set: RuleSet) -> None:
        normalized = _normalize(key)
        if normalized not in self.categories:
            raise KeyError(f"No validator category registered for key: {normalized}")
        self.categories[normalized].append(rule_set)

    def get_category(self, key: str) -> tuple[RuleSet, ...]:
        normalized = _normalize(key)
        rule_sets = self.categories.get(normalized)
        if rule_sets is None:
            raise KeyError(f"No validator category registered for key: {normalized}")
        return tuple(rule_sets)

    def list_categories(self) -> list[str]:
        return list(self.categories.keys())


def _normalize(key: str) -> str:
    return str(key).strip().lower()


_registry = Registry()


def register_category(key: str, rule_sets: Iterable[RuleSet]) -> None:
    _registry.register_category(key, rule_sets)


def register_rule_set(key: str, rule_set: RuleSet) -> None:
    _registry.register_rule_set(key, rule_set)


def get_category(key: str) -> tuple[RuleSet, ...]:
    return _registry.get_category(key)


def list_categories() -> list[str]:
    """Category names in run order."""
    return _registry.list_categories()


def _register_defaults() -> None:
    from .validate.rules import advanced, app, banner, ctv, device, dooh, impression, native
    from .validate.rules import regs, request, site, source, user, video

    defaults = (
        ("request", request.RULE_SETS),
        ("impression", impression.RULE_SETS),
        ("app", app.RULE_SETS),
        ("site", site.RULE_SETS),
        ("device", device.RULE_SETS),
        ("user", user.RULE_SETS),
        ("regs", regs.RULE_SETS),
        ("source", source.RULE_SETS),
        ("video", video.RULE_SETS),
        ("native", native.RULE_SETS),
        ("banner", banner.RULE_SETS),
        ("ctv", ctv.RULE_SETS),
        ("dooh", dooh.RULE_SETS),
        ("advanced", advanced.RULE_SETS),
    )
    for key, rule_sets in defaults:
        if key not in _registry.categories:
            _registry.register_category(key, rule_sets)


_register_defaults()


__all__ = [
    "Registry",
    "get_category",
    "list_categories",
    "register_category",
    "register_rule_set",
]
