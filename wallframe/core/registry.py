"""Rule registry — discovers, stores, and resolves member rules."""

from __future__ import annotations

from wallframe.models import GenerationContext
from wallframe.rules.base import FramingRule


class RuleRegistry:
    """
    Central registry for all member rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, FramingRule] = {}

    def register(self, rule: FramingRule) -> None:
        """Register a member rule."""
        self._rules[rule.get_id()] = rule

    def list_rules(self) -> list[FramingRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: GenerationContext) -> list[FramingRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects GenerationConfig.enabled_rules and disabled_rules.
        """
        config = context.config
        candidates = list(self._rules.values())

        # If enabled_rules is specified, only use those
        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        # Remove explicitly disabled rules
        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        # Filter by applies()
        applicable = [r for r in candidates if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[FramingRule]) -> list[FramingRule]:
        """Topological sort respecting dependencies."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[FramingRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard wall rules."""
    from wallframe.rules.wall.plates import PlateRule
    from wallframe.rules.wall.studs import CommonStudRule
    from wallframe.rules.wall.blocking import BlockingRule
    from wallframe.rules.wall.openings import OpeningFramingRule
    from wallframe.rules.wall.sheathing import SheathingRule

    registry = RuleRegistry()
    registry.register(PlateRule())
    registry.register(CommonStudRule())
    registry.register(BlockingRule())
    registry.register(OpeningFramingRule())
    registry.register(SheathingRule())
    return registry
