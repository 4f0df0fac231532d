"""Member generator — orchestrates layout analysis and rule execution."""

from __future__ import annotations
import logging

from wallframe.models import (
    WallSpec, WallFrame, GenerationConfig, GenerationContext,
)
from wallframe.core.registry import RuleRegistry
from wallframe.core.analyzer import WallAnalyzer

logger = logging.getLogger(__name__)


class FrameGenerator:
    """
    Stateless member generator.

    Takes a wall, runs layout analysis, executes applicable rules,
    and returns the complete WallFrame. Every call builds a fresh
    context, so member ids never depend on earlier calls.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = WallAnalyzer()

    def generate(
        self,
        wall: WallSpec,
        config: GenerationConfig | None = None,
    ) -> WallFrame:
        if config is None:
            config = GenerationConfig()

        # Build context
        context = GenerationContext(wall=wall, config=config)

        # Analysis phase — openings, stud layout, opening frames
        self.analyzer.analyze(context)

        # Generation phase — run applicable rules
        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            members = rule.generate(context)
            logger.debug("Rule %s produced %d member(s)", rule.get_id(), len(members))
            context.add_members(members)

        return WallFrame(members=context.members)
