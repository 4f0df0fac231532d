"""High-level framing service — facade for the API layer and other callers."""

from __future__ import annotations
from collections.abc import Iterable, Sequence

from wallframe.models import (
    Opening, PlacedOpening, WallSpec, WallFrame, Wall, Floor,
    GenerationConfig, EstimatingConfig, ProjectMaterials,
)
from wallframe.core.generator import FrameGenerator
from wallframe.core.layout import resolve_openings
from wallframe.core.registry import RuleRegistry, create_default_registry
from wallframe.estimating.aggregator import calculate_materials


class FramingService:
    """Delegates to the layout resolver, member generator and aggregator."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        estimating: EstimatingConfig | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.generator = FrameGenerator(self.registry)
        self.estimating = estimating or EstimatingConfig()

    def resolve_openings(self, wall_length: float, openings: Iterable[Opening]) -> list[PlacedOpening]:
        return resolve_openings(wall_length, openings)

    def generate_members(
        self,
        wall: WallSpec,
        config: GenerationConfig | None = None,
    ) -> WallFrame:
        return self.generator.generate(wall, config)

    def calculate_materials(
        self,
        walls: Sequence[Wall],
        floors: Sequence[Floor] = (),
    ) -> ProjectMaterials:
        return calculate_materials(walls, floors, self.estimating)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
