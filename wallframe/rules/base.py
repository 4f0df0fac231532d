"""Abstract base class for all member rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each generates a specific family of framing members
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current wall
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from wallframe.models import FramingMember, GenerationContext, MemberType


class FramingRule(ABC):
    """
    Base class for all member rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'wall.plates')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Top & Bottom Plates')."""
        ...

    @abstractmethod
    def applies(self, context: GenerationContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: GenerationContext) -> list[FramingMember]:
        """
        Generate members for the given context.

        The context provides the wall, the generation config and the
        analyzed layout. Names and ids come from `context.namer`.
        """
        ...

    def member(
        self,
        context: GenerationContext,
        kind: str,
        length: float,
        member_type: MemberType,
        x: float, y: float, z: float,
        width: float, height: float, depth: float,
        size: str | None = None,
        member_id: str | None = None,
        **tags: str,
    ) -> FramingMember:
        """Build a member named after its size and cut length."""
        size = size or context.wall.stud_size.value
        auto_id, name = context.namer.allocate(size, length, kind)
        return FramingMember(
            id=member_id or auto_id,
            name=name,
            type=member_type,
            x=x, y=y, z=z,
            width=width, height=height, depth=depth,
            tags={"rule": self.get_id(), **tags},
        )
