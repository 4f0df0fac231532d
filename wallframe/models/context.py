"""Generation context — accumulates state during one wall's member pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import WallSpec
from .framing import FramingMember
from .layout import WallLayout
from .naming import MemberNamer
from .parameters import GenerationConfig


class GenerationContext(BaseModel):
    """
    Holds all state during a single member generation pass.

    The analyzer fills in the layout.
    Rules add generated members.
    The generator orchestrates the flow and throws the context away.
    """
    # Input
    wall: WallSpec
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    layout: WallLayout | None = None

    # Output (populated by rules)
    members: list[FramingMember] = []
    namer: MemberNamer = Field(default_factory=MemberNamer)

    def add_members(self, members: list[FramingMember]) -> None:
        self.members.extend(members)

    def require_layout(self) -> WallLayout:
        if self.layout is None:
            raise RuntimeError("Wall layout has not been analyzed yet")
        return self.layout
