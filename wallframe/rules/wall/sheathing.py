"""Sheathing panels on the outer face of the studs."""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import FramingMember, GenerationContext, MemberType
from wallframe.models.parameters import SHEET_WIDTH, SHEET_HEIGHT, SHEATHING_THICKNESSES


class SheathingRule(FramingRule):
    """Tiles the wall with 4x8 panels, clipping the last column and row."""

    priority = 50

    def get_id(self) -> str:
        return "wall.sheathing"

    def get_name(self) -> str:
        return "Sheathing"

    def applies(self, context: GenerationContext) -> bool:
        return context.wall.sheathing

    def generate(self, context: GenerationContext) -> list[FramingMember]:
        wall = context.wall
        layout = context.require_layout()
        thickness = SHEATHING_THICKNESSES[wall.sheathing_type]
        members: list[FramingMember] = []

        x = 0.0
        while x < wall.length:
            width = min(SHEET_WIDTH, wall.length - x)
            y = 0.0
            while y < wall.height:
                height = min(SHEET_HEIGHT, wall.height - y)
                members.append(FramingMember(
                    id=f"sheathing-{len(members) + 1}",
                    name=f"Sheathing {width:.1f}x{height:.1f}",
                    type=MemberType.SHEATHING,
                    x=x, y=y, z=layout.stud_depth,
                    width=width, height=height, depth=thickness,
                    tags={"rule": self.get_id(), "material": wall.sheathing_type.value},
                ))
                y += height
            x += SHEET_WIDTH

        return members
