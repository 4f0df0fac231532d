"""Top and bottom plates.

The bottom plate sits on the floor and may be pressure treated; the top
is either a single plate or a double plate of two stacked members.
"""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import FramingMember, GenerationContext, MemberType
from wallframe.models.parameters import PLATE_THICKNESS


class PlateRule(FramingRule):
    """Bottom plate plus single or double top plate."""

    priority = 10  # Plates are drawn first, everything else sits between them

    def get_id(self) -> str:
        return "wall.plates"

    def get_name(self) -> str:
        return "Top & Bottom Plates"

    def applies(self, context: GenerationContext) -> bool:
        return True

    def generate(self, context: GenerationContext) -> list[FramingMember]:
        wall = context.wall
        layout = context.require_layout()
        depth = layout.stud_depth

        if wall.pressure_treated_bottom_plate:
            bottom_type, bottom_kind = MemberType.PT_PLATE, "PT Plate"
        else:
            bottom_type, bottom_kind = MemberType.PLATE, "Plate"

        members: list[FramingMember] = [
            self.member(
                context, bottom_kind, wall.length, bottom_type,
                x=0, y=wall.height - layout.bottom_plate_height, z=0,
                width=wall.length, height=layout.bottom_plate_height, depth=depth,
                member_id="bottom-plate", position="bottom",
            ),
        ]

        if wall.double_top_plate:
            for layer in range(2):
                members.append(self.member(
                    context, "Plate", wall.length, MemberType.PLATE,
                    x=0, y=layer * PLATE_THICKNESS, z=0,
                    width=wall.length, height=PLATE_THICKNESS, depth=depth,
                    member_id=f"top-plate-{layer + 1}", position="top",
                ))
        else:
            members.append(self.member(
                context, "Plate", wall.length, MemberType.PLATE,
                x=0, y=0, z=0,
                width=wall.length, height=layout.top_plate_height, depth=depth,
                member_id="top-plate", position="top",
            ))

        return members
