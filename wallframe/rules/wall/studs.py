"""Common studs on the on-center layout, including start and end studs."""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import FramingMember, GenerationContext, MemberType
from wallframe.models.parameters import STUD_THICKNESS


class CommonStudRule(FramingRule):
    """Full-height studs at every layout position outside the openings."""

    priority = 20

    def get_id(self) -> str:
        return "wall.common_studs"

    def get_name(self) -> str:
        return "Common Studs"

    def applies(self, context: GenerationContext) -> bool:
        return True

    def generate(self, context: GenerationContext) -> list[FramingMember]:
        layout = context.require_layout()
        return [
            self.member(
                context, "stud", layout.stud_height, MemberType.STUD,
                x=x, y=layout.top_plate_height, z=0,
                width=STUD_THICKNESS, height=layout.stud_height, depth=layout.stud_depth,
            )
            for x in layout.common_stud_xs
        ]
