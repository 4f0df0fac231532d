"""Rows of blocking between common studs."""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import FramingMember, GenerationContext, MemberType
from wallframe.models.parameters import BLOCK_THICKNESS


class BlockingRule(FramingRule):
    """One block per bay per row, staggered between neighbouring bays."""

    priority = 30
    dependencies = ["wall.common_studs"]

    def get_id(self) -> str:
        return "wall.blocking"

    def get_name(self) -> str:
        return "Row Blocking"

    def applies(self, context: GenerationContext) -> bool:
        return context.wall.blocking_rows > 0

    def generate(self, context: GenerationContext) -> list[FramingMember]:
        layout = context.require_layout()
        members: list[FramingMember] = []
        for bay in layout.blocking_bays:
            for row, y in enumerate(bay.row_ys, start=1):
                members.append(self.member(
                    context, "block", bay.width, MemberType.BLOCKING,
                    x=bay.x, y=y, z=0,
                    width=bay.width, height=BLOCK_THICKNESS, depth=layout.stud_depth,
                    row=str(row),
                ))
        return members
