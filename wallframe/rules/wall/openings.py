"""Rough opening framing — kings, jacks, headers, sills and cripples.

Door headers hang from the rough opening height measured off the bottom
plate; window headers hang from the top plate by an optional drop, with
the sill at the rough opening height below the header. Cripples fill the
space over a dropped header or a door header and under a window sill,
following the wall's on-center layout.
"""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import (
    FramingMember, GenerationContext, MemberType, OpeningFrame, WallLayout,
)
from wallframe.models.parameters import (
    STUD_THICKNESS, PLATE_THICKNESS, HEADER_PLY_THICKNESS, HEADER_SPACER_THICKNESS,
)


class OpeningFramingRule(FramingRule):
    """Frames every placed window and door instance."""

    priority = 40

    def get_id(self) -> str:
        return "wall.openings"

    def get_name(self) -> str:
        return "Window & Door Framing"

    def applies(self, context: GenerationContext) -> bool:
        return len(context.require_layout().frames) > 0

    def generate(self, context: GenerationContext) -> list[FramingMember]:
        layout = context.require_layout()
        members: list[FramingMember] = []
        for frame in layout.frames:
            members.extend(self._frame_opening(context, layout, frame))
        return members

    def _frame_opening(
        self,
        context: GenerationContext,
        layout: WallLayout,
        frame: OpeningFrame,
    ) -> list[FramingMember]:
        members: list[FramingMember] = []
        op = frame.placement.opening
        key = frame.placement.key
        depth = layout.stud_depth

        kings_width = op.king_studs_per_side * STUD_THICKNESS
        jacks_width = op.jack_studs_per_side * STUD_THICKNESS
        left_x = frame.placement.x_start
        right_x = left_x + kings_width + jacks_width + op.width

        def king(x: float) -> FramingMember:
            return self.member(
                context, "king", layout.stud_height, MemberType.KING_JACK,
                x=x, y=layout.top_plate_height, z=0,
                width=STUD_THICKNESS, height=layout.stud_height, depth=depth,
                opening=key, role="king",
            )

        def jack(x: float) -> FramingMember:
            return self.member(
                context, "jack", frame.jack_height, MemberType.KING_JACK,
                x=x, y=frame.jack_y, z=0,
                width=STUD_THICKNESS, height=frame.jack_height, depth=depth,
                opening=key, role="jack",
            )

        def cripples(y: float, height: float, role: str) -> list[FramingMember]:
            return [
                self.member(
                    context, "cripple", height, MemberType.CRIPPLE,
                    x=x, y=y, z=0,
                    width=STUD_THICKNESS, height=height, depth=depth,
                    opening=key, role=role,
                )
                for x in frame.cripple_xs
            ]

        has_jacks = frame.jack_height > 0

        for k in range(op.king_studs_per_side):
            members.append(king(left_x + k * STUD_THICKNESS))
        if has_jacks:
            for j in range(op.jack_studs_per_side):
                members.append(jack(left_x + kings_width + j * STUD_THICKNESS))
            for j in range(op.jack_studs_per_side):
                members.append(jack(right_x + j * STUD_THICKNESS))
        for k in range(op.king_studs_per_side):
            members.append(king(right_x + jacks_width + k * STUD_THICKNESS))

        # Plies stack through the wall with a plywood spacer between each
        ply_pitch = HEADER_PLY_THICKNESS + HEADER_SPACER_THICKNESS
        total_depth = op.header_ply * HEADER_PLY_THICKNESS + (op.header_ply - 1) * HEADER_SPACER_THICKNESS
        first_z = (depth - total_depth) / 2
        for p in range(op.header_ply):
            members.append(self.member(
                context, "Header", frame.header_length, MemberType.HEADER,
                x=frame.header_x, y=frame.header_y, z=first_z + p * ply_pitch,
                width=frame.header_length, height=frame.header_depth, depth=HEADER_PLY_THICKNESS,
                size=op.header_size.value, member_id=f"header-{key}-{p}",
                opening=key, ply=str(p + 1),
            ))

        if frame.has_cripples_above:
            members.extend(cripples(layout.top_plate_height, frame.cripple_above_height, "above"))

        if frame.sill_y is not None:
            members.append(self.member(
                context, "Sill Plate", frame.header_length, MemberType.SILL,
                x=frame.header_x, y=frame.sill_y, z=0,
                width=frame.header_length, height=PLATE_THICKNESS, depth=depth,
                member_id=f"sill-{key}", opening=key,
            ))
            if frame.has_cripples_below:
                members.extend(cripples(frame.cripple_below_y, frame.cripple_below_height, "below"))

        return members
