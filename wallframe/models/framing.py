"""Framing output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict


class MemberType(str, Enum):
    PLATE = "plate"
    PT_PLATE = "pt-plate"
    STUD = "stud"
    KING_JACK = "king-jack"
    HEADER = "header"
    SILL = "sill"
    CRIPPLE = "cripple"
    BLOCKING = "blocking"
    SHEATHING = "sheathing"


class FramingMember(BaseModel):
    """
    A single piece of framing as an axis-aligned box in wall-local space.

    (x, y, z) is the top-left-front corner: x runs along the wall from its
    start, y runs down from the top of the wall, z runs into the wall depth.
    """
    model_config = ConfigDict(frozen=True)

    id: str         # Unique within one wall
    name: str       # Non-unique, groups identical pieces in external tools
    type: MemberType
    x: float
    y: float
    z: float
    width: float    # Along the wall
    height: float   # Vertical
    depth: float    # Through the wall
    tags: dict[str, str] = {}  # Extensible metadata (rule that created it, etc.)


class FrameStats(BaseModel):
    """Summary statistics for a generated wall frame."""
    total_members: int = 0
    studs: int = 0
    plates: int = 0
    blocking: int = 0
    opening_members: int = 0
    sheathing: int = 0

    @classmethod
    def from_members(cls, members: list[FramingMember]) -> FrameStats:
        def count(*types: MemberType) -> int:
            return sum(1 for m in members if m.type in types)

        return cls(
            total_members=len(members),
            studs=count(MemberType.STUD),
            plates=count(MemberType.PLATE, MemberType.PT_PLATE),
            blocking=count(MemberType.BLOCKING),
            opening_members=count(
                MemberType.KING_JACK, MemberType.HEADER,
                MemberType.SILL, MemberType.CRIPPLE,
            ),
            sheathing=count(MemberType.SHEATHING),
        )


class WallFrame(BaseModel):
    """All generated members of one wall."""
    members: list[FramingMember]
    stats: FrameStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = FrameStats.from_members(self.members)
