"""Building element models — walls, openings, floors."""

from __future__ import annotations
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .parameters import (
    HeaderSize, SheathingType, StudSize, STUD_THICKNESS,
)


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class Opening(BaseModel):
    """A rough opening (window/door), possibly repeated along the wall."""
    model_config = ConfigDict(frozen=True)

    id: str = "opening"
    type: OpeningType
    quantity: int = Field(1, ge=0)          # 0 marks an inactive placeholder
    width: float = Field(36.0, ge=0)        # Rough opening width (inches)
    height: float = Field(48.0, gt=0)       # Rough opening height (inches)
    header_size: HeaderSize = HeaderSize.TWO_BY_EIGHT
    header_ply: Literal[2, 3] = 2
    king_studs_per_side: int = Field(1, ge=0)
    jack_studs_per_side: int = Field(1, ge=0)
    center_offset: float | None = None       # Wall start to opening center
    header_top_offset: float | None = Field(None, ge=0)  # Header drop, windows only

    @property
    def frame_width(self) -> float:
        """Rough opening plus the king and jack studs on both sides."""
        studs = self.king_studs_per_side + self.jack_studs_per_side
        return self.width + 2 * studs * STUD_THICKNESS

    @property
    def is_active(self) -> bool:
        return self.quantity > 0 and self.width > 0

    @property
    def is_manual(self) -> bool:
        return self.center_offset is not None and self.quantity == 1


class WallSpec(BaseModel):
    """Everything needed to frame a single straight wall."""
    model_config = ConfigDict(frozen=True)

    length: float = Field(192.0, gt=0)       # Inches
    height: float = Field(97.125, gt=0)      # Inches, bottom of bottom plate to top of top plate
    stud_size: StudSize = StudSize.TWO_BY_FOUR
    stud_spacing: Literal[8, 12, 16, 24] = 16
    studs_on_center: int = Field(1, ge=1, le=4)
    double_top_plate: bool = True
    pressure_treated_bottom_plate: bool = False
    blocking_rows: int = Field(0, ge=0)
    start_studs: int = Field(1, ge=1)
    end_studs: int = Field(1, ge=1)
    sheathing: bool = False
    sheathing_type: SheathingType = SheathingType.OSB
    openings: tuple[Opening, ...] = ()


class Wall(BaseModel):
    """A named wall in a project, optionally assigned to a floor."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    floor_id: str | None = None
    details: WallSpec = Field(default_factory=WallSpec)


class Floor(BaseModel):
    """A building level that groups walls for per-floor totals."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
