"""Placement models shared by member generation and cut extraction."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .building import Opening, WallSpec
from .parameters import MIN_CRIPPLE_ABOVE


class PlacedOpening(BaseModel):
    """One opening instance positioned along the wall."""
    model_config = ConfigDict(frozen=True)

    opening: Opening
    index: int          # Position in the resolved sequence
    x_start: float      # Outside face of the left king stud
    x_end: float        # Outside face of the right king stud
    center: float
    frame_width: float

    @property
    def key(self) -> str:
        return f"{self.opening.id}-{self.index}"

    def contains(self, x: float) -> bool:
        """True if x lies strictly inside the framed span."""
        return self.x_start < x < self.x_end


class OpeningFrame(BaseModel):
    """Vertical layout of the king/jack/header/sill/cripple assembly."""
    model_config = ConfigDict(frozen=True)

    placement: PlacedOpening
    header_x: float
    header_length: float
    header_y: float
    header_depth: float
    jack_y: float
    jack_height: float
    cripple_above_height: float
    sill_y: float | None = None             # Windows only
    cripple_below_y: float | None = None
    cripple_below_height: float = 0.0
    cripple_xs: tuple[float, ...] = ()       # Left edges, shared above and below

    @property
    def has_cripples_above(self) -> bool:
        return self.cripple_above_height > MIN_CRIPPLE_ABOVE

    @property
    def has_cripples_below(self) -> bool:
        return self.sill_y is not None and self.cripple_below_height > 0


class BlockingBay(BaseModel):
    """A blocked gap between two adjacent surviving studs."""
    model_config = ConfigDict(frozen=True)

    index: int                  # Pair index, drives the row stagger
    x: float                    # Right face of the left stud
    width: float                # Clear gap
    row_ys: tuple[float, ...]   # Top of each block, one per row


class WallLayout(BaseModel):
    """Every placement decision for one wall, computed once."""
    model_config = ConfigDict(frozen=True)

    wall: WallSpec
    stud_depth: float
    top_plate_height: float
    bottom_plate_height: float
    stud_height: float
    placements: tuple[PlacedOpening, ...]
    stud_xs: tuple[float, ...]          # All layout positions, deduplicated
    common_stud_xs: tuple[float, ...]   # Positions that survive the openings
    blocking_bays: tuple[BlockingBay, ...]
    frames: tuple[OpeningFrame, ...]
