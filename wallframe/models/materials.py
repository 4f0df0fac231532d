"""Cut list and purchase list models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict


class CutCategory(str, Enum):
    PLATE = "plate"
    STUD = "stud"
    BLOCKING = "blocking"
    HEADER = "header"
    SHEET = "sheet"


class RawCut(BaseModel):
    """One required piece before optimization."""
    model_config = ConfigDict(frozen=True)

    length: float       # Inches; square feet for SHEET
    category: CutCategory
    description: str    # Purchase description, e.g. "2x4 Stud"


class PrecutTally(BaseModel):
    """Studs that match a pre-cut SKU and bypass the optimizer."""
    description: str    # e.g. "2x4 Pre-cut Studs"
    label: str          # e.g. '92 5/8"'
    length: float
    count: int = 0


class RawCutSet(BaseModel):
    """All raw cuts for one or more walls."""
    cuts: list[RawCut] = []
    precuts: list[PrecutTally] = []

    def add(self, length: float, category: CutCategory, description: str) -> None:
        self.cuts.append(RawCut(length=length, category=category, description=description))

    def add_precut(self, description: str, label: str, length: float, count: int = 1) -> None:
        for tally in self.precuts:
            if tally.description == description and tally.label == label:
                tally.count += count
                return
        self.precuts.append(PrecutTally(
            description=description, label=label, length=length, count=count,
        ))

    def merge(self, other: RawCutSet) -> None:
        self.cuts.extend(other.cuts)
        for tally in other.precuts:
            self.add_precut(tally.description, tally.label, tally.length, tally.count)

    def lengths(self, category: CutCategory) -> list[float]:
        return [c.length for c in self.cuts if c.category == category]

    def grouped(self) -> dict[tuple[CutCategory, str], list[float]]:
        """Cut lengths keyed by (category, description), in first-seen order."""
        groups: dict[tuple[CutCategory, str], list[float]] = {}
        for cut in self.cuts:
            groups.setdefault((cut.category, cut.description), []).append(cut.length)
        return groups


class StockBin(BaseModel):
    """A stock piece opened by the optimizer and the cuts assigned to it."""
    length: float
    cuts: list[float] = []
    remaining: float


class StockCount(BaseModel):
    length: float
    count: int


class MaterialItem(BaseModel):
    """A purchasable line: quantity x description at a length or label."""
    quantity: int
    description: str
    length: float | str


class WallMaterials(BaseModel):
    wall_name: str
    materials: list[MaterialItem]


class FloorMaterials(BaseModel):
    floor_name: str
    materials: list[MaterialItem]


class ProjectMaterials(BaseModel):
    """Purchase lists for a whole project, per wall and per floor."""
    project_list: list[MaterialItem] = []
    by_wall: dict[str, WallMaterials] = {}
    by_floor: dict[str, FloorMaterials] = {}
    total_walls: int = 0
    total_linear_feet: int = 0
