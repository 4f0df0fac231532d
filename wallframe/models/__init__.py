from .parameters import (
    StudSize, HeaderSize, SheathingType,
    GenerationConfig, EstimatingConfig, PrecutLength,
)
from .building import Opening, OpeningType, WallSpec, Wall, Floor
from .framing import FramingMember, MemberType, WallFrame, FrameStats
from .layout import PlacedOpening, OpeningFrame, BlockingBay, WallLayout
from .naming import MemberNamer, format_inches
from .materials import (
    CutCategory, RawCut, PrecutTally, RawCutSet, StockBin, StockCount,
    MaterialItem, WallMaterials, FloorMaterials, ProjectMaterials,
)
from .context import GenerationContext

__all__ = [
    "StudSize", "HeaderSize", "SheathingType",
    "GenerationConfig", "EstimatingConfig", "PrecutLength",
    "Opening", "OpeningType", "WallSpec", "Wall", "Floor",
    "FramingMember", "MemberType", "WallFrame", "FrameStats",
    "PlacedOpening", "OpeningFrame", "BlockingBay", "WallLayout",
    "MemberNamer", "format_inches",
    "CutCategory", "RawCut", "PrecutTally", "RawCutSet", "StockBin", "StockCount",
    "MaterialItem", "WallMaterials", "FloorMaterials", "ProjectMaterials",
    "GenerationContext",
]
