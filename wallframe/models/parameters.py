"""Lumber dimensions, generation parameters and estimating configuration."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class StudSize(str, Enum):
    TWO_BY_FOUR = "2x4"
    TWO_BY_SIX = "2x6"


class HeaderSize(str, Enum):
    TWO_BY_SIX = "2x6"
    TWO_BY_EIGHT = "2x8"
    TWO_BY_TEN = "2x10"
    TWO_BY_TWELVE = "2x12"


class SheathingType(str, Enum):
    OSB = '1/2" OSB'
    CDX_PLYWOOD = '1/2" CDX Plywood'
    ZIP_SYSTEM = '5/8" Zip System'


# Actual (dressed) dimensions in inches
PLATE_THICKNESS = 1.5
STUD_THICKNESS = 1.5
HEADER_PLY_THICKNESS = 1.5
HEADER_SPACER_THICKNESS = 0.5   # 1/2" plywood between header plies
BLOCK_THICKNESS = 1.5

STUD_DEPTHS: dict[StudSize, float] = {
    StudSize.TWO_BY_FOUR: 3.5,
    StudSize.TWO_BY_SIX: 5.5,
}

HEADER_DEPTHS: dict[HeaderSize, float] = {
    HeaderSize.TWO_BY_SIX: 5.5,
    HeaderSize.TWO_BY_EIGHT: 7.25,
    HeaderSize.TWO_BY_TEN: 9.25,
    HeaderSize.TWO_BY_TWELVE: 11.25,
}

SHEATHING_THICKNESSES: dict[SheathingType, float] = {
    SheathingType.OSB: 0.5,
    SheathingType.CDX_PLYWOOD: 0.5,
    SheathingType.ZIP_SYSTEM: 0.625,
}

SHEET_WIDTH = 48.0
SHEET_HEIGHT = 96.0
SHEET_LABEL = "4x8"

POSITION_DECIMALS = 2           # Positions compare at hundredths
MIN_BLOCKING_GAP = 3.0          # Narrower bays are not blocked
BLOCKING_STAGGER = 1.5          # Alternating row offset for end nailing
MIN_CRIPPLE_ABOVE = 1.5         # Shorter gaps over a header are left open


class GenerationConfig(BaseModel):
    """Controls which member rules run."""
    model_config = ConfigDict(frozen=True)

    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules


class PrecutLength(BaseModel):
    """A stud length sold as its own pre-cut SKU."""
    model_config = ConfigDict(frozen=True)

    length: float
    label: str


class EstimatingConfig(BaseModel):
    """Stock lengths and purchasing conventions used by the material list."""
    model_config = ConfigDict(frozen=True)

    stud_stock_lengths: list[float] = [192.0, 144.0, 120.0, 96.0]
    blocking_stock_lengths: list[float] = [192.0]
    plate_stock_lengths: list[float] = [192.0]   # Plates and headers
    precut_lengths: list[PrecutLength] = Field(default_factory=lambda: [
        PrecutLength(length=92.625, label='92 5/8"'),
        PrecutLength(length=104.625, label='104 5/8"'),
    ])
    precut_tolerance: float = 0.01
    cut_decimals: int = 3
    sheet_area_sqft: float = 32.0
    grade_suffix: str = "No. 2 or Better"
