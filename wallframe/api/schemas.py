"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from wallframe.models import (
    Floor, GenerationConfig, Opening, Wall, WallFrame, WallSpec,
)


class ResolveOpeningsRequest(BaseModel):
    """Request body for the /openings/resolve endpoint."""
    length: float
    openings: list[Opening] = []


class GenerateRequest(BaseModel):
    """Request body for the /members endpoint."""
    wall: WallSpec
    config: GenerationConfig = GenerationConfig()


class GenerateResponse(BaseModel):
    """Response from the /members endpoint."""
    frame: WallFrame
    rule_count: int


class MaterialsRequest(BaseModel):
    """Request body for the /materials endpoint."""
    walls: list[Wall]
    floors: list[Floor] = []


class RuleInfo(BaseModel):
    id: str
    name: str
