"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from wallframe.models import PlacedOpening, ProjectMaterials
from wallframe.services.framing_service import FramingService
from wallframe.api.schemas import (
    GenerateRequest, GenerateResponse, MaterialsRequest,
    ResolveOpeningsRequest, RuleInfo,
)

router = APIRouter()

# Shared service instance
_service = FramingService()


@router.post("/openings/resolve", response_model=list[PlacedOpening])
async def resolve_openings(request: ResolveOpeningsRequest) -> list[PlacedOpening]:
    """Place window and door instances along a wall."""
    return _service.resolve_openings(request.length, request.openings)


@router.post("/members", response_model=GenerateResponse)
async def generate_members(request: GenerateRequest) -> GenerateResponse:
    """Generate every framing member of one wall."""
    frame = _service.generate_members(request.wall, request.config)
    return GenerateResponse(
        frame=frame,
        rule_count=len(_service.list_rules()),
    )


@router.post("/materials", response_model=ProjectMaterials)
async def calculate_materials(request: MaterialsRequest) -> ProjectMaterials:
    """Optimized purchase lists for the project, each floor and each wall."""
    return _service.calculate_materials(request.walls, request.floors)


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available member rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
