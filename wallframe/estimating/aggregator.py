"""Material aggregation — per-wall, per-floor and project purchase lists."""

from __future__ import annotations
import logging
import math
from collections.abc import Sequence

from wallframe.estimating.cuts import extract_cuts
from wallframe.estimating.optimizer import longest_stock, optimize_cuts, split_oversize_cuts
from wallframe.models import (
    CutCategory, EstimatingConfig, Floor, FloorMaterials, MaterialItem,
    ProjectMaterials, RawCutSet, Wall, WallMaterials, WallSpec,
)
from wallframe.models.parameters import SHEET_LABEL

logger = logging.getLogger(__name__)


def _stock_for(category: CutCategory, config: EstimatingConfig) -> list[float]:
    if category == CutCategory.STUD:
        return config.stud_stock_lengths
    if category == CutCategory.BLOCKING:
        return config.blocking_stock_lengths
    return config.plate_stock_lengths


def process_raw_cuts(raw: RawCutSet, config: EstimatingConfig | None = None) -> list[MaterialItem]:
    """Turn raw cuts into purchasable items (unsorted, not deduplicated)."""
    config = config or EstimatingConfig()
    items: list[MaterialItem] = []

    for tally in sorted(raw.precuts, key=lambda t: (t.description, t.length)):
        if tally.count > 0:
            items.append(MaterialItem(
                quantity=tally.count, description=tally.description, length=tally.label,
            ))

    for (category, description), lengths in raw.grouped().items():
        if category == CutCategory.SHEET:
            total_sqft = sum(lengths)
            if total_sqft > 0:
                items.append(MaterialItem(
                    quantity=math.ceil(total_sqft / config.sheet_area_sqft),
                    description=description,
                    length=SHEET_LABEL,
                ))
            continue

        stock = _stock_for(category, config)
        cuts = [round(length, config.cut_decimals) for length in lengths]
        cuts = split_oversize_cuts(cuts, longest_stock(stock))
        for count in optimize_cuts(cuts, stock):
            items.append(MaterialItem(
                quantity=count.count, description=description, length=count.length,
            ))

    return items


def _is_sheet_good(description: str) -> bool:
    return "Plywood" in description or "Sheet" in description


def sort_materials(items: Sequence[MaterialItem], config: EstimatingConfig | None = None) -> list[MaterialItem]:
    """
    Grade, merge and order a material list.

    Dimensional lumber gets the grade suffix. Lines with the same
    description and length are merged. Studs come first, then the rest
    alphabetically by description.
    """
    config = config or EstimatingConfig()
    merged: dict[tuple[str, float | str], MaterialItem] = {}

    for item in items:
        description = item.description
        if not _is_sheet_good(description) and "Pre-cut" not in description:
            description = f"{description} {config.grade_suffix}"
        key = (description, item.length)
        if key in merged:
            merged[key].quantity += item.quantity
        else:
            merged[key] = item.model_copy(update={"description": description})

    return sorted(
        merged.values(),
        key=lambda m: ("Stud" not in m.description, m.description.lower()),
    )


def calculate_wall_materials(wall: WallSpec, config: EstimatingConfig | None = None) -> list[MaterialItem]:
    """Purchase list for a single wall optimized on its own."""
    return sort_materials(process_raw_cuts(extract_cuts(wall, config), config), config)


def aggregate_cuts(walls: Sequence[Wall], config: EstimatingConfig | None = None) -> RawCutSet:
    """Merge the raw cuts of several walls so they share stock pieces."""
    combined = RawCutSet()
    for wall in walls:
        combined.merge(extract_cuts(wall.details, config))
    return combined


def _floor_walls(floor: Floor, floors: Sequence[Floor], walls: Sequence[Wall]) -> list[Wall]:
    """Walls on a floor; unassigned walls belong to the first floor."""
    first_id = floors[0].id
    return [
        w for w in walls
        if w.floor_id == floor.id or (w.floor_id is None and floor.id == first_id)
    ]


def calculate_materials(
    walls: Sequence[Wall],
    floors: Sequence[Floor] = (),
    config: EstimatingConfig | None = None,
) -> ProjectMaterials:
    """
    Purchase lists for a project.

    Each wall is optimized alone for `by_wall`; walls sharing a floor are
    optimized together for `by_floor`; every wall is optimized together
    for `project_list`, so long stock is shared across walls.
    """
    config = config or EstimatingConfig()

    by_wall = {
        wall.id: WallMaterials(
            wall_name=wall.name,
            materials=calculate_wall_materials(wall.details, config),
        )
        for wall in walls
    }

    floor_ids = {f.id for f in floors}
    for wall in walls:
        if wall.floor_id is not None and wall.floor_id not in floor_ids:
            logger.warning("Wall %s references unknown floor %s", wall.id, wall.floor_id)

    by_floor: dict[str, FloorMaterials] = {}
    for floor in floors:
        floor_walls = _floor_walls(floor, floors, walls)
        if not floor_walls:
            continue
        raw = aggregate_cuts(floor_walls, config)
        by_floor[floor.id] = FloorMaterials(
            floor_name=floor.name,
            materials=sort_materials(process_raw_cuts(raw, config), config),
        )

    project_list = sort_materials(process_raw_cuts(aggregate_cuts(walls, config), config), config)
    total_inches = sum(w.details.length for w in walls)

    logger.info(
        "Calculated materials for %d wall(s) on %d floor(s): %d line item(s)",
        len(walls), len(by_floor), len(project_list),
    )

    return ProjectMaterials(
        project_list=project_list,
        by_wall=by_wall,
        by_floor=by_floor,
        total_walls=len(walls),
        total_linear_feet=math.floor(total_inches / 12 + 0.5),
    )
