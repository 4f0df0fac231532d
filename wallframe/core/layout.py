"""Shared wall layout — opening placement, stud positions, opening frames.

Member generation and cut extraction both read a single WallLayout
built here, so the 3D frame and the material list always agree.
"""

from __future__ import annotations
import logging
import math
from collections.abc import Iterable, Sequence

from wallframe.models import (
    Opening, OpeningType, WallSpec,
    PlacedOpening, OpeningFrame, BlockingBay, WallLayout,
)
from wallframe.models.parameters import (
    PLATE_THICKNESS, STUD_THICKNESS, STUD_DEPTHS, HEADER_DEPTHS,
    POSITION_DECIMALS, MIN_BLOCKING_GAP, BLOCKING_STAGGER,
)

logger = logging.getLogger(__name__)


def resolve_openings(wall_length: float, openings: Iterable[Opening]) -> list[PlacedOpening]:
    """
    Place every opening instance along the wall.

    Manual openings (quantity 1 with a center offset) sit where they are
    told. Everything else is expanded by quantity and spread with equal
    gaps over the wall length. Auto-flow instances come first in input
    order, then manual ones sorted by start. Manual and auto openings are
    not checked against each other.
    """
    manual: list[tuple[Opening, float]] = []
    auto: list[Opening] = []

    for op in openings:
        if not op.is_active:
            continue
        if op.is_manual:
            manual.append((op, op.center_offset - op.frame_width / 2))
        else:
            auto.extend([op] * op.quantity)

    if not manual and not auto:
        return []

    placed: list[PlacedOpening] = []

    if auto:
        total_auto_width = sum(op.frame_width for op in auto)
        spacing = max(0.0, (wall_length - total_auto_width) / (len(auto) + 1))
        x = spacing
        for op in auto:
            placed.append(_place(op, len(placed), x))
            x += op.frame_width + spacing

    manual.sort(key=lambda item: item[1])
    for op, x_start in manual:
        placed.append(_place(op, len(placed), x_start))

    logger.debug(
        "Resolved %d opening instance(s) (%d manual) on a %.3f in wall",
        len(placed), len(manual), wall_length,
    )
    return placed


def _place(op: Opening, index: int, x_start: float) -> PlacedOpening:
    width = op.frame_width
    return PlacedOpening(
        opening=op,
        index=index,
        x_start=x_start,
        x_end=x_start + width,
        center=x_start + width / 2,
        frame_width=width,
    )


def compute_stud_positions(wall: WallSpec) -> list[float]:
    """Sorted, deduplicated left edges of start, end and on-center studs."""
    candidates: list[float] = []

    for i in range(wall.start_studs):
        candidates.append(i * STUD_THICKNESS)

    for i in range(wall.end_studs):
        candidates.append(wall.length - (i + 1) * STUD_THICKNESS)

    lower = (wall.start_studs - 1) * STUD_THICKNESS
    upper = wall.length - wall.end_studs * STUD_THICKNESS
    i = 1
    while i * wall.stud_spacing < wall.length:
        base_left = i * wall.stud_spacing - wall.studs_on_center * STUD_THICKNESS / 2
        if lower < base_left < upper:
            for j in range(wall.studs_on_center):
                candidates.append(base_left + j * STUD_THICKNESS)
        i += 1

    return sorted({round(x, POSITION_DECIMALS) for x in candidates})


def inside_any(x: float, placements: Sequence[PlacedOpening]) -> bool:
    return any(p.contains(x) for p in placements)


def compute_blocking_bays(
    wall: WallSpec,
    stud_xs: Sequence[float],
    placements: Sequence[PlacedOpening],
) -> list[BlockingBay]:
    """Bays between adjacent surviving studs that get a row of blocks."""
    if wall.blocking_rows <= 0:
        return []

    bays: list[BlockingBay] = []
    row_pitch = wall.height / (wall.blocking_rows + 1)

    for i in range(len(stud_xs) - 1):
        left_face = stud_xs[i] + STUD_THICKNESS
        gap = stud_xs[i + 1] - left_face
        if gap <= MIN_BLOCKING_GAP:
            continue
        if inside_any(left_face + gap / 2, placements):
            continue
        # Neighbouring bays alternate up and down
        stagger = -BLOCKING_STAGGER if i % 2 == 0 else BLOCKING_STAGGER
        row_ys = tuple(row_pitch * r + stagger for r in range(1, wall.blocking_rows + 1))
        bays.append(BlockingBay(index=i, x=left_face, width=gap, row_ys=row_ys))

    return bays


def compute_opening_frame(
    wall: WallSpec,
    placement: PlacedOpening,
    top_plate_height: float,
    bottom_plate_height: float,
) -> OpeningFrame:
    """Header, jack, sill and cripple extents for one placed opening."""
    op = placement.opening
    header_depth = HEADER_DEPTHS[op.header_size]
    header_x = placement.x_start + op.king_studs_per_side * STUD_THICKNESS
    header_length = op.width + 2 * op.jack_studs_per_side * STUD_THICKNESS
    floor_y = wall.height - bottom_plate_height

    sill_y = None
    cripple_below_y = None
    cripple_below_height = 0.0

    if op.type == OpeningType.DOOR:
        header_y = floor_y - op.height - header_depth
        cripple_above = header_y - top_plate_height
        if cripple_above < 0:
            # Door too tall for the wall: header tucks under the top plate
            header_y = top_plate_height
            cripple_above = 0.0
    else:
        cripple_above = op.header_top_offset or 0.0
        header_y = top_plate_height + cripple_above

    jack_y = header_y + header_depth
    jack_height = max(0.0, floor_y - jack_y)

    if op.type == OpeningType.WINDOW:
        sill_y = jack_y + op.height
        cripple_below_y = sill_y + PLATE_THICKNESS
        cripple_below_height = floor_y - cripple_below_y

    return OpeningFrame(
        placement=placement,
        header_x=header_x,
        header_length=header_length,
        header_y=header_y,
        header_depth=header_depth,
        jack_y=jack_y,
        jack_height=jack_height,
        cripple_above_height=cripple_above,
        sill_y=sill_y,
        cripple_below_y=cripple_below_y,
        cripple_below_height=cripple_below_height,
        cripple_xs=tuple(_cripple_positions(header_x, header_length, wall.stud_spacing)),
    )


def _cripple_positions(header_x: float, header_length: float, spacing: float) -> list[float]:
    """Cripples stay on the wall's on-center layout, clipped to the header."""
    positions: list[float] = []
    layout_x = math.ceil(header_x / spacing) * spacing
    while layout_x < header_x + header_length:
        if layout_x > header_x:
            positions.append(layout_x - STUD_THICKNESS / 2)
        layout_x += spacing
    return positions


def layout_wall(wall: WallSpec) -> WallLayout:
    """Compute the complete placement for a wall."""
    top_plate_height = 2 * PLATE_THICKNESS if wall.double_top_plate else PLATE_THICKNESS
    bottom_plate_height = PLATE_THICKNESS

    placements = resolve_openings(wall.length, wall.openings)
    stud_xs = compute_stud_positions(wall)
    common = [
        x for x in stud_xs
        if not inside_any(x + STUD_THICKNESS / 2, placements)
    ]
    bays = compute_blocking_bays(wall, common, placements)
    frames = [
        compute_opening_frame(wall, p, top_plate_height, bottom_plate_height)
        for p in placements
    ]

    logger.debug(
        "Wall layout: %d stud positions, %d common, %d blocking bays, %d openings",
        len(stud_xs), len(common), len(bays), len(frames),
    )

    return WallLayout(
        wall=wall,
        stud_depth=STUD_DEPTHS[wall.stud_size],
        top_plate_height=top_plate_height,
        bottom_plate_height=bottom_plate_height,
        stud_height=wall.height - top_plate_height - bottom_plate_height,
        placements=tuple(placements),
        stud_xs=tuple(stud_xs),
        common_stud_xs=tuple(common),
        blocking_bays=tuple(bays),
        frames=tuple(frames),
    )
