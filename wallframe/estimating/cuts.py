"""Cut extraction — the wall layout as one-dimensional cut lengths.

Reads the same WallLayout the member rules use and emits exactly one cut
for every stick the generator would build. Stud lengths that match a
pre-cut SKU are tallied separately instead of being optimized.
"""

from __future__ import annotations
import logging

from wallframe.core.layout import layout_wall
from wallframe.models import (
    CutCategory, EstimatingConfig, RawCutSet, WallLayout, WallSpec,
)
from wallframe.models.parameters import SHEET_LABEL

logger = logging.getLogger(__name__)

SPACER_DESCRIPTION = '1/2" Plywood Spacer'


def sheet_description(material: str) -> str:
    return f"{material} Sheet ({SHEET_LABEL})"


def stud_lengths(layout: WallLayout) -> list[float]:
    """Every vertical stick: common studs, kings, jacks and cripples."""
    lengths = [layout.stud_height] * len(layout.common_stud_xs)

    for frame in layout.frames:
        op = frame.placement.opening
        lengths.extend([layout.stud_height] * (2 * op.king_studs_per_side))
        if frame.jack_height > 0:
            lengths.extend([frame.jack_height] * (2 * op.jack_studs_per_side))
        if frame.has_cripples_above:
            lengths.extend([frame.cripple_above_height] * len(frame.cripple_xs))
        if frame.has_cripples_below:
            lengths.extend([frame.cripple_below_height] * len(frame.cripple_xs))

    return lengths


def extract_cuts(wall: WallSpec, config: EstimatingConfig | None = None) -> RawCutSet:
    """Raw cut list for one wall, grouped by category and description."""
    config = config or EstimatingConfig()
    layout = layout_wall(wall)
    size = wall.stud_size.value
    raw = RawCutSet()

    # Plates
    plate = f"{size} Plate"
    bottom_plate = f"{size} PT Plate" if wall.pressure_treated_bottom_plate else plate
    for _ in range(2 if wall.double_top_plate else 1):
        raw.add(wall.length, CutCategory.PLATE, plate)
    raw.add(wall.length, CutCategory.PLATE, bottom_plate)

    if wall.sheathing:
        raw.add(wall.length * wall.height / 144, CutCategory.SHEET,
                sheet_description(wall.sheathing_type.value))

    # Studs, with pre-cut lengths pulled out
    for length in stud_lengths(layout):
        precut = next(
            (p for p in config.precut_lengths
             if abs(length - p.length) < config.precut_tolerance),
            None,
        )
        if precut is not None:
            raw.add_precut(f"{size} Pre-cut Studs", precut.label, precut.length)
        else:
            raw.add(length, CutCategory.STUD, f"{size} Stud")

    for bay in layout.blocking_bays:
        for _ in bay.row_ys:
            raw.add(bay.width, CutCategory.BLOCKING, f"{size} Blocking")

    for frame in layout.frames:
        op = frame.placement.opening
        if frame.sill_y is not None:
            raw.add(frame.header_length, CutCategory.PLATE, plate)
        header = f"{op.header_size.value} Header"
        for _ in range(op.header_ply):
            raw.add(frame.header_length, CutCategory.HEADER, header)
        if op.header_ply > 1:
            spacer_area = (op.header_ply - 1) * frame.header_depth * frame.header_length / 144
            raw.add(spacer_area, CutCategory.SHEET, SPACER_DESCRIPTION)

    logger.debug(
        "Extracted %d cut(s) and %d pre-cut stud(s) from a %.3f in wall",
        len(raw.cuts), sum(p.count for p in raw.precuts), wall.length,
    )
    return raw
