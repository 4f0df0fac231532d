# File: tests/core/test_layout.py

"""
Unit tests for the shared wall layout.

Covers opening placement, stud positions, blocking bays and the
vertical extents of door and window frames.
"""

import math

import pytest

from wallframe.core.layout import (
    compute_stud_positions,
    layout_wall,
    resolve_openings,
)
from wallframe.models import Opening, OpeningType, WallSpec


def make_window(**kwargs) -> Opening:
    values = {"type": OpeningType.WINDOW, "width": 36, "height": 48}
    values.update(kwargs)
    return Opening(**values)


class TestResolveOpenings:
    """Test cases for resolve_openings."""

    def test_no_openings(self) -> None:
        assert resolve_openings(192, []) == []

    def test_inactive_openings_are_ignored(self) -> None:
        openings = [make_window(quantity=0), make_window(width=0)]
        assert resolve_openings(192, openings) == []

    def test_manual_opening_centered(self) -> None:
        op = make_window(center_offset=96)
        placed = resolve_openings(192, [op])

        assert len(placed) == 1
        assert placed[0].frame_width == 42
        assert placed[0].x_start == 96 - 42 / 2
        assert placed[0].x_end == 117
        assert placed[0].center == 96

    def test_single_auto_opening_is_centered(self) -> None:
        placed = resolve_openings(192, [make_window()])

        assert placed[0].x_start == 75
        assert placed[0].x_end == 117
        assert placed[0].center == 96

    def test_auto_openings_share_equal_gaps(self) -> None:
        placed = resolve_openings(192, [make_window(quantity=2)])

        # (192 - 84) / 3 = 36
        assert [p.x_start for p in placed] == [36, 114]
        assert placed[1].x_start - placed[0].x_end == pytest.approx(36)
        assert 192 - placed[1].x_end == pytest.approx(36)

    def test_quantity_above_one_ignores_center_offset(self) -> None:
        placed = resolve_openings(192, [make_window(quantity=3, center_offset=20)])

        assert len(placed) == 3
        assert all(not p.opening.is_manual for p in placed)
        assert placed[0].x_start != 20 - 21

    def test_auto_first_then_manual_sorted(self) -> None:
        openings = [
            make_window(id="m150", center_offset=150),
            make_window(id="a"),
            make_window(id="m40", center_offset=40),
            make_window(id="b", quantity=2),
        ]
        placed = resolve_openings(400, openings)

        assert [p.opening.id for p in placed] == ["a", "b", "b", "m40", "m150"]
        assert [p.index for p in placed] == [0, 1, 2, 3, 4]
        assert placed[3].key == "m40-3"

    def test_over_subscribed_wall_clamps_spacing(self) -> None:
        placed = resolve_openings(60, [make_window(quantity=2)])

        assert [p.x_start for p in placed] == [0, 42]
        assert placed[1].x_end == 84

    def test_frame_width_counts_kings_and_jacks(self) -> None:
        op = make_window(king_studs_per_side=2, jack_studs_per_side=1)
        placed = resolve_openings(192, [op])
        assert placed[0].frame_width == 36 + 2 * 3 * 1.5


class TestStudPositions:
    """Test cases for compute_stud_positions."""

    def test_sixteen_on_center(self) -> None:
        xs = compute_stud_positions(WallSpec(length=96))
        assert xs == [0, 15.25, 31.25, 47.25, 63.25, 79.25, 94.5]

    def test_twenty_four_on_center(self) -> None:
        xs = compute_stud_positions(WallSpec(length=96, stud_spacing=24))
        assert xs == [0, 23.25, 47.25, 71.25, 94.5]

    def test_multiple_studs_on_center(self) -> None:
        xs = compute_stud_positions(WallSpec(length=96, studs_on_center=2))
        assert xs == [0, 14.5, 16, 30.5, 32, 46.5, 48, 62.5, 64, 78.5, 80, 94.5]

    def test_start_and_end_stud_blocks(self) -> None:
        xs = compute_stud_positions(WallSpec(length=96, start_studs=2, end_studs=3))
        assert xs[:2] == [0, 1.5]
        assert xs[-3:] == [91.5, 93, 94.5]

    def test_duplicate_positions_are_merged(self) -> None:
        # The last on-center pair lands its second stud on the end stud
        xs = compute_stud_positions(WallSpec(length=49.5, studs_on_center=2))
        assert xs == [0, 14.5, 16, 30.5, 32, 46.5, 48]


class TestWallLayout:
    """Test cases for layout_wall."""

    def test_plate_heights(self) -> None:
        double = layout_wall(WallSpec(length=96))
        single = layout_wall(WallSpec(length=96, double_top_plate=False))

        assert double.top_plate_height == 3.0
        assert double.stud_height == 92.625
        assert single.top_plate_height == 1.5
        assert single.stud_height == 94.125

    def test_studs_inside_opening_are_suppressed(self, window_wall) -> None:
        layout = layout_wall(window_wall)

        assert len(layout.stud_xs) == 13
        assert layout.common_stud_xs == (
            0, 15.25, 31.25, 47.25, 63.25, 127.25, 143.25, 159.25, 175.25, 190.5,
        )

    def test_window_frame(self, window_wall) -> None:
        frame = layout_wall(window_wall).frames[0]

        assert frame.header_x == 76.5
        assert frame.header_length == 39
        assert frame.header_y == 3
        assert frame.header_depth == 7.25
        assert frame.jack_y == 10.25
        assert frame.jack_height == 85.375
        assert frame.cripple_above_height == 0
        assert not frame.has_cripples_above
        assert frame.sill_y == 58.25
        assert frame.cripple_below_y == 59.75
        assert frame.cripple_below_height == 35.875
        assert frame.cripple_xs == (79.25, 95.25, 111.25)

    def test_window_header_drop(self, window) -> None:
        dropped = window.model_copy(update={"header_top_offset": 6})
        frame = layout_wall(WallSpec(length=192, openings=(dropped,))).frames[0]

        assert frame.header_y == 9
        assert frame.cripple_above_height == 6
        assert frame.has_cripples_above
        assert frame.jack_height == 79.375
        assert frame.cripple_below_height == 29.875

    def test_door_frame(self, door) -> None:
        frame = layout_wall(WallSpec(length=120, openings=(door,))).frames[0]

        assert frame.placement.x_start == 39
        assert frame.header_y == pytest.approx(8.375)
        assert frame.cripple_above_height == pytest.approx(5.375)
        assert frame.jack_height == pytest.approx(80)
        assert frame.sill_y is None
        assert not frame.has_cripples_below
        assert frame.cripple_xs == (47.25, 63.25)

    def test_tall_door_pins_header_under_top_plate(self, door) -> None:
        tall = door.model_copy(update={"height": 92})
        frame = layout_wall(WallSpec(length=120, openings=(tall,))).frames[0]

        assert frame.header_y == 3
        assert frame.cripple_above_height == 0
        assert frame.jack_height == 85.375

    def test_blocking_bays_stagger(self) -> None:
        layout = layout_wall(WallSpec(length=96, blocking_rows=1))
        bays = layout.blocking_bays

        assert len(bays) == 6
        assert [b.width for b in bays] == [13.75, 14.5, 14.5, 14.5, 14.5, 13.75]
        mid = 97.125 / 2
        assert bays[0].row_ys == (mid - 1.5,)
        assert bays[1].row_ys == (mid + 1.5,)

    def test_blocking_rows_spread_over_height(self) -> None:
        layout = layout_wall(WallSpec(length=96, height=120, blocking_rows=2))
        assert layout.blocking_bays[0].row_ys == (38.5, 78.5)

    def test_no_blocking_across_openings(self, window_wall) -> None:
        layout = layout_wall(window_wall.model_copy(update={"blocking_rows": 1}))
        for bay in layout.blocking_bays:
            mid = bay.x + bay.width / 2
            assert not (75 < mid < 117)

    def test_narrow_bays_are_not_blocked(self) -> None:
        layout = layout_wall(WallSpec(length=96, studs_on_center=2, blocking_rows=1))
        assert all(b.width > 3 for b in layout.blocking_bays)
        assert not any(math.isclose(b.width, 0) for b in layout.blocking_bays)

    def test_window_header_dropped_below_floor(self, window) -> None:
        low = window.model_copy(update={"height": 20, "header_top_offset": 200})
        frame = layout_wall(WallSpec(length=192, openings=(low,))).frames[0]

        assert frame.jack_y > 97.125
        assert frame.jack_height == 0
        assert not frame.has_cripples_below
