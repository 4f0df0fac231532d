# tests/conftest.py
import pytest

from wallframe.models import Opening, OpeningType, WallSpec


@pytest.fixture
def window() -> Opening:
    """36x48 window, one king and one jack per side, 2-ply 2x8 header."""
    return Opening(id="w1", type=OpeningType.WINDOW, width=36, height=48)


@pytest.fixture
def door() -> Opening:
    """36x80 door, one king and one jack per side, 2-ply 2x8 header."""
    return Opening(id="d1", type=OpeningType.DOOR, width=36, height=80)


@pytest.fixture
def plain_wall() -> WallSpec:
    """8' wall, 2x4 at 16" O.C., double top plate, no openings."""
    return WallSpec(length=96)


@pytest.fixture
def window_wall(window) -> WallSpec:
    """16' wall with a single auto-placed window."""
    return WallSpec(length=192, height=97.125, openings=(window,))
