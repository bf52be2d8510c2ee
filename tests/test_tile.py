"""Tile orientation and border tests."""

from __future__ import annotations

import numpy as np
import pytest

from tilejigsaw.tile import Orientation, Tile


def _asymmetric_tile() -> Tile:
    return Tile.from_rows(7, ["##..", "#...", "...#", ".#.."])


def test_rotate_four_times_is_identity() -> None:
    """Four quarter turns restore the grid."""
    tile = _asymmetric_tile()
    turned = tile.rotate().rotate().rotate().rotate()
    assert turned.same_pixels(tile)
    assert turned.tile_id == tile.tile_id


def test_flips_are_self_inverse() -> None:
    """Mirroring twice on the same axis restores the grid."""
    tile = _asymmetric_tile()
    assert tile.flip_horizontal().flip_horizontal().same_pixels(tile)
    assert tile.flip_vertical().flip_vertical().same_pixels(tile)
    assert not tile.flip_horizontal().same_pixels(tile)


def test_rotate_is_counter_clockwise() -> None:
    """The right column becomes the top row after one turn."""
    tile = Tile.from_rows(1, ["#..", "..#", "..."])
    turned = tile.rotate()
    assert turned.border("top") == tile.border("right")
    assert turned.to_text().splitlines()[1:] == [".#.", "...", "#.."]


def test_borders_read_in_fixed_direction() -> None:
    """Top/bottom read left-to-right and left/right read top-to-bottom."""
    tile = _asymmetric_tile()
    assert tile.border("top") == "##.."
    assert tile.border("bottom") == ".#.."
    assert tile.border("left") == "##.."
    assert tile.border("right") == "..#."
    assert tile.borders() == ("##..", ".#..", "##..", "..#.")


def test_border_unknown_side_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported side"):
        _asymmetric_tile().border("middle")


def test_non_square_grid_rejected() -> None:
    with pytest.raises(ValueError, match="must be square"):
        Tile(1, np.zeros((3, 4), dtype=bool))


def test_orientation_changes_do_not_mutate() -> None:
    """Orientation methods return new tiles and grids are read-only."""
    tile = _asymmetric_tile()
    before = tile.grid.copy()
    tile.rotate()
    tile.flip_horizontal()
    np.testing.assert_array_equal(tile.grid, before)
    with pytest.raises(ValueError):
        tile.grid[0, 0] = False


def test_eight_orientations_are_distinct() -> None:
    """An asymmetric tile has 8 different orientations."""
    tile = _asymmetric_tile()
    rendered = {tile.oriented(o).to_text() for o in Orientation}
    assert len(rendered) == 8


def test_orientation_is_mirror_then_rotation() -> None:
    tile = _asymmetric_tile()
    expected = tile.flip_horizontal().rotate().rotate().rotate()
    assert tile.oriented(Orientation.MIRROR_ROT270).same_pixels(expected)
    assert Orientation.MIRROR_ROT270.mirrored
    assert Orientation.MIRROR_ROT270.quarter_turns == 3


def test_interior_strips_border_ring() -> None:
    tile = Tile.from_rows(3, ["....", ".#..", "..#.", "...."])
    np.testing.assert_array_equal(tile.interior(), np.array([[True, False], [False, True]]))


def test_to_text_includes_header() -> None:
    text = str(Tile.from_rows(2311, ["#.", ".#"]))
    assert text == "Tile 2311:\n#.\n.#"
