"""Corner detection, classification and neighbour lookup tests."""

from __future__ import annotations

from math import prod

import pytest

from tilejigsaw.edges import Direction, EdgeIndex
from tilejigsaw.errors import InconsistentPuzzleError
from tilejigsaw.topology import (
    TileKind,
    classify_tiles,
    corner_product,
    find_corners,
    neighbour,
)
from tilejigsaw.utils import generate_puzzle


def test_sample_corners(sample_index) -> None:
    """The sample has corners 1951, 3079, 2971 and 1171."""
    assert find_corners(sample_index) == {1951, 3079, 2971, 1171}
    assert corner_product(sample_index) == 20899048083289


def test_sample_classification(sample_index) -> None:
    kinds = classify_tiles(sample_index)
    assert kinds[1427] is TileKind.INTERIOR
    assert {k for k, v in kinds.items() if v is TileKind.EDGE} == {2311, 2729, 2473, 1489}
    assert sum(1 for v in kinds.values() if v is TileKind.CORNER) == 4


def test_neighbours_of_center(sample_tiles, sample_index) -> None:
    """Neighbours follow the tile's current orientation."""
    tile = sample_tiles[1427]
    assert neighbour(tile, sample_index, Direction.UP) == 1489
    assert neighbour(tile, sample_index, Direction.DOWN) == 2311
    assert neighbour(tile, sample_index, Direction.LEFT) == 2729
    assert neighbour(tile, sample_index, Direction.RIGHT) == 2473
    turned = tile.rotate()
    assert neighbour(turned, sample_index, Direction.UP) == 2473
    assert neighbour(turned.flip_vertical(), sample_index, Direction.UP) == 2729


def test_corner_has_two_missing_neighbours(sample_tiles, sample_index) -> None:
    tile = sample_tiles[1951]
    found = [neighbour(tile, sample_index, d) for d in Direction]
    assert found == [2729, None, None, 2311]


def test_corners_of_generated_puzzle() -> None:
    """Corners match the ground-truth placement; the product ignores order."""
    puzzle = generate_puzzle(width=5, seed=3)
    index = EdgeIndex.build(puzzle.tiles.values())
    p = puzzle.placements
    expected = {int(p[0, 0]), int(p[0, -1]), int(p[-1, 0]), int(p[-1, -1])}
    assert find_corners(index) == expected
    assert corner_product(index) == prod(sorted(expected, reverse=True))
    kinds = classify_tiles(index)
    assert sum(1 for v in kinds.values() if v is TileKind.INTERIOR) == 9


def test_missing_center_breaks_corner_count(sample_tiles) -> None:
    """Removing the interior tile exposes extra unmatched borders."""
    tiles = [t for k, t in sample_tiles.items() if k != 1427]
    with pytest.raises(InconsistentPuzzleError, match="expected 4 corner tiles"):
        find_corners(EdgeIndex.build(tiles))


def test_lone_tile_is_inconsistent(sample_tiles) -> None:
    index = EdgeIndex.build([sample_tiles[2311]])
    with pytest.raises(InconsistentPuzzleError, match="4 unmatched borders"):
        classify_tiles(index)
    with pytest.raises(InconsistentPuzzleError):
        find_corners(index)
