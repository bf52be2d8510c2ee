"""Corner/edge/interior classification and neighbour lookup."""

from __future__ import annotations

import logging
from enum import Enum
from math import prod
from typing import Dict, Optional, Set

from .edges import Direction, EdgeIndex
from .errors import InconsistentPuzzleError
from .tile import Tile

logger = logging.getLogger(__name__)


class TileKind(Enum):
    """Position class of a tile, by its number of unshared borders."""

    INTERIOR = 0
    EDGE = 1
    CORNER = 2


def unique_border_count(index: EdgeIndex, tile_id: int) -> int:
    """Count the raw borders of ``tile_id`` that no other tile shares."""
    return sum(1 for edge in index.tile_borders[tile_id] if index.is_boundary(edge))


def classify_tiles(index: EdgeIndex) -> Dict[int, TileKind]:
    """Classify every indexed tile as corner, edge or interior."""
    kinds: Dict[int, TileKind] = {}
    for tile_id in index.tile_ids:
        count = unique_border_count(index, tile_id)
        if count > 2:
            raise InconsistentPuzzleError(
                f"tile {tile_id} has {count} unmatched borders; at most 2 are possible"
            )
        kinds[tile_id] = TileKind(count)
    return kinds


def find_corners(index: EdgeIndex) -> Set[int]:
    """Return the ids of the 4 corner tiles.

    Raises InconsistentPuzzleError when the tile set does not have exactly
    4 tiles with two unmatched borders.
    """
    corners = {
        tile_id
        for tile_id in index.tile_ids
        if unique_border_count(index, tile_id) == 2
    }
    if len(corners) != 4:
        raise InconsistentPuzzleError(
            f"expected 4 corner tiles, found {len(corners)}: {sorted(corners)}"
        )
    logger.info("Corner tiles: %s", sorted(corners))
    return corners


def corner_product(index: EdgeIndex) -> int:
    """Product of the 4 corner tile ids."""
    return prod(find_corners(index))


def neighbour(tile: Tile, index: EdgeIndex, direction: Direction) -> Optional[int]:
    """Return the id of the tile sharing the border in ``direction``, if any.

    ``direction`` is relative to the tile's current orientation.
    """
    others = index.lookup(tile.border(direction.side)) - {tile.tile_id}
    if not others:
        return None
    if len(others) > 1:
        raise InconsistentPuzzleError(
            f"tile {tile.tile_id} border {direction.name} is shared by several tiles: "
            f"{sorted(others)}"
        )
    return next(iter(others))
