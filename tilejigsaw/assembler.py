"""Grid placement of oriented tiles and composite image stitching."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import isqrt
from typing import List, Mapping

import numpy as np

from .edges import Direction, EdgeIndex
from .errors import InconsistentPuzzleError
from .tile import Tile
from .topology import neighbour

logger = logging.getLogger(__name__)


@dataclass
class Assembly:
    """Result of assembling a tile set."""

    placements: np.ndarray  # [width, width] tile ids
    tiles: List[List[Tile]]  # oriented tiles in placement order
    image: np.ndarray  # stitched interiors, bool

    @property
    def width(self) -> int:
        return int(self.placements.shape[0])


def grid_width(tile_count: int) -> int:
    """Return the side of the square tile grid, validating the count."""
    width = isqrt(tile_count)
    if tile_count == 0 or width * width != tile_count:
        raise InconsistentPuzzleError(f"tile count {tile_count} is not a positive perfect square")
    return width


def stitch_interiors(tiles: List[List[Tile]]) -> np.ndarray:
    """Strip the border ring from every tile and join the interiors into one image."""
    rows = len(tiles)
    cols = len(tiles[0])
    inner = tiles[0][0].size - 2
    canvas = np.zeros((rows * inner, cols * inner), dtype=bool)
    for r in range(rows):
        for c in range(cols):
            y0 = r * inner
            x0 = c * inner
            canvas[y0 : y0 + inner, x0 : x0 + inner] = tiles[r][c].interior()
    return canvas


class TileAssembler:
    """Place tiles into a square grid, orienting each one against its placed neighbours."""

    def __init__(self, index: EdgeIndex, tiles: Mapping[int, Tile]) -> None:
        if set(index.tile_ids) != set(tiles):
            raise InconsistentPuzzleError("edge index and tile set describe different tiles")
        if index.tile_size < 3:
            raise InconsistentPuzzleError(f"tiles of side {index.tile_size} have no interior")
        self.index = index
        self.tiles = dict(tiles)
        self.width = grid_width(len(self.tiles))

    def assemble(self, corner_id: int) -> Assembly:
        """Build the full placement starting from ``corner_id`` at the top-left."""
        if corner_id not in self.tiles:
            raise InconsistentPuzzleError(f"unknown corner tile {corner_id}")
        width = self.width
        placed: List[List[Tile]] = [[] for _ in range(width)]

        placed[0].append(self._orient_corner(self.tiles[corner_id]))
        for r in range(1, width):
            placed[r].append(self._fit_below(placed[r - 1][0]))
        for r in range(width):
            for c in range(1, width):
                tile = self._fit_right_of(placed[r][c - 1])
                if r > 0 and tile.border("top") != placed[r - 1][c].border("bottom"):
                    raise InconsistentPuzzleError(
                        f"tile {tile.tile_id} at ({r}, {c}) does not match the tile above"
                    )
                placed[r].append(tile)

        placements = np.array([[t.tile_id for t in row] for row in placed], dtype=np.int64)
        if len(np.unique(placements)) != placements.size:
            raise InconsistentPuzzleError("a tile was placed more than once")

        image = stitch_interiors(placed)
        logger.info(
            "Assembled %dx%d tiles into a %dx%d image", width, width, image.shape[0], image.shape[1]
        )
        return Assembly(placements=placements, tiles=placed, image=image)

    def _orient_corner(self, tile: Tile) -> Tile:
        for _ in range(4):
            if (
                neighbour(tile, self.index, Direction.UP) is None
                and neighbour(tile, self.index, Direction.LEFT) is None
            ):
                return tile
            tile = tile.rotate()
        raise InconsistentPuzzleError(f"tile {tile.tile_id} cannot be turned into a top-left corner")

    def _required_neighbour(self, tile: Tile, direction: Direction) -> Tile:
        found = neighbour(tile, self.index, direction)
        if found is None:
            raise InconsistentPuzzleError(
                f"tile {tile.tile_id} has no neighbour {direction.name} where one is required"
            )
        return self.tiles[found]

    def _rotate_until(self, tile: Tile, direction: Direction, expected: int) -> Tile:
        for _ in range(4):
            if neighbour(tile, self.index, direction) == expected:
                return tile
            tile = tile.rotate()
        raise InconsistentPuzzleError(
            f"no rotation of tile {tile.tile_id} puts tile {expected} {direction.name}"
        )

    def _fit_below(self, above: Tile) -> Tile:
        tile = self._required_neighbour(above, Direction.DOWN)
        tile = self._rotate_until(tile, Direction.UP, above.tile_id)
        if tile.border("top") != above.border("bottom"):
            tile = tile.flip_horizontal()
        if tile.border("top") != above.border("bottom"):
            raise InconsistentPuzzleError(f"tile {tile.tile_id} cannot be aligned below {above.tile_id}")
        logger.debug("Placed %d below %d", tile.tile_id, above.tile_id)
        return tile

    def _fit_right_of(self, left: Tile) -> Tile:
        tile = self._required_neighbour(left, Direction.RIGHT)
        tile = self._rotate_until(tile, Direction.LEFT, left.tile_id)
        if tile.border("left") != left.border("right"):
            tile = tile.flip_vertical()
        if tile.border("left") != left.border("right"):
            raise InconsistentPuzzleError(f"tile {tile.tile_id} cannot be aligned right of {left.tile_id}")
        logger.debug("Placed %d right of %d", tile.tile_id, left.tile_id)
        return tile


def construct(index: EdgeIndex, tiles: Mapping[int, Tile], corner_id: int) -> np.ndarray:
    """Assemble ``tiles`` from ``corner_id`` and return the composite image."""
    return TileAssembler(index, tiles).assemble(corner_id).image
