"""Square pixel tiles and their dihedral orientations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple

import numpy as np

ACTIVE = "#"
INACTIVE = "."

SIDES: Tuple[str, ...] = ("top", "bottom", "left", "right")


class Orientation(IntEnum):
    """The 8 symmetries of a square: optional mirror followed by quarter turns."""

    IDENTITY = 0
    ROT90 = 1
    ROT180 = 2
    ROT270 = 3
    MIRROR = 4
    MIRROR_ROT90 = 5
    MIRROR_ROT180 = 6
    MIRROR_ROT270 = 7

    @property
    def mirrored(self) -> bool:
        return self.value >= 4

    @property
    def quarter_turns(self) -> int:
        return self.value % 4

    def apply(self, grid: np.ndarray) -> np.ndarray:
        """Return a transformed copy of a square grid (mirror columns, then rotate)."""
        out = np.fliplr(grid) if self.mirrored else grid
        return np.ascontiguousarray(np.rot90(out, k=self.quarter_turns))


def signature(pixels: Iterable[bool]) -> str:
    """Encode a run of pixels as a symbol string."""
    return "".join(ACTIVE if bool(p) else INACTIVE for p in pixels)


@dataclass(frozen=True, eq=False)
class Tile:
    """A square tile with an identifier and a read-only boolean pixel grid.

    Orientation changes never mutate a tile; they return a new tile that keeps
    the same ``tile_id``.
    """

    tile_id: int
    grid: np.ndarray

    def __post_init__(self) -> None:
        grid = np.array(self.grid, dtype=bool)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"tile {self.tile_id} grid must be square, got shape {grid.shape}")
        grid.setflags(write=False)
        object.__setattr__(self, "grid", grid)

    @classmethod
    def from_rows(
        cls, tile_id: int, rows: Iterable[str], active: str = ACTIVE
    ) -> "Tile":
        """Create a tile from text rows where ``active`` marks a set pixel."""
        grid = np.array([[ch == active for ch in row] for row in rows], dtype=bool)
        return cls(tile_id=tile_id, grid=grid)

    @property
    def size(self) -> int:
        return int(self.grid.shape[0])

    def rotate(self) -> "Tile":
        """Rotate 90 degrees counter-clockwise."""
        return self.oriented(Orientation.ROT90)

    def flip_horizontal(self) -> "Tile":
        """Reverse column order."""
        return Tile(self.tile_id, np.fliplr(self.grid))

    def flip_vertical(self) -> "Tile":
        """Reverse row order."""
        return Tile(self.tile_id, np.flipud(self.grid))

    def oriented(self, orientation: Orientation) -> "Tile":
        return Tile(self.tile_id, orientation.apply(self.grid))

    def border(self, side: str) -> str:
        """Return the edge signature of one side.

        Top and bottom read left-to-right, left and right read top-to-bottom.
        """
        if side == "top":
            return signature(self.grid[0, :])
        if side == "bottom":
            return signature(self.grid[-1, :])
        if side == "left":
            return signature(self.grid[:, 0])
        if side == "right":
            return signature(self.grid[:, -1])
        raise ValueError(f"Unsupported side: {side}")

    def borders(self) -> Tuple[str, str, str, str]:
        """Return (top, bottom, left, right) signatures."""
        return tuple(self.border(side) for side in SIDES)  # type: ignore[return-value]

    def interior(self) -> np.ndarray:
        """Pixels with the outermost ring removed."""
        return self.grid[1:-1, 1:-1]

    def same_pixels(self, other: "Tile") -> bool:
        return bool(np.array_equal(self.grid, other.grid))

    def to_text(self, active: str = ACTIVE, inactive: str = INACTIVE) -> str:
        rows = ["".join(active if p else inactive for p in row) for row in self.grid]
        return "\n".join([f"Tile {self.tile_id}:"] + rows)

    def __str__(self) -> str:
        return self.to_text()
