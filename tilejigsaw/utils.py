"""Utility helpers for reproducible tile puzzle experiments."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Set

import numpy as np

from .assembler import stitch_interiors
from .errors import InconsistentPuzzleError
from .tile import ACTIVE, INACTIVE, Orientation, Tile, signature

try:
    import cv2  # type: ignore
except ImportError:  # pragma: no cover
    cv2 = None


@dataclass
class GeneratedPuzzle:
    """A synthetic puzzle together with its ground truth."""

    tiles: Dict[int, Tile]
    placements: np.ndarray  # [width, width] tile ids before shuffling orientations
    image: np.ndarray  # composite of the unrotated tile interiors


def set_random_seed(seed: int = 42) -> np.random.Generator:
    """Create a deterministic numpy random generator."""
    return np.random.default_rng(seed)


def _draw_unique_edge(
    rng: np.random.Generator, segment: np.ndarray, used: Set[str], max_attempts: int
) -> None:
    """Redraw the inner pixels of ``segment`` in place until its signature is unused.

    The two end pixels are shared with crossing edges and stay fixed.
    """
    for _ in range(max_attempts):
        edge = signature(segment)
        if edge != edge[::-1] and edge not in used:
            used.add(edge)
            used.add(edge[::-1])
            return
        segment[1:-1] = rng.random(segment.shape[0] - 2) < 0.5
    raise InconsistentPuzzleError(
        f"could not draw a unique edge of length {segment.shape[0]} in {max_attempts} attempts"
    )


def generate_puzzle(
    width: int = 3,
    tile_size: int = 10,
    seed: int = 42,
    density: float = 0.5,
    max_attempts: int = 1000,
) -> GeneratedPuzzle:
    """Cut a random image into ``width x width`` tiles whose neighbours share borders.

    Every physical border is unique and non-palindromic, so the puzzle has a
    single solution. Each tile gets a random orientation and a random 4-digit id.
    """
    if width < 2 or tile_size < 5:
        raise ValueError("width must be >= 2 and tile_size >= 5")
    rng = set_random_seed(seed)
    step = tile_size - 1
    side = width * step + 1
    full = rng.random((side, side)) < density

    used: Set[str] = set()
    for line in range(width + 1):
        for cell in range(width):
            fixed = line * step
            start = cell * step
            _draw_unique_edge(rng, full[fixed, start : start + tile_size], used, max_attempts)
            _draw_unique_edge(rng, full[start : start + tile_size, fixed], used, max_attempts)

    ids = rng.choice(np.arange(1000, 10000), size=width * width, replace=False)
    placements = ids.reshape(width, width).astype(np.int64)
    grid: List[List[Tile]] = []
    for r in range(width):
        row = []
        for c in range(width):
            pixels = full[r * step : r * step + tile_size, c * step : c * step + tile_size]
            row.append(Tile(int(placements[r, c]), pixels))
        grid.append(row)

    tiles: Dict[int, Tile] = {}
    for row in grid:
        for tile in row:
            orientation = Orientation(int(rng.integers(0, len(Orientation))))
            tiles[tile.tile_id] = tile.oriented(orientation)
    return GeneratedPuzzle(tiles=tiles, placements=placements, image=stitch_interiors(grid))


def tiles_to_text(tiles: Dict[int, Tile]) -> str:
    """Render tiles in the block format accepted by the parser."""
    return "\n\n".join(tile.to_text() for tile in tiles.values()) + "\n"


def render_image(image: np.ndarray, active: str = ACTIVE, inactive: str = INACTIVE) -> str:
    """Render a boolean image as text rows."""
    return "\n".join("".join(active if p else inactive for p in row) for row in image)


def to_display_image(image: np.ndarray, highlight: np.ndarray | None = None) -> np.ndarray:
    """Convert a boolean image to RGB uint8, optionally highlighting a mask in red."""
    gray = np.where(image, 255, 30).astype(np.uint8)
    rgb = np.repeat(gray[:, :, None], 3, axis=2)
    if highlight is not None:
        rgb[highlight] = (220, 40, 40)
    return rgb


def save_image(path: Path, image: np.ndarray) -> None:
    """Save an RGB image to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if cv2 is not None:
        bgr = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
        ok = cv2.imwrite(str(path), bgr)
        if not ok:
            raise ValueError(f"failed to write image to path: {path}")
        return

    import matplotlib.pyplot as plt

    plt.imsave(path, image.astype(np.uint8))
