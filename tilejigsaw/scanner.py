"""Sparse pattern search over all orientations of a composite image."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .errors import InconsistentPuzzleError, PatternNotFoundError
from .tile import ACTIVE, Orientation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pattern:
    """A sparse shape given as (row, col) offsets from its anchor."""

    offsets: Tuple[Tuple[int, int], ...]

    def __post_init__(self) -> None:
        if not self.offsets:
            raise ValueError("pattern must contain at least one offset")
        min_r = min(r for r, _ in self.offsets)
        min_c = min(c for _, c in self.offsets)
        # Anchor at the top-left of the bounding box so every offset is non-negative.
        normalized = tuple(sorted({(r - min_r, c - min_c) for r, c in self.offsets}))
        object.__setattr__(self, "offsets", normalized)

    @classmethod
    def from_text(cls, lines: Iterable[str], active: str = ACTIVE) -> "Pattern":
        offsets = [
            (r, c)
            for r, line in enumerate(lines)
            for c, ch in enumerate(line)
            if ch == active
        ]
        return cls(offsets=tuple(offsets))

    @property
    def height(self) -> int:
        return max(r for r, _ in self.offsets) + 1

    @property
    def width(self) -> int:
        return max(c for _, c in self.offsets) + 1

    def __len__(self) -> int:
        return len(self.offsets)


SEA_MONSTER = Pattern.from_text(
    [
        "                  # ",
        "#    ##    ##    ###",
        " #  #  #  #  #  #   ",
    ]
)


@dataclass
class ScanResult:
    """Outcome of scanning a composite image for a pattern."""

    orientation: Orientation
    matches: int
    active_pixels: int
    covered_pixels: int
    covered: np.ndarray  # bool mask, in the accepted orientation

    @property
    def roughness(self) -> int:
        return self.active_pixels - self.covered_pixels


def find_matches(image: np.ndarray, pattern: Pattern) -> np.ndarray:
    """Return a bool mask of anchor positions where every pattern offset is active.

    Only anchors that keep the whole pattern inside the image are considered.
    """
    h, w = image.shape
    out_h = h - pattern.height + 1
    out_w = w - pattern.width + 1
    if out_h <= 0 or out_w <= 0:
        return np.zeros((max(out_h, 0), max(out_w, 0)), dtype=bool)
    anchors = np.ones((out_h, out_w), dtype=bool)
    for dr, dc in pattern.offsets:
        anchors &= image[dr : dr + out_h, dc : dc + out_w]
    return anchors


def coverage_mask(image_shape: Tuple[int, int], anchors: np.ndarray, pattern: Pattern) -> np.ndarray:
    """Mark every pixel touched by a matched pattern instance."""
    covered = np.zeros(image_shape, dtype=bool)
    out_h, out_w = anchors.shape
    for dr, dc in pattern.offsets:
        covered[dr : dr + out_h, dc : dc + out_w] |= anchors
    return covered


class PatternScanner:
    """Search an image under its 8 orientations for a fixed pattern.

    The first orientation with at least one match is accepted. With
    ``strict=True`` every orientation is scanned and more than one matching
    orientation is an error.
    """

    def __init__(self, pattern: Pattern, strict: bool = False) -> None:
        self.pattern = pattern
        self.strict = strict

    def scan_orientation(self, image: np.ndarray, orientation: Orientation) -> ScanResult:
        oriented = orientation.apply(np.asarray(image, dtype=bool))
        anchors = find_matches(oriented, self.pattern)
        covered = coverage_mask(oriented.shape, anchors, self.pattern)
        return ScanResult(
            orientation=orientation,
            matches=int(np.count_nonzero(anchors)),
            active_pixels=int(np.count_nonzero(oriented)),
            covered_pixels=int(np.count_nonzero(covered)),
            covered=covered,
        )

    def scan(self, image: np.ndarray) -> ScanResult:
        image = np.asarray(image, dtype=bool)
        if image.ndim != 2:
            raise ValueError(f"image must be a 2D array, got shape {image.shape}")

        accepted: Optional[ScanResult] = None
        matching: List[Orientation] = []
        for orientation in Orientation:
            result = self.scan_orientation(image, orientation)
            logger.debug("Orientation %s: %d matches", orientation.name, result.matches)
            if result.matches == 0:
                continue
            matching.append(orientation)
            if accepted is None:
                accepted = result
            if not self.strict:
                break

        if accepted is None:
            raise PatternNotFoundError(
                f"pattern of {len(self.pattern)} pixels not found in any orientation"
            )
        if len(matching) > 1:
            raise InconsistentPuzzleError(
                f"pattern found in several orientations: {[o.name for o in matching]}"
            )
        logger.info(
            "Accepted orientation %s with %d matches, roughness %d",
            accepted.orientation.name,
            accepted.matches,
            accepted.roughness,
        )
        return accepted


def count_uncovered(image: np.ndarray, pattern: Pattern = SEA_MONSTER) -> int:
    """Active pixels not covered by any pattern match in the accepted orientation."""
    return PatternScanner(pattern).scan(image).roughness
