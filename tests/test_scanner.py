"""Pattern scanning tests."""

from __future__ import annotations

import numpy as np
import pytest

from tilejigsaw.errors import InconsistentPuzzleError, PatternNotFoundError
from tilejigsaw.scanner import (
    SEA_MONSTER,
    Pattern,
    PatternScanner,
    count_uncovered,
    find_matches,
)
from tilejigsaw.tile import Orientation


def _stamp(image: np.ndarray, pattern: Pattern, row: int, col: int) -> None:
    for dr, dc in pattern.offsets:
        image[row + dr, col + dc] = True


def _monster_stamp() -> np.ndarray:
    stamp = np.zeros((SEA_MONSTER.height, SEA_MONSTER.width), dtype=bool)
    _stamp(stamp, SEA_MONSTER, 0, 0)
    return stamp


def _base_image() -> np.ndarray:
    image = np.zeros((12, 30), dtype=bool)
    _stamp(image, SEA_MONSTER, 4, 2)
    image[0, 25:30] = [True, False, True, False, True]
    image[11, 0] = True
    return image


def test_sea_monster_shape() -> None:
    assert len(SEA_MONSTER) == 15
    assert (SEA_MONSTER.height, SEA_MONSTER.width) == (3, 20)
    assert (0, 18) in SEA_MONSTER.offsets


def test_pattern_offsets_are_normalized() -> None:
    """Offsets are shifted so the bounding box starts at the anchor."""
    pattern = Pattern(offsets=((-1, 18), (0, 0), (0, 19), (0, 0)))
    assert pattern.offsets == ((0, 18), (1, 0), (1, 19))
    with pytest.raises(ValueError):
        Pattern(offsets=())


def test_find_matches_marks_anchor() -> None:
    anchors = find_matches(_base_image(), SEA_MONSTER)
    assert anchors.shape == (10, 11)
    assert list(zip(*np.nonzero(anchors))) == [(4, 2)]


@pytest.mark.parametrize("orientation", list(Orientation))
def test_scan_finds_pattern_in_any_orientation(orientation: Orientation) -> None:
    """Whatever the image orientation, the pattern is found once and 4 pixels remain."""
    image = orientation.apply(_base_image())
    result = PatternScanner(SEA_MONSTER).scan(image)
    assert result.matches == 1
    assert result.active_pixels == 19
    assert result.covered_pixels == 15
    assert result.roughness == 4
    assert find_matches(result.orientation.apply(image), SEA_MONSTER).any()


def test_overlapping_matches_count_pixels_once() -> None:
    pattern = Pattern(offsets=((0, 0), (0, 1)))
    image = np.array([[True, True, True, False]])
    result = PatternScanner(pattern).scan(image)
    assert result.matches == 2
    assert result.covered_pixels == 3
    assert result.roughness == 0


def test_no_match_is_fatal() -> None:
    with pytest.raises(PatternNotFoundError):
        count_uncovered(np.zeros((30, 30), dtype=bool))
    with pytest.raises(InconsistentPuzzleError):
        count_uncovered(np.ones((2, 2), dtype=bool))


def test_first_orientation_wins_unless_strict() -> None:
    """A mirrored second copy is ignored by default and rejected in strict mode."""
    image = np.zeros((12, 30), dtype=bool)
    _stamp(image, SEA_MONSTER, 1, 1)
    image[6:9, 5:25] = np.fliplr(_monster_stamp())
    result = PatternScanner(SEA_MONSTER).scan(image)
    assert result.orientation is Orientation.IDENTITY
    assert result.matches == 1
    assert result.roughness == 15
    with pytest.raises(InconsistentPuzzleError, match="several orientations"):
        PatternScanner(SEA_MONSTER, strict=True).scan(image)


def test_strict_accepts_single_orientation() -> None:
    result = PatternScanner(SEA_MONSTER, strict=True).scan(_base_image())
    assert result.orientation is Orientation.IDENTITY


def test_rejects_non_2d_image() -> None:
    with pytest.raises(ValueError, match="2D"):
        PatternScanner(SEA_MONSTER).scan(np.zeros((2, 2, 2), dtype=bool))
