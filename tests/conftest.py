"""Shared fixtures for tile reassembly tests."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import pytest

from tilejigsaw.edges import EdgeIndex
from tilejigsaw.parser import parse_tiles
from tilejigsaw.tile import Tile

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def sample_text() -> str:
    return (DATA_DIR / "sample_tiles.txt").read_text()


@pytest.fixture
def sample_tiles(sample_text: str) -> Dict[int, Tile]:
    return parse_tiles(sample_text)


@pytest.fixture
def sample_index(sample_tiles: Dict[int, Tile]) -> EdgeIndex:
    return EdgeIndex.build(sample_tiles.values())
