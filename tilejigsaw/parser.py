"""Parsing of tile text blocks into tiles."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from .errors import TileParseError
from .tile import ACTIVE, INACTIVE, Tile

_HEADER = re.compile(r"^Tile\s+(\d+):\s*$")


class TileParser:
    """Split text into ``Tile <id>:`` blocks of equal-size square grids."""

    def __init__(self, active: str = ACTIVE, inactive: str = INACTIVE) -> None:
        if len(active) != 1 or len(inactive) != 1 or active == inactive:
            raise ValueError("active and inactive must be two distinct single characters")
        self.active = active
        self.inactive = inactive

    def parse(self, text: str) -> Dict[int, Tile]:
        """Parse every block and return tiles keyed by id."""
        tiles: Dict[int, Tile] = {}
        size: Optional[int] = None
        for lines in self.blocks(text):
            tile = self.parse_block(lines, size)
            if tile.tile_id in tiles:
                raise TileParseError(f"duplicate tile id {tile.tile_id}")
            size = tile.size
            tiles[tile.tile_id] = tile
        if not tiles:
            raise TileParseError("no tiles found in input")
        return tiles

    def blocks(self, text: str) -> List[List[str]]:
        """Group lines into blocks separated by blank lines.

        Only line endings are stripped, so a space can serve as a pixel symbol.
        A whitespace-only line separates blocks unless it could be a row of pixels.
        """
        blocks: List[List[str]] = []
        current: List[str] = []
        for line in text.splitlines():
            if self._is_separator(line):
                if current:
                    blocks.append(current)
                    current = []
                continue
            current.append(line)
        if current:
            blocks.append(current)
        return blocks

    def _is_separator(self, line: str) -> bool:
        if not line:
            return True
        return not line.strip() and not self.inactive.isspace()

    def parse_block(self, lines: List[str], size: Optional[int] = None) -> Tile:
        """Parse one block; ``size`` pins the expected grid side."""
        match = _HEADER.match(lines[0].strip())
        if match is None:
            raise TileParseError(f"malformed tile header: {lines[0]!r}")
        tile_id = int(match.group(1))
        rows = lines[1:]
        expected = size if size is not None else len(rows)
        if expected == 0:
            raise TileParseError(f"tile {tile_id} has no rows")
        if len(rows) != expected:
            raise TileParseError(f"tile {tile_id} has {len(rows)} rows, expected {expected}")
        allowed = {self.active, self.inactive}
        for number, row in enumerate(rows, start=1):
            if len(row) != expected:
                raise TileParseError(
                    f"tile {tile_id} row {number} has {len(row)} columns, expected {expected}"
                )
            unknown = set(row) - allowed
            if unknown:
                raise TileParseError(
                    f"tile {tile_id} row {number} has unknown symbols {sorted(unknown)}"
                )
        return Tile.from_rows(tile_id, rows, active=self.active)


def parse_tiles(text: str, active: str = ACTIVE, inactive: str = INACTIVE) -> Dict[int, Tile]:
    """Parse tile text with the given symbols."""
    return TileParser(active=active, inactive=inactive).parse(text)
