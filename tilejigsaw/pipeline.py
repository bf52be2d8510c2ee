"""End-to-end reassembly: corners, composite image and pattern roughness."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import prod
from typing import Mapping, Optional, Set

from .assembler import Assembly, TileAssembler
from .edges import EdgeIndex
from .errors import InconsistentPuzzleError
from .parser import TileParser
from .scanner import SEA_MONSTER, Pattern, PatternScanner, ScanResult
from .tile import Tile
from .topology import find_corners

logger = logging.getLogger(__name__)


@dataclass
class ReassemblyConfig:
    """Configuration for the reassembly pipeline."""

    pattern: Pattern = field(default_factory=lambda: SEA_MONSTER)
    strict_orientation: bool = False
    start_corner: Optional[int] = None


@dataclass
class ReassemblyResult:
    """Container for both reassembly outputs and the intermediate assembly."""

    corner_ids: Set[int]
    assembly: Assembly
    scan: ScanResult

    @property
    def corner_product(self) -> int:
        return prod(self.corner_ids)

    @property
    def roughness(self) -> int:
        return self.scan.roughness


class JigsawReassembler:
    """Run edge indexing, corner detection, assembly and pattern scanning in order."""

    def __init__(self, config: Optional[ReassemblyConfig] = None) -> None:
        self.config = config if config is not None else ReassemblyConfig()

    def solve(self, tiles: Mapping[int, Tile]) -> ReassemblyResult:
        logger.info("Solving %d tiles", len(tiles))
        index = EdgeIndex.build(tiles.values())
        corners = find_corners(index)

        start = self.config.start_corner
        if start is None:
            start = min(corners)
        elif start not in corners:
            raise InconsistentPuzzleError(
                f"start tile {start} is not a corner; corners are {sorted(corners)}"
            )

        assembly = TileAssembler(index, tiles).assemble(start)
        scanner = PatternScanner(self.config.pattern, strict=self.config.strict_orientation)
        scan = scanner.scan(assembly.image)
        return ReassemblyResult(corner_ids=corners, assembly=assembly, scan=scan)

    def solve_text(self, text: str, parser: Optional[TileParser] = None) -> ReassemblyResult:
        tiles = (parser or TileParser()).parse(text)
        return self.solve(tiles)
