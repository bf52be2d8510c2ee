"""Square tile reassembly and pattern search package."""

from .assembler import Assembly, TileAssembler, construct
from .edges import Direction, EdgeIndex
from .errors import InconsistentPuzzleError, PatternNotFoundError, PuzzleError, TileParseError
from .parser import TileParser, parse_tiles
from .pipeline import JigsawReassembler, ReassemblyConfig, ReassemblyResult
from .scanner import SEA_MONSTER, Pattern, PatternScanner, ScanResult, count_uncovered
from .tile import Orientation, Tile
from .topology import TileKind, classify_tiles, corner_product, find_corners, neighbour

__all__ = [
    "Tile",
    "Orientation",
    "Direction",
    "EdgeIndex",
    "TileKind",
    "classify_tiles",
    "find_corners",
    "corner_product",
    "neighbour",
    "Assembly",
    "TileAssembler",
    "construct",
    "Pattern",
    "SEA_MONSTER",
    "PatternScanner",
    "ScanResult",
    "count_uncovered",
    "TileParser",
    "parse_tiles",
    "ReassemblyConfig",
    "JigsawReassembler",
    "ReassemblyResult",
    "PuzzleError",
    "TileParseError",
    "InconsistentPuzzleError",
    "PatternNotFoundError",
]
