"""Edge signature index shared by topology analysis and assembly."""

from __future__ import annotations

import logging
from collections import defaultdict
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, Mapping, Set, Tuple

from .errors import InconsistentPuzzleError
from .tile import Tile

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Relative directions from a tile in its current orientation."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def side(self) -> str:
        return ("top", "bottom", "left", "right")[self.value]


class EdgeIndex:
    """Map every border signature, in both reading directions, to the tiles exposing it."""

    def __init__(
        self,
        signatures: Mapping[str, FrozenSet[int]],
        tile_borders: Mapping[int, Tuple[str, str, str, str]],
        tile_size: int,
    ) -> None:
        self._signatures = dict(signatures)
        self.tile_borders = dict(tile_borders)
        self.tile_size = tile_size

    @classmethod
    def build(cls, tiles: Iterable[Tile]) -> "EdgeIndex":
        """Index the four borders of every tile under the signature and its reverse."""
        found: Dict[str, Set[int]] = defaultdict(set)
        borders: Dict[int, Tuple[str, str, str, str]] = {}
        tile_size = None
        for tile in tiles:
            if tile_size is None:
                tile_size = tile.size
            elif tile.size != tile_size:
                raise InconsistentPuzzleError(
                    f"tile {tile.tile_id} has side {tile.size}, expected {tile_size}"
                )
            if tile.tile_id in borders:
                raise InconsistentPuzzleError(f"duplicate tile id {tile.tile_id}")
            borders[tile.tile_id] = tile.borders()
            for edge in borders[tile.tile_id]:
                found[edge].add(tile.tile_id)
                found[edge[::-1]].add(tile.tile_id)
        if tile_size is None:
            raise InconsistentPuzzleError("no tiles to index")

        logger.info("Indexed %d tiles into %d edge signatures", len(borders), len(found))
        return cls(
            signatures={edge: frozenset(ids) for edge, ids in found.items()},
            tile_borders=borders,
            tile_size=tile_size,
        )

    def lookup(self, edge: str) -> FrozenSet[int]:
        """Return all tiles sharing ``edge`` in either direction (empty if unknown)."""
        return self._signatures.get(edge, frozenset())

    def is_boundary(self, edge: str) -> bool:
        """True when no other tile shares this border."""
        return len(self.lookup(edge)) == 1

    @property
    def tile_ids(self) -> Tuple[int, ...]:
        return tuple(self.tile_borders)

    def __len__(self) -> int:
        return len(self._signatures)

    def __contains__(self, edge: object) -> bool:
        return edge in self._signatures
