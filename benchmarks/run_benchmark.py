"""Benchmark assembly and scanning across puzzle sizes."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List

import sys
import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tilejigsaw.assembler import TileAssembler
from tilejigsaw.edges import EdgeIndex
from tilejigsaw.scanner import SEA_MONSTER, PatternScanner
from tilejigsaw.tile import Orientation
from tilejigsaw.topology import find_corners
from tilejigsaw.utils import generate_puzzle


@dataclass
class BenchmarkRow:
    grid: str
    seed: int
    correct: bool
    assemble_sec: float
    scan_sec: float


def run_case(width: int, seed: int, tile_size: int) -> BenchmarkRow:
    puzzle = generate_puzzle(width=width, tile_size=tile_size, seed=seed)

    t0 = time.perf_counter()
    index = EdgeIndex.build(puzzle.tiles.values())
    corners = find_corners(index)
    assembly = TileAssembler(index, puzzle.tiles).assemble(min(corners))
    assemble_sec = time.perf_counter() - t0

    scanner = PatternScanner(SEA_MONSTER)
    t0 = time.perf_counter()
    for orientation in Orientation:
        scanner.scan_orientation(assembly.image, orientation)
    scan_sec = time.perf_counter() - t0

    correct = any(np.array_equal(o.apply(puzzle.image), assembly.image) for o in Orientation)
    return BenchmarkRow(
        grid=f"{width}x{width}",
        seed=seed,
        correct=correct,
        assemble_sec=assemble_sec,
        scan_sec=scan_sec,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark tile reassembly")
    parser.add_argument("--widths", type=int, nargs="+", default=[3, 6, 12])
    parser.add_argument("--seeds", type=int, default=3, help="Seeds per width (default: 3)")
    parser.add_argument("--tile-size", type=int, default=10)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    rows: List[BenchmarkRow] = []
    for width in args.widths:
        for seed in range(args.seeds):
            rows.append(run_case(width, seed, args.tile_size))

    print(f"{'grid':>6} {'seed':>4} {'ok':>3} {'assemble_s':>11} {'scan_s':>8}")
    for row in rows:
        print(
            f"{row.grid:>6} {row.seed:>4} {'y' if row.correct else 'n':>3} "
            f"{row.assemble_sec:>11.4f} {row.scan_sec:>8.4f}"
        )


if __name__ == "__main__":
    main()
