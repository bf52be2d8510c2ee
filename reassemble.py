"""Reassemble a tile puzzle from text and report corner product and roughness."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tilejigsaw.errors import PuzzleError
from tilejigsaw.pipeline import JigsawReassembler, ReassemblyConfig
from tilejigsaw.utils import save_image, to_display_image


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Reassemble a square tile puzzle.")
    parser.add_argument("--input", required=True, help="Path to the tile text file")
    parser.add_argument(
        "--start-corner",
        type=int,
        default=None,
        help="Corner tile id placed at the top-left (default: smallest corner id)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if the pattern matches in more than one orientation",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Optional output path for the composite image with matches highlighted",
    )
    parser.add_argument("--show", action="store_true", help="Display the composite image")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args()


def main() -> int:
    """Run the reassembly pipeline on a tile file."""
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    input_path = Path(args.input)
    config = ReassemblyConfig(strict_orientation=args.strict, start_corner=args.start_corner)
    try:
        result = JigsawReassembler(config).solve_text(input_path.read_text())
    except PuzzleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    scan = result.scan
    display = to_display_image(scan.orientation.apply(result.assembly.image), highlight=scan.covered)

    print(f"Input: {input_path}")
    print(f"Corner tiles: {sorted(result.corner_ids)}")
    print(f"Corner product: {result.corner_product}")
    print(f"Grid: {result.assembly.width}x{result.assembly.width}")
    print(f"Pattern orientation: {scan.orientation.name} ({scan.matches} matches)")
    print(f"Roughness: {result.roughness}")

    if args.output is not None:
        output_path = Path(args.output)
        save_image(output_path, display)
        print(f"Output image: {output_path.resolve()}")

    if args.show:
        import matplotlib.pyplot as plt

        plt.imshow(display)
        plt.title("Composite")
        plt.axis("off")
        plt.tight_layout()
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
