"""Command-line entry point that opens a pong window."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .game import Game


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game; report an invalid window size on stderr."""
    parser = argparse.ArgumentParser(prog="pongjb", description="Two-player pong.")
    parser.add_argument("--width", type=float, default=1200.0, help="window width in pixels")
    parser.add_argument("--height", type=float, default=800.0, help="window height in pixels")
    parser.add_argument("--font", default=None, help="path to a TrueType font")
    args = parser.parse_args(argv)
    try:
        game = Game((args.width, args.height), font_path=args.font)
        game.run()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())