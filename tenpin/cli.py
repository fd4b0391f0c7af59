"""Command line entry point: score a game of ten-pin bowling."""

from __future__ import annotations

import argparse
import logging
import sys

from tenpin.game import BowlingGame, GameError

EXAMPLE_ROLLS = [1, 4, 4, 5, 6, 4, 5, 5, 10, 0, 1, 7, 3, 6, 4, 10, 2, 8, 6]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tenpin", description="Score a game of ten-pin bowling."
    )
    parser.add_argument(
        "rolls",
        nargs="*",
        type=int,
        help="pins knocked down by each roll (defaults to an example game)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="show the score frame by frame"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Score the given rolls and print the final total."""
    args = _parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")

    game = BowlingGame()
    try:
        for pins in args.rolls or EXAMPLE_ROLLS:
            game.roll(pins)
        total = game.score()
    except GameError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Final Total Score: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())