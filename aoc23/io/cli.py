"""Command-line interface."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from aoc23.core.errors import PuzzleInputError, UnknownDayError, UnknownPartError
from aoc23.days import Part, get_day

from . import parser


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Solve one day of the 2023 puzzles")
    ap.add_argument("day", type=int, help="Day number")
    ap.add_argument("part", choices=[p.value for p in Part], help="Which variant to solve")
    ap.add_argument("input", type=Path, help="Path to the puzzle input")
    ap.add_argument("--config", type=Path, default=None, help="YAML config file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    args = ap.parse_args(argv)

    try:
        config = parser.load_config(args.config) if args.config else parser.Config()
        configure_logging("DEBUG" if args.verbose else config.log_level)

        day = get_day(args.day)(config)
        text = parser.read_input(args.input)
        logger.debug("read {} characters from {}", len(text), args.input)
        total = day.solve(Part.parse(args.part), text)
    except (OSError, PuzzleInputError, UnknownDayError, UnknownPartError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    print(f"total {total}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
