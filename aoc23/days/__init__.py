"""Day registry and base class."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Type

from loguru import logger

from aoc23.core.errors import UnknownDayError, UnknownPartError
from aoc23.io.parser import Config


class Part(str, Enum):
    PART1 = "part1"
    PART2 = "part2"

    @classmethod
    def parse(cls, value: str) -> "Part":
        try:
            return cls(value)
        except ValueError:
            raise UnknownPartError(f"unknown part {value!r}, expected part1 or part2") from None


class Day:
    """Base solver; subclasses implement ``part1`` and ``part2``."""
    number: int = 0
    title: str = ""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def part1(self, text: str) -> int:  # pragma: no cover - abstract
        raise NotImplementedError

    def part2(self, text: str) -> int:  # pragma: no cover - abstract
        raise NotImplementedError

    def solver(self, part: Part | str) -> Callable[[str], int]:
        if not isinstance(part, Part):
            part = Part.parse(part)
        table: Dict[Part, Callable[[str], int]] = {
            Part.PART1: self.part1,
            Part.PART2: self.part2,
        }
        return table[part]

    def solve(self, part: Part | str, text: str) -> int:
        func = self.solver(part)
        logger.debug("day {} ({}) {}", self.number, self.title, getattr(part, "value", part))
        return func(text)


DAY_REGISTRY: Dict[int, Type[Day]] = {}


def register_day(cls: Type[Day]) -> Type[Day]:
    DAY_REGISTRY[cls.number] = cls
    return cls


def get_day(number: int) -> Type[Day]:
    try:
        return DAY_REGISTRY[number]
    except KeyError:
        known = ", ".join(str(n) for n in sorted(DAY_REGISTRY))
        raise UnknownDayError(f"no solver for day {number} (known: {known})") from None


from . import day01, day02, day03, day04, day05, day06, day07, day08, day09  # noqa: E402,F401
