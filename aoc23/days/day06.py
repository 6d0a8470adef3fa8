"""Day 6: ways to beat each boat race record."""

from __future__ import annotations

import math
from typing import List, Tuple

from aoc23.core.errors import PuzzleInputError
from aoc23.core.tokenizer import integers, lines, split_label

from . import Day, register_day


def ways_to_win(time: int, record: int) -> int:
    """Count hold times ``h`` in ``[0, time]`` with ``h * (time - h) > record``."""
    disc = time * time - 4 * record
    if disc <= 0:
        return 0
    lo = max(0, (time - math.isqrt(disc)) // 2 - 1)
    while lo <= time and lo * (time - lo) <= record:
        lo += 1
    hi = time - lo
    return hi - lo + 1 if lo <= hi else 0


def parse_races(text: str) -> Tuple[List[int], List[int]]:
    rows = {}
    for line in lines(text):
        label, rest = split_label(line)
        rows[label.lower()] = rest
    try:
        return integers(rows["time"]), integers(rows["distance"])
    except KeyError as exc:
        raise PuzzleInputError(f"missing {exc.args[0]!r} line") from None


@register_day
class WaitForIt(Day):
    number = 6
    title = "Wait For It"

    def part1(self, text: str) -> int:
        times, records = parse_races(text)
        if len(times) != len(records):
            raise PuzzleInputError("time and distance counts differ")
        return math.prod(ways_to_win(t, d) for t, d in zip(times, records))

    def part2(self, text: str) -> int:
        times, records = parse_races(text)
        time = int("".join(map(str, times)))
        record = int("".join(map(str, records)))
        return ways_to_win(time, record)
