"""Engine schematic scanning.

Numbers are maximal horizontal digit runs; every other character that is not
``.`` is a symbol.  Adjacency is 8-directional and keyed by grid position, so
two symbols never collide and a number is counted once per symbol however
many of its digits touch it.
"""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Tuple

from .tokenizer import digit_runs, is_digit

Position = Tuple[int, int]  # (row, col)

BLANK = "."
GEAR = "*"


@dataclass(frozen=True)
class PartNumber:
    value: int
    row: int
    start: int
    end: int  # exclusive

    def border(self) -> Iterator[Position]:
        """Positions around the number, including diagonals."""
        for r in (self.row - 1, self.row + 1):
            for c in range(self.start - 1, self.end + 1):
                yield r, c
        yield self.row, self.start - 1
        yield self.row, self.end


class Schematic:
    def __init__(self, rows: List[str]):
        self.rows = rows
        self.numbers: List[PartNumber] = [
            PartNumber(value, r, start, end)
            for r, row in enumerate(rows)
            for value, start, end in digit_runs(row)
        ]
        self.symbols: Dict[Position, str] = {
            (r, c): ch
            for r, row in enumerate(rows)
            for c, ch in enumerate(row)
            if ch != BLANK and not is_digit(ch)
        }

    @classmethod
    def parse(cls, text: str) -> "Schematic":
        rows = [line.rstrip() for line in text.splitlines()]
        while rows and not rows[-1]:
            rows.pop()
        return cls(rows)

    def adjacent_symbols(self, number: PartNumber) -> FrozenSet[Position]:
        return frozenset(pos for pos in number.border() if pos in self.symbols)

    def part_numbers(self) -> List[PartNumber]:
        return [n for n in self.numbers if self.adjacent_symbols(n)]

    def gear_ratios(self) -> List[int]:
        by_gear: Dict[Position, List[PartNumber]] = defaultdict(list)
        for number in self.numbers:
            for pos in self.adjacent_symbols(number):
                if self.symbols[pos] == GEAR:
                    by_gear[pos].append(number)
        ratios = []
        for pos in sorted(by_gear):
            distinct = set(by_gear[pos])
            if len(distinct) >= 2:
                ratios.append(math.prod(n.value for n in distinct))
        return ratios
