"""Day 9: extrapolating sequences from their difference tables."""

from __future__ import annotations

from typing import List, Sequence

from aoc23.core.tokenizer import integers, lines

from . import Day, register_day


def difference_table(values: Sequence[int]) -> List[List[int]]:
    """Rows of repeated differences, ending with an all-zero (or empty) row."""
    table = [list(values)]
    while any(table[-1]):
        row = table[-1]
        table.append([b - a for a, b in zip(row, row[1:])])
    return table


def extrapolate_forward(values: Sequence[int]) -> int:
    return sum(row[-1] for row in difference_table(values) if row)


def extrapolate_backward(values: Sequence[int]) -> int:
    result = 0
    for row in reversed(difference_table(values)):
        if row:
            result = row[0] - result
    return result


@register_day
class MirageMaintenance(Day):
    number = 9
    title = "Mirage Maintenance"

    def part1(self, text: str) -> int:
        return sum(extrapolate_forward(integers(line, signed=True)) for line in lines(text))

    def part2(self, text: str) -> int:
        return sum(extrapolate_backward(integers(line, signed=True)) for line in lines(text))
