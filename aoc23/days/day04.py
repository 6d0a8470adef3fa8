"""Day 4: scratchcard points and copies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List

from aoc23.core.errors import PuzzleInputError
from aoc23.core.tokenizer import integers, lines, split_label

from . import Day, register_day


@dataclass(frozen=True)
class Card:
    id: int
    winning: FrozenSet[int]
    held: FrozenSet[int]

    @property
    def matches(self) -> int:
        return len(self.winning & self.held)

    @property
    def points(self) -> int:
        return 1 << (self.matches - 1) if self.matches else 0


def parse_card(line: str) -> Card:
    label, rest = split_label(line)
    winning, bar, held = rest.partition("|")
    if not bar:
        raise PuzzleInputError(f"expected '|' in card {label!r}")
    return Card(integers(label)[0], frozenset(integers(winning)), frozenset(integers(held)))


def count_copies(cards: List[Card]) -> List[int]:
    """Number of copies held of each card once every win is cashed in."""
    copies = [1] * len(cards)
    for i, card in enumerate(cards):
        for j in range(i + 1, min(i + 1 + card.matches, len(cards))):
            copies[j] += copies[i]
    return copies


@register_day
class Scratchcards(Day):
    number = 4
    title = "Scratchcards"

    def part1(self, text: str) -> int:
        return sum(parse_card(line).points for line in lines(text))

    def part2(self, text: str) -> int:
        return sum(count_copies([parse_card(line) for line in lines(text)]))
