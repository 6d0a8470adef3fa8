"""Day 7: camel cards."""

from __future__ import annotations

from typing import List

from aoc23.core.errors import PuzzleInputError
from aoc23.core.hands import STANDARD_WEIGHTS, Hand, total_winnings, wildcard_weights
from aoc23.core.tokenizer import lines

from . import Day, register_day


def parse_hands(text: str) -> List[Hand]:
    hands = []
    for line in lines(text):
        parts = line.split()
        if len(parts) != 2:
            raise PuzzleInputError(f"expected 'CARDS BID', got {line!r}")
        hands.append(Hand(parts[0], int(parts[1])))
    return hands


@register_day
class CamelCards(Day):
    number = 7
    title = "Camel Cards"

    def part1(self, text: str) -> int:
        return total_winnings(parse_hands(text), STANDARD_WEIGHTS)

    def part2(self, text: str) -> int:
        wildcard = self.config.wildcard
        return total_winnings(parse_hands(text), wildcard_weights(wildcard), wildcard)
