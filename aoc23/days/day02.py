"""Day 2: cube draws checked against bag limits."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from aoc23.core.errors import PuzzleInputError
from aoc23.core.tokenizer import integers, lines, split_label

from . import Day, register_day

COLOURS = ("red", "green", "blue")

Draw = Dict[str, int]


@dataclass
class Game:
    id: int
    draws: List[Draw] = field(default_factory=list)

    def is_possible(self, limits: Mapping[str, int]) -> bool:
        return all(count <= limits.get(colour, 0) for draw in self.draws for colour, count in draw.items())

    def minimum_set(self) -> Draw:
        needed = {colour: 0 for colour in COLOURS}
        for draw in self.draws:
            for colour, count in draw.items():
                needed[colour] = max(needed[colour], count)
        return needed

    def power(self) -> int:
        return math.prod(self.minimum_set().values())


def parse_draw(text: str) -> Draw:
    draw: Draw = {}
    for item in text.split(","):
        count, _, colour = item.strip().partition(" ")
        colour = colour.strip()
        if colour not in COLOURS:
            raise PuzzleInputError(f"unknown cube colour {colour!r}")
        draw[colour] = draw.get(colour, 0) + int(count)
    return draw


def parse_game(line: str) -> Game:
    label, rest = split_label(line)
    ids = integers(label)
    if len(ids) != 1:
        raise PuzzleInputError(f"bad game label {label!r}")
    return Game(ids[0], [parse_draw(part) for part in rest.split(";") if part.strip()])


@register_day
class CubeConundrum(Day):
    number = 2
    title = "Cube Conundrum"

    def part1(self, text: str) -> int:
        limits = self.config.cube_limits
        return sum(game.id for game in map(parse_game, lines(text)) if game.is_possible(limits))

    def part2(self, text: str) -> int:
        return sum(game.power() for game in map(parse_game, lines(text)))
