"""Day 8: walking the left/right network."""

from __future__ import annotations

from typing import Tuple

from aoc23.core.errors import PuzzleInputError
from aoc23.core.graph import DecisionGraph, Direction, exact, parse_graph, parse_instructions, suffix
from aoc23.core.tokenizer import split_sections

from . import Day, register_day


def parse_network(text: str) -> Tuple[Tuple[Direction, ...], DecisionGraph]:
    sections = split_sections(text)
    if len(sections) != 2:
        raise PuzzleInputError("expected instructions and a node list separated by a blank line")
    return parse_instructions(sections[0]), parse_graph(sections[1])


@register_day
class HauntedWasteland(Day):
    number = 8
    title = "Haunted Wasteland"

    def part1(self, text: str) -> int:
        instructions, graph = parse_network(text)
        return graph.steps(instructions, self.config.start_label, exact(self.config.terminal_label))

    def part2(self, text: str) -> int:
        instructions, graph = parse_network(text)
        starts = graph.starts(self.config.start_suffix)
        return graph.simultaneous_steps(instructions, starts, suffix(self.config.terminal_suffix))
