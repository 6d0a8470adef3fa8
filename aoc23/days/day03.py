"""Day 3: part numbers and gear ratios in an engine schematic."""

from __future__ import annotations

from loguru import logger

from aoc23.core.grid import Schematic

from . import Day, register_day


@register_day
class GearRatios(Day):
    number = 3
    title = "Gear Ratios"

    def part1(self, text: str) -> int:
        schematic = Schematic.parse(text)
        parts = schematic.part_numbers()
        logger.debug("{} of {} numbers touch a symbol", len(parts), len(schematic.numbers))
        return sum(n.value for n in parts)

    def part2(self, text: str) -> int:
        return sum(Schematic.parse(text).gear_ratios())
