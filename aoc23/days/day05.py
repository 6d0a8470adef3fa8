"""Day 5: seeds threaded through the almanac's category chain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from loguru import logger

from aoc23.core.errors import PuzzleInputError
from aoc23.core.intervals import Category, CategoryChain, Interval, RangeMapping
from aoc23.core.tokenizer import integers, split_label, split_sections

from . import Day, register_day


@dataclass
class Almanac:
    seeds: List[int]
    chain: CategoryChain

    def seed_ranges(self) -> List[Interval]:
        if len(self.seeds) % 2:
            raise PuzzleInputError("seed ranges must come in (start, length) pairs")
        pairs = zip(self.seeds[::2], self.seeds[1::2])
        return [(start, start + length) for start, length in pairs]


def parse_category(section: str) -> Category:
    header, *rows = section.splitlines()
    name = header.split()[0]
    source, sep, target = name.partition("-to-")
    if not sep:
        raise PuzzleInputError(f"bad map header {header!r}")
    mappings: List[RangeMapping] = []
    for row in rows:
        numbers = integers(row)
        if len(numbers) != 3:
            raise PuzzleInputError(f"expected three numbers in {row!r}")
        mappings.append(RangeMapping(*numbers))
    return Category(source, target, tuple(mappings))


def parse_almanac(text: str) -> Almanac:
    sections = split_sections(text)
    if not sections:
        raise PuzzleInputError("empty almanac")
    label, seeds = split_label(sections[0])
    if label != "seeds":
        raise PuzzleInputError(f"expected seeds line, got {label!r}")
    chain = CategoryChain(parse_category(s) for s in sections[1:])
    logger.debug("almanac: {} seeds, {} categories", len(integers(seeds)), len(chain))
    return Almanac(integers(seeds), chain)


@register_day
class SeedFertilizer(Day):
    number = 5
    title = "If You Give A Seed A Fertilizer"

    def part1(self, text: str) -> int:
        almanac = parse_almanac(text)
        if not almanac.seeds:
            raise PuzzleInputError("no seeds")
        start = self.config.seed_category
        return min(almanac.chain.walk(seed, start) for seed in almanac.seeds)

    def part2(self, text: str) -> int:
        almanac = parse_almanac(text)
        bands = almanac.chain.walk_intervals(almanac.seed_ranges(), self.config.seed_category)
        if not bands:
            raise PuzzleInputError("no seeds")
        return bands[0][0]
