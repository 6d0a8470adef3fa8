"""Range remapping through a chain of named categories.

A :class:`Category` owns an ordered list of :class:`RangeMapping` triples and
names the category that follows it.  Values are threaded through the chain
one category at a time until no category is registered under the current
name.  Whole bands of values can be threaded the same way by splitting them
at mapping boundaries instead of walking every scalar.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Set, Tuple

from loguru import logger

from .errors import CategoryCycleError

Interval = Tuple[int, int]  # half-open [start, end)


@dataclass(frozen=True)
class RangeMapping:
    """Send ``[source, source + length)`` onto ``[destination, ...)``."""
    destination: int
    source: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source + self.length

    @property
    def offset(self) -> int:
        return self.destination - self.source

    def contains(self, value: int) -> bool:
        return self.source <= value < self.source_end


@dataclass(frozen=True)
class Category:
    name: str
    target: str
    mappings: Tuple[RangeMapping, ...] = ()

    def translate(self, value: int) -> int:
        for m in self.mappings:
            if m.contains(value):
                return value + m.offset
        return value

    def translate_interval(self, interval: Interval) -> List[Interval]:
        """Translate a band of values, splitting it at mapping boundaries.

        Mappings are tried in order; the part of the band claimed by an
        earlier mapping is not seen by later ones.  Whatever is left after
        every mapping passes through unchanged.
        """
        pending = [interval]
        done: List[Interval] = []
        for m in self.mappings:
            remaining: List[Interval] = []
            for start, end in pending:
                lo = max(start, m.source)
                hi = min(end, m.source_end)
                if lo >= hi:
                    remaining.append((start, end))
                    continue
                done.append((lo + m.offset, hi + m.offset))
                if start < lo:
                    remaining.append((start, lo))
                if hi < end:
                    remaining.append((hi, end))
            pending = remaining
            if not pending:
                break
        return done + pending


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Merge overlapping or touching half-open intervals; drop empty ones."""
    merged: List[Interval] = []
    for start, end in sorted(iv for iv in intervals if iv[0] < iv[1]):
        if merged and start <= merged[-1][1]:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


class CategoryChain:
    """Named categories linked by their ``target`` names."""

    def __init__(self, categories: Iterable[Category]):
        self.categories: Dict[str, Category] = {}
        for cat in categories:
            self.categories[cat.name] = cat

    def __len__(self) -> int:
        return len(self.categories)

    def _path(self, start: str) -> Iterable[Category]:
        visited: Set[str] = set()
        name = start
        while name in self.categories:
            if name in visited:
                raise CategoryCycleError(f"category chain revisits {name!r}")
            visited.add(name)
            cat = self.categories[name]
            yield cat
            name = cat.target

    def walk(self, value: int, start: str = "seed") -> int:
        for cat in self._path(start):
            value = cat.translate(value)
        return value

    def walk_intervals(self, intervals: Iterable[Interval], start: str = "seed") -> List[Interval]:
        bands = merge_intervals(intervals)
        for cat in self._path(start):
            split: List[Interval] = []
            for band in bands:
                split.extend(cat.translate_interval(band))
            bands = merge_intervals(split)
            logger.debug("{} -> {}: {} band(s)", cat.name, cat.target, len(bands))
        return bands
