"""Left/right decision graph walks and the LCM combiner."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Iterable, List, Mapping, Sequence, Set, Tuple

from loguru import logger

from .errors import CycleAlignmentError, PuzzleInputError, UnreachableTerminalError

Terminal = Callable[[str], bool]


class Direction(IntEnum):
    LEFT = 0
    RIGHT = 1

    @classmethod
    def from_char(cls, ch: str) -> "Direction":
        if ch == "L":
            return cls.LEFT
        if ch == "R":
            return cls.RIGHT
        raise PuzzleInputError(f"unknown direction {ch!r}")


def parse_instructions(text: str) -> Tuple[Direction, ...]:
    return tuple(Direction.from_char(ch) for ch in text.strip())


def exact(label: str) -> Terminal:
    return lambda node: node == label


def suffix(tail: str) -> Terminal:
    return lambda node: node.endswith(tail)


@dataclass(frozen=True)
class Hit:
    """Where a walk stopped: steps taken, node reached, next instruction index."""
    steps: int
    node: str
    index: int


@dataclass(frozen=True)
class DecisionGraph:
    nodes: Mapping[str, Tuple[str, str]]

    def successor(self, label: str, direction: Direction) -> str:
        try:
            return self.nodes[label][direction]
        except KeyError:
            raise PuzzleInputError(f"unknown node {label!r}") from None

    def walk_from(
        self,
        instructions: Sequence[Direction],
        start: str,
        is_terminal: Terminal,
        index: int = 0,
    ) -> Hit:
        """Follow ``instructions`` cyclically from ``start`` until a terminal.

        At least one step is always taken, so a terminal start node does not
        count as a hit.
        """
        if not instructions:
            raise PuzzleInputError("empty instruction sequence")
        n = len(instructions)
        seen: Set[Tuple[str, int]] = set()
        node = start
        steps = 0
        while True:
            state = (node, index)
            if state in seen:
                raise UnreachableTerminalError(f"walk from {start!r} never reaches a terminal node")
            seen.add(state)
            node = self.successor(node, instructions[index])
            index = (index + 1) % n
            steps += 1
            if is_terminal(node):
                return Hit(steps, node, index)

    def steps(self, instructions: Sequence[Direction], start: str, is_terminal: Terminal) -> int:
        return self.walk_from(instructions, start, is_terminal).steps

    def period(self, instructions: Sequence[Direction], start: str, is_terminal: Terminal) -> int:
        """Steps to the first terminal hit, checked to be the cycle period.

        The walk is continued from the first hit until its (node, instruction
        index) state comes round again.  The first hit must lie on that cycle,
        the cycle length must be a multiple of the first hit count, and the
        terminal hits along it must fall on exactly those multiples.
        """
        first = self.walk_from(instructions, start, is_terminal)
        n = len(instructions)
        origin = (first.node, first.index)
        seen: Set[Tuple[str, int]] = {origin}
        hits: List[int] = []
        node, index, offset = first.node, first.index, 0
        while True:
            node = self.successor(node, instructions[index])
            index = (index + 1) % n
            offset += 1
            if is_terminal(node):
                hits.append(offset)
            state = (node, index)
            if state == origin:
                break
            if state in seen:
                raise CycleAlignmentError(
                    f"walk from {start!r} first hits {first.node!r} before entering its cycle"
                )
            seen.add(state)

        expected = list(range(first.steps, offset + 1, first.steps))
        if offset % first.steps or hits != expected:
            raise CycleAlignmentError(
                f"walk from {start!r} first hits after {first.steps} steps, "
                f"but its {offset}-step cycle hits at offsets {hits}"
            )
        return first.steps

    def starts(self, start_suffix: str) -> List[str]:
        return sorted(label for label in self.nodes if label.endswith(start_suffix))

    def simultaneous_steps(
        self,
        instructions: Sequence[Direction],
        starts: Iterable[str],
        is_terminal: Terminal,
    ) -> int:
        periods = []
        for start in starts:
            p = self.period(instructions, start, is_terminal)
            logger.debug("start {} has period {}", start, p)
            periods.append(p)
        if not periods:
            raise PuzzleInputError("no start nodes")
        return lcm_all(periods)


def lcm_all(values: Iterable[int]) -> int:
    result = 1
    for v in values:
        result = math.lcm(result, v)
    return result


def parse_graph(text: str) -> DecisionGraph:
    """Parse lines of the form ``AAA = (BBB, CCC)``."""
    nodes: Dict[str, Tuple[str, str]] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        label, sep, rest = line.partition("=")
        if not sep:
            raise PuzzleInputError(f"expected '=' in node line {line!r}")
        left, comma, right = rest.strip().strip("()").partition(",")
        if not comma:
            raise PuzzleInputError(f"expected two successors in {line!r}")
        nodes[label.strip()] = (left.strip(), right.strip())
    return DecisionGraph(nodes)
