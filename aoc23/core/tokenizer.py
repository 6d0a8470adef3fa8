"""Small text scanning helpers shared by the day solvers."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import PuzzleInputError

DIGITS = frozenset("0123456789")

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")
_BLANK_LINE = re.compile(r"\n[ \t\r]*\n")


def is_digit(ch: str) -> bool:
    return ch in DIGITS


def integers(text: str, signed: bool = False) -> List[int]:
    """Return every maximal run of decimal digits in ``text`` as an int.

    With ``signed`` set, a ``-`` directly in front of a run makes it negative.
    """
    pattern = _SIGNED if signed else _UNSIGNED
    return [int(m.group(0)) for m in pattern.finditer(text)]


def digit_runs(line: str) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(value, start, end)`` for each digit run, ``end`` exclusive."""
    for m in _UNSIGNED.finditer(line):
        yield int(m.group(0)), m.start(), m.end()


def keyword_at(text: str, pos: int, keywords: Iterable[str]) -> Optional[str]:
    """Return the keyword that starts exactly at ``pos``, if any."""
    for word in keywords:
        if text.startswith(word, pos):
            return word
    return None


def keyword_ending_at(text: str, end: int, keywords: Iterable[str]) -> Optional[str]:
    """Return the keyword whose last character sits at ``end - 1``, if any."""
    for word in keywords:
        start = end - len(word)
        if start >= 0 and text.startswith(word, start):
            return word
    return None


def split_sections(text: str) -> List[str]:
    """Split ``text`` on blank lines, dropping empty sections."""
    return [s.strip() for s in _BLANK_LINE.split(text.strip()) if s.strip()]


def split_label(line: str, sep: str = ":") -> Tuple[str, str]:
    """Split ``"Game 3: payload"`` into ``("Game 3", "payload")``."""
    label, found, rest = line.partition(sep)
    if not found:
        raise PuzzleInputError(f"expected {sep!r} in line {line!r}")
    return label.strip(), rest.strip()


def lines(text: str) -> List[str]:
    """Non-blank lines of ``text`` with surrounding whitespace removed."""
    return [ln.strip() for ln in text.splitlines() if ln.strip()]
