"""Day 1: calibration values from the first and last digit of each line."""

from __future__ import annotations

from typing import Optional

from aoc23.core.errors import PuzzleInputError
from aoc23.core.tokenizer import is_digit, keyword_at, keyword_ending_at, lines

from . import Day, register_day

DIGIT_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def first_digit(line: str, words: bool = False) -> Optional[int]:
    for pos, ch in enumerate(line):
        if is_digit(ch):
            return int(ch)
        if words:
            word = keyword_at(line, pos, DIGIT_WORDS)
            if word:
                return DIGIT_WORDS[word]
    return None


def last_digit(line: str, words: bool = False) -> Optional[int]:
    for pos in range(len(line) - 1, -1, -1):
        if is_digit(line[pos]):
            return int(line[pos])
        if words:
            word = keyword_ending_at(line, pos + 1, DIGIT_WORDS)
            if word:
                return DIGIT_WORDS[word]
    return None


def calibration_value(line: str, words: bool = False) -> int:
    first = first_digit(line, words)
    last = last_digit(line, words)
    if first is None or last is None:
        raise PuzzleInputError(f"no digit in line {line!r}")
    return first * 10 + last


@register_day
class Trebuchet(Day):
    number = 1
    title = "Trebuchet?!"

    def part1(self, text: str) -> int:
        return sum(calibration_value(line) for line in lines(text))

    def part2(self, text: str) -> int:
        return sum(calibration_value(line, words=True) for line in lines(text))
