"""Exceptions raised by the solvers and the registry."""

from __future__ import annotations


class PuzzleInputError(ValueError):
    """The puzzle input is malformed or breaks an assumption of the solver."""


class CategoryCycleError(PuzzleInputError):
    """A category chain leads back to a category already visited."""


class UnreachableTerminalError(PuzzleInputError):
    """A graph walk repeats its state without reaching a terminal node."""


class CycleAlignmentError(PuzzleInputError):
    """A walk's first terminal hit does not match its cycle period."""


class UnknownDayError(LookupError):
    pass


class UnknownPartError(LookupError):
    pass
