from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict

import yaml

from aoc23.core.errors import PuzzleInputError


def _default_cube_limits() -> Dict[str, int]:
    return {"red": 12, "green": 13, "blue": 14}


@dataclass(frozen=True)
class Config:
    log_level: str = "WARNING"
    cube_limits: Dict[str, int] = field(default_factory=_default_cube_limits)
    wildcard: str = "J"
    seed_category: str = "seed"
    start_label: str = "AAA"
    terminal_label: str = "ZZZ"
    start_suffix: str = "A"
    terminal_suffix: str = "Z"


def read_input(path: str | Path) -> str:
    """Read a puzzle input file as UTF-8 text."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_config(path: str | Path) -> Config:
    """Load a YAML config file into a Config object.

    Keys that are absent keep their defaults; unknown keys are rejected.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise PuzzleInputError(f"{path}: expected a mapping at the top level")

    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise PuzzleInputError(f"{path}: unknown config key(s): {', '.join(unknown)}")

    options = dict(data)
    if "cube_limits" in options:
        limits = _default_cube_limits()
        limits.update({str(k): int(v) for k, v in (options["cube_limits"] or {}).items()})
        options["cube_limits"] = limits
    if "log_level" in options:
        options["log_level"] = str(options["log_level"]).upper()
    return Config(**options)
