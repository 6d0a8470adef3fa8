from pathlib import Path

import pytest

from aoc23.core.errors import PuzzleInputError
from aoc23.io.parser import Config, load_config, read_input

ROOT = Path(__file__).resolve().parent.parent


def test_load_sample_config():
    config = load_config(ROOT / "aoc23.yaml")
    assert config.log_level == "INFO"
    assert config.cube_limits == {"red": 12, "green": 13, "blue": 14}
    assert config.terminal_suffix == "Z"


def test_partial_config_keeps_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("cube_limits:\n  red: 20\nlog_level: debug\n", encoding="utf-8")
    config = load_config(path)
    assert config.cube_limits == {"red": 20, "green": 13, "blue": 14}
    assert config.log_level == "DEBUG"
    assert config.wildcard == Config().wildcard


def test_empty_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == Config()


def test_unknown_config_key(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("jokers: true\n", encoding="utf-8")
    with pytest.raises(PuzzleInputError):
        load_config(path)


def test_read_input():
    assert read_input(ROOT / "samples" / "day09.txt").splitlines()[0] == "0 3 6 9 12 15"
