import pytest
from hypothesis import given
from hypothesis import strategies as st

from aoc23.core.errors import CategoryCycleError
from aoc23.core.intervals import (
    Category,
    CategoryChain,
    RangeMapping,
    merge_intervals,
)

SEED_TO_SOIL = Category("seed", "soil", (RangeMapping(50, 98, 2), RangeMapping(52, 50, 48)))


def test_translate_single_values():
    assert SEED_TO_SOIL.translate(79) == 81
    assert SEED_TO_SOIL.translate(98) == 50
    assert SEED_TO_SOIL.translate(99) == 51
    assert SEED_TO_SOIL.translate(100) == 100
    assert SEED_TO_SOIL.translate(10) == 10


def test_first_listed_mapping_wins_on_overlap():
    cat = Category("a", "b", (RangeMapping(100, 0, 10), RangeMapping(200, 5, 10)))
    assert cat.translate(7) == 107
    assert cat.translate(12) == 207
    assert sorted(cat.translate_interval((0, 20))) == [(15, 20), (100, 110), (205, 210)]


def test_translate_interval_splits_at_boundaries():
    assert sorted(SEED_TO_SOIL.translate_interval((45, 100))) == [(45, 50), (50, 52), (52, 100)]


def test_merge_intervals():
    assert merge_intervals([(5, 8), (0, 3), (3, 4), (7, 10), (12, 12)]) == [(0, 4), (5, 10)]


def test_walk_stops_when_no_category_follows():
    chain = CategoryChain([Category("seed", "soil", (RangeMapping(52, 50, 48),))])
    assert chain.walk(79) == 81
    assert chain.walk(79, start="soil") == 79


def test_walk_rejects_cyclic_chain():
    chain = CategoryChain([Category("a", "b"), Category("b", "a")])
    with pytest.raises(CategoryCycleError):
        chain.walk(1, start="a")
    with pytest.raises(CategoryCycleError):
        chain.walk_intervals([(0, 5)], start="a")


mapping = st.builds(
    RangeMapping,
    destination=st.integers(0, 150),
    source=st.integers(0, 80),
    length=st.integers(1, 20),
)
tables = st.lists(st.lists(mapping, max_size=4), min_size=1, max_size=3)


def build_chain(layers):
    return CategoryChain(
        Category(f"c{i}", f"c{i + 1}", tuple(ms)) for i, ms in enumerate(layers)
    )


@given(tables, st.integers(200, 10_000))
def test_values_outside_every_range_pass_through(layers, value):
    chain = build_chain(layers)
    assert chain.walk(value, start="c0") == value


@given(tables, st.integers(0, 120), st.integers(1, 40))
def test_band_walk_matches_scalar_walk(layers, start, length):
    chain = build_chain(layers)
    expected = {chain.walk(v, start="c0") for v in range(start, start + length)}
    bands = chain.walk_intervals([(start, start + length)], start="c0")
    assert {v for lo, hi in bands for v in range(lo, hi)} == expected
    assert bands[0][0] == min(expected)
