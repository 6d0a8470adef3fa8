import pytest
from hypothesis import given
from hypothesis import strategies as st

from aoc23.core.errors import PuzzleInputError
from aoc23.core.hands import (
    STANDARD_WEIGHTS,
    Hand,
    RankClass,
    classify,
    histogram,
    rank_hands,
    total_winnings,
    wildcard_weights,
)

SAMPLE = [
    Hand("32T3K", 765),
    Hand("T55J5", 684),
    Hand("KK677", 28),
    Hand("KTJJT", 220),
    Hand("QQQJA", 483),
]


@pytest.mark.parametrize(
    ("cards", "expected"),
    (
        ("AAAAA", RankClass.FIVE_OF_A_KIND),
        ("AA8AA", RankClass.FOUR_OF_A_KIND),
        ("23332", RankClass.FULL_HOUSE),
        ("TTT98", RankClass.THREE_OF_A_KIND),
        ("23432", RankClass.TWO_PAIR),
        ("A23A4", RankClass.ONE_PAIR),
        ("23456", RankClass.HIGH_CARD),
    ),
)
def test_classify(cards, expected):
    assert classify(cards) == expected


def test_wildcard_histogram():
    assert histogram("KTJJT", "J") == (4, 1)
    assert histogram("JJJJJ", "J") == (5,)
    assert classify("JJJJJ", "J") == RankClass.FIVE_OF_A_KIND
    assert classify("QJJQ2", "J") == RankClass.FOUR_OF_A_KIND


def test_bad_hand_size():
    with pytest.raises(PuzzleInputError):
        classify("AAKK")


def test_tie_break_uses_weight_table():
    ranked = rank_hands([Hand("2AAAA", 1), Hand("33332", 2)], STANDARD_WEIGHTS)
    assert [h.cards for h in ranked] == ["2AAAA", "33332"]
    ranked = rank_hands([Hand("JKKK2", 1), Hand("QQQQ2", 2)], wildcard_weights(), "J")
    assert [h.cards for h in ranked] == ["JKKK2", "QQQQ2"]


def test_sample_winnings():
    assert total_winnings(SAMPLE, STANDARD_WEIGHTS) == 6440
    assert total_winnings(SAMPLE, wildcard_weights(), "J") == 5905


cards = st.text(alphabet="23456789TJQKA", min_size=5, max_size=5)


@given(cards, st.data())
def test_class_ignores_card_order(hand, data):
    shuffled = "".join(data.draw(st.permutations(list(hand))))
    assert classify(shuffled) == classify(hand)
    assert classify(shuffled, "J") == classify(hand, "J")


@given(cards)
def test_wildcard_never_weakens_a_hand(hand):
    assert classify(hand, "J") >= classify(hand)


def test_wildcard_weights_put_the_wildcard_last():
    weights = wildcard_weights("J")
    assert min(weights, key=weights.get) == "J"
    assert weights["Q"] < weights["K"] < weights["A"]
    assert wildcard_weights("2")["2"] == 1


def test_unknown_card_is_malformed_input():
    with pytest.raises(PuzzleInputError):
        total_winnings([Hand("AAAAX", 1), Hand("23456", 2)], STANDARD_WEIGHTS)
