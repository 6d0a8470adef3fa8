from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import PuzzleInputError


class RankClass(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7


HISTOGRAM_CLASSES: Dict[Tuple[int, ...], RankClass] = {
    (5,): RankClass.FIVE_OF_A_KIND,
    (4, 1): RankClass.FOUR_OF_A_KIND,
    (3, 2): RankClass.FULL_HOUSE,
    (3, 1, 1): RankClass.THREE_OF_A_KIND,
    (2, 2, 1): RankClass.TWO_PAIR,
    (2, 1, 1, 1): RankClass.ONE_PAIR,
    (1, 1, 1, 1, 1): RankClass.HIGH_CARD,
}


def weight_table(order: str) -> Dict[str, int]:
    """Weights from a weakest-to-strongest symbol string."""
    return {ch: i for i, ch in enumerate(order, 1)}


CARD_ORDER = "23456789TJQKA"

STANDARD_WEIGHTS = weight_table(CARD_ORDER)


def wildcard_weights(wildcard: str = "J") -> Dict[str, int]:
    """Standard order with ``wildcard`` moved below every other card."""
    return weight_table(wildcard + CARD_ORDER.replace(wildcard, ""))


def histogram(cards: str, wildcard: Optional[str] = None) -> Tuple[int, ...]:
    """Descending symbol counts, with wildcards folded into the largest."""
    counts = Counter(cards)
    jokers = counts.pop(wildcard, 0) if wildcard else 0
    shape = sorted(counts.values(), reverse=True)
    if shape:
        shape[0] += jokers
    else:
        shape = [jokers]
    return tuple(shape)


def classify(cards: str, wildcard: Optional[str] = None) -> RankClass:
    shape = histogram(cards, wildcard)
    try:
        return HISTOGRAM_CLASSES[shape]
    except KeyError:
        raise PuzzleInputError(f"hand {cards!r} is not five cards") from None


@dataclass(frozen=True)
class Hand:
    cards: str
    bid: int

    def rank_class(self, wildcard: Optional[str] = None) -> RankClass:
        return classify(self.cards, wildcard)

    def sort_key(self, weights: Mapping[str, int], wildcard: Optional[str] = None) -> Tuple[int, ...]:
        try:
            tie_break = tuple(weights[ch] for ch in self.cards)
        except KeyError as exc:
            raise PuzzleInputError(f"unknown card {exc.args[0]!r} in hand {self.cards!r}") from None
        return (self.rank_class(wildcard), *tie_break)


def rank_hands(hands: Iterable[Hand], weights: Mapping[str, int], wildcard: Optional[str] = None) -> List[Hand]:
    return sorted(hands, key=lambda h: h.sort_key(weights, wildcard))


def total_winnings(hands: Iterable[Hand], weights: Mapping[str, int], wildcard: Optional[str] = None) -> int:
    ranked = rank_hands(hands, weights, wildcard)
    return sum(hand.bid * rank for rank, hand in enumerate(ranked, 1))
