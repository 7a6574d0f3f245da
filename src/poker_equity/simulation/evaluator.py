"""Hand evaluation for equity simulation."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from poker_equity.models.card import Card, Rank, Suit

Key = Tuple[int, ...]

WHEEL: Key = (5, 4, 3, 2, 14)


class HandCategory(IntEnum):
    """Hand categories from worst to best."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


# Number of ranks in the tie-break key of each category.
TIEBREAK_LENGTHS: Dict[HandCategory, int] = {
    HandCategory.HIGH_CARD: 5,
    HandCategory.ONE_PAIR: 4,
    HandCategory.TWO_PAIR: 3,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.STRAIGHT: 5,
    HandCategory.FLUSH: 5,
    HandCategory.FULL_HOUSE: 2,
    HandCategory.FOUR_OF_A_KIND: 2,
    HandCategory.STRAIGHT_FLUSH: 5,
    HandCategory.ROYAL_FLUSH: 5,
}


class Comparison(IntEnum):
    """Outcome of comparing hand ``a`` against hand ``b``."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class EvaluatedHand:
    """Category and tie-break ranks (highest significance first)."""
    category: HandCategory
    tiebreak: Key

    @property
    def name(self) -> str:
        return HandEvaluator.get_rank_name(self.category)

    def tiebreak_ranks(self) -> List[Rank]:
        return [Rank.from_value(v) for v in self.tiebreak]


class _HandTables:
    """Rank-count and suit-count tables for one evaluation."""

    def __init__(self, cards: Sequence[Card]):
        self.rank_counts: Dict[int, int] = {}
        suit_ranks: Dict[Suit, List[int]] = {}
        for card in cards:
            value = card.rank.numeric_value
            self.rank_counts[value] = self.rank_counts.get(value, 0) + 1
            suit_ranks.setdefault(card.suit, []).append(value)

        # Distinct ranks, highest first
        self.unique_ranks: List[int] = sorted(self.rank_counts, reverse=True)

        self.flush_ranks: List[int] = []
        for values in suit_ranks.values():
            if len(values) >= 5:
                self.flush_ranks = sorted(values, reverse=True)
                break

    def ranks_with_count(self, count: int) -> List[int]:
        """Ranks appearing exactly ``count`` times, highest first."""
        return [r for r in self.unique_ranks if self.rank_counts[r] == count]

    def kickers(self, exclude: Sequence[int], count: int) -> List[int]:
        return [r for r in self.unique_ranks if r not in exclude][:count]


def _find_straight(ranks: Sequence[int]) -> Optional[Key]:
    """Return the highest 5-rank run among ``ranks``, or the wheel."""
    unique_ranks = sorted(set(ranks), reverse=True)

    for i in range(len(unique_ranks) - 4):
        if unique_ranks[i] - unique_ranks[i + 4] == 4:
            return tuple(unique_ranks[i:i + 5])

    if set(WHEEL).issubset(unique_ranks):
        return WHEEL

    return None


def _royal_flush(t: _HandTables) -> Optional[Key]:
    key = _straight_flush(t)
    if key and 14 in key and 13 in key:
        return key
    return None


def _straight_flush(t: _HandTables) -> Optional[Key]:
    if not t.flush_ranks:
        return None
    return _find_straight(t.flush_ranks)


def _four_of_a_kind(t: _HandTables) -> Optional[Key]:
    quads = t.ranks_with_count(4)
    if not quads:
        return None
    return (quads[0], *t.kickers([quads[0]], 1))


def _full_house(t: _HandTables) -> Optional[Key]:
    trips = t.ranks_with_count(3)
    if not trips:
        return None
    # A second triple can supply the pair
    pairs = [r for r in t.unique_ranks if r != trips[0] and t.rank_counts[r] >= 2]
    if not pairs:
        return None
    return (trips[0], pairs[0])


def _flush(t: _HandTables) -> Optional[Key]:
    if not t.flush_ranks:
        return None
    return tuple(t.flush_ranks[:5])


def _straight(t: _HandTables) -> Optional[Key]:
    return _find_straight(t.unique_ranks)


def _three_of_a_kind(t: _HandTables) -> Optional[Key]:
    trips = t.ranks_with_count(3)
    if not trips:
        return None
    return (trips[0], *t.kickers([trips[0]], 2))


def _two_pair(t: _HandTables) -> Optional[Key]:
    pairs = t.ranks_with_count(2)
    if len(pairs) < 2:
        return None
    high, low = pairs[:2]
    return (high, low, *t.kickers([high, low], 1))


def _one_pair(t: _HandTables) -> Optional[Key]:
    pairs = t.ranks_with_count(2)
    if not pairs:
        return None
    return (pairs[0], *t.kickers([pairs[0]], 3))


def _high_card(t: _HandTables) -> Optional[Key]:
    return tuple(t.unique_ranks[:5])


# Tried top-down; the first detector that returns a key decides the category.
_DETECTORS: List[Tuple[HandCategory, Callable[[_HandTables], Optional[Key]]]] = [
    (HandCategory.ROYAL_FLUSH, _royal_flush),
    (HandCategory.STRAIGHT_FLUSH, _straight_flush),
    (HandCategory.FOUR_OF_A_KIND, _four_of_a_kind),
    (HandCategory.FULL_HOUSE, _full_house),
    (HandCategory.FLUSH, _flush),
    (HandCategory.STRAIGHT, _straight),
    (HandCategory.THREE_OF_A_KIND, _three_of_a_kind),
    (HandCategory.TWO_PAIR, _two_pair),
    (HandCategory.ONE_PAIR, _one_pair),
    (HandCategory.HIGH_CARD, _high_card),
]


class HandEvaluator:
    """Evaluates and compares poker hands."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> EvaluatedHand:
        """Evaluate the best 5-card hand among 5 to 7 cards.

        When several ranks share a count (two triples, three pairs) the
        highest rank is used for the primary grouping.

        Args:
            cards: List of cards (5-7 cards).

        Returns:
            EvaluatedHand with the category and tie-break ranks.
        """
        if not 5 <= len(cards) <= 7:
            raise ValueError(f"Can only evaluate 5 to 7 cards, got {len(cards)}")

        tables = _HandTables(cards)
        for category, detect in _DETECTORS:
            key = detect(tables)
            if key is not None:
                return EvaluatedHand(category, key)

        # _high_card always matches
        raise AssertionError("unreachable")

    @staticmethod
    def compare(a: EvaluatedHand, b: EvaluatedHand) -> Comparison:
        """Compare two evaluated hands.

        Categories are compared first; tie-break ranks are only compared
        between hands of the same category.
        """
        if a.category > b.category:
            return Comparison.GREATER
        if a.category < b.category:
            return Comparison.LESS

        for k1, k2 in zip(a.tiebreak, b.tiebreak):
            if k1 > k2:
                return Comparison.GREATER
            if k1 < k2:
                return Comparison.LESS

        return Comparison.EQUAL

    @staticmethod
    def compare_cards(cards1: Sequence[Card], cards2: Sequence[Card]) -> Comparison:
        """Evaluate and compare two sets of cards."""
        return HandEvaluator.compare(HandEvaluator.evaluate(cards1),
                                     HandEvaluator.evaluate(cards2))

    @staticmethod
    def get_rank_name(category: HandCategory) -> str:
        """Get a human-readable name for a hand category."""
        names = {
            HandCategory.HIGH_CARD: "High Card",
            HandCategory.ONE_PAIR: "One Pair",
            HandCategory.TWO_PAIR: "Two Pair",
            HandCategory.THREE_OF_A_KIND: "Three of a Kind",
            HandCategory.STRAIGHT: "Straight",
            HandCategory.FLUSH: "Flush",
            HandCategory.FULL_HOUSE: "Full House",
            HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
            HandCategory.STRAIGHT_FLUSH: "Straight Flush",
            HandCategory.ROYAL_FLUSH: "Royal Flush",
        }
        return names.get(category, "Unknown")
