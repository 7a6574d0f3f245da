"""Deck management for equity simulation."""

import random
from typing import Iterable, List, Optional

from poker_equity.errors import InsufficientDeck
from poker_equity.models.card import Card, Rank, Suit


class Deck:
    """A standard 52-card deck, minus any cards already known.

    Shuffling uses the injected random source, so a seeded
    ``random.Random`` reproduces the same deal sequence.
    """

    def __init__(self, exclude: Iterable[Card] = (),
                 rng: Optional[random.Random] = None):
        """Initialize a new deck without the excluded cards."""
        self._rng = rng or random.Random()
        excluded = set(exclude)
        self._full: List[Card] = [
            Card(rank, suit)
            for suit in Suit
            for rank in Rank
            if Card(rank, suit) not in excluded
        ]
        self.cards: List[Card] = []
        self._reset()

    def _reset(self):
        """Restore every non-excluded card, in canonical order."""
        self.cards = list(self._full)

    def shuffle(self):
        """Shuffle the deck in place (Fisher-Yates via ``Random.shuffle``)."""
        self._rng.shuffle(self.cards)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > len(self.cards):
            raise InsufficientDeck(
                f"Not enough cards in deck. Need {count}, have {len(self.cards)}")

        dealt = self.cards[:count]
        self.cards = self.cards[count:]
        return dealt

    def deal_one(self) -> Card:
        return self.deal(1)[0]

    def reset(self):
        """Reset and shuffle the deck."""
        self._reset()
        self.shuffle()

    @property
    def remaining(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
