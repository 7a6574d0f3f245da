"""Simulation data models for equity estimation."""

from dataclasses import dataclass
from typing import Iterable, Tuple

from poker_equity.errors import DuplicateCard, InsufficientDeck, InvalidConfig
from poker_equity.models.card import Card, CardLike, to_cards

DECK_SIZE = 52
HOLE_CARDS = 2
BOARD_SIZE = 5


@dataclass(frozen=True)
class SimulationConfig:
    """Read-only description of one equity estimate."""
    hole_cards: Tuple[Card, ...]
    community_cards: Tuple[Card, ...] = ()
    opponent_count: int = 1
    trial_count: int = 10000

    def __post_init__(self):
        if len(self.hole_cards) != HOLE_CARDS:
            raise InvalidConfig(
                f"Expected {HOLE_CARDS} hole cards, got {len(self.hole_cards)}")
        if len(self.community_cards) > BOARD_SIZE:
            raise InvalidConfig(
                f"At most {BOARD_SIZE} community cards, got {len(self.community_cards)}")
        if self.opponent_count < 1:
            raise InvalidConfig(f"opponent_count must be >= 1, got {self.opponent_count}")
        if self.trial_count < 1:
            raise InvalidConfig(f"trial_count must be >= 1, got {self.trial_count}")

        seen = set()
        for card in self.known_cards:
            if card in seen:
                raise DuplicateCard(f"Card {card.to_short()} appears more than once")
            seen.add(card)

        available = DECK_SIZE - len(self.known_cards)
        if self.cards_needed > available:
            raise InsufficientDeck(
                f"Not enough cards in deck. Need {self.cards_needed}, have {available}")

    @classmethod
    def from_codes(cls, hole_cards: Iterable[CardLike],
                   community_cards: Iterable[CardLike] = (),
                   opponent_count: int = 1,
                   trial_count: int = 10000) -> "SimulationConfig":
        """Build a config from card codes (or Card objects)."""
        return cls(
            hole_cards=tuple(to_cards(hole_cards)),
            community_cards=tuple(to_cards(community_cards)),
            opponent_count=opponent_count,
            trial_count=trial_count,
        )

    @property
    def known_cards(self) -> Tuple[Card, ...]:
        return self.hole_cards + self.community_cards

    @property
    def board_draw_count(self) -> int:
        """Cards drawn per trial to complete the board."""
        return BOARD_SIZE - len(self.community_cards)

    @property
    def cards_needed(self) -> int:
        """Cards drawn per trial for the board and all opponents."""
        return self.board_draw_count + HOLE_CARDS * self.opponent_count


@dataclass(frozen=True)
class SimulationResult:
    """Aggregate outcome of a simulation run."""
    wins: int
    trials: int

    @property
    def losses(self) -> int:
        return self.trials - self.wins

    @property
    def probability(self) -> float:
        """Percentage of trials in which no opponent beat the player."""
        return 100.0 * self.wins / self.trials if self.trials else 0.0
