"""Monte Carlo win probability estimator for Texas Hold'em."""

from poker_equity.errors import (
    DuplicateCard, EquityError, InsufficientDeck, InvalidCardCode, InvalidConfig,
)
from poker_equity.simulation.equity import estimate_win_probability

__all__ = [
    "estimate_win_probability",
    "EquityError", "InvalidCardCode", "DuplicateCard",
    "InsufficientDeck", "InvalidConfig",
]
