"""Poker simulation module."""

from poker_equity.simulation.deck import Deck
from poker_equity.simulation.evaluator import (
    Comparison, EvaluatedHand, HandCategory, HandEvaluator,
)
from poker_equity.simulation.equity import EquitySimulator, estimate_win_probability

__all__ = [
    "Deck", "Comparison", "EvaluatedHand", "HandCategory", "HandEvaluator",
    "EquitySimulator", "estimate_win_probability",
]
