"""Data models for the equity estimator."""

from poker_equity.models.card import Card, Rank, Suit, parse_card_list, to_cards
from poker_equity.models.simulation import SimulationConfig, SimulationResult

__all__ = [
    "Card", "Rank", "Suit", "parse_card_list", "to_cards",
    "SimulationConfig", "SimulationResult",
]
