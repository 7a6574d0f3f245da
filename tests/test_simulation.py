"""Tests for the poker simulation module."""

import itertools
import random

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from poker_equity import estimate_win_probability
from poker_equity.errors import (
    DuplicateCard, EquityError, InsufficientDeck, InvalidCardCode, InvalidConfig,
)
from poker_equity.models.card import Card
from poker_equity.models.simulation import SimulationConfig, SimulationResult
from poker_equity.simulation.deck import Deck
from poker_equity.simulation.evaluator import Comparison, HandEvaluator
from poker_equity.simulation.equity import EquitySimulator


def cards(*codes):
    return [Card.parse(c) for c in codes]


class _NoShuffle(random.Random):
    """Random source that leaves the deck in canonical order."""

    def shuffle(self, x):
        pass


class TestDeck:
    """Tests for the Deck class."""

    def test_deck_initialization(self):
        """Test that a new deck has 52 cards."""
        deck = Deck()
        assert len(deck) == 52
        assert len(set(deck.cards)) == 52

    def test_excluded_cards(self):
        """Known cards are removed from the deck."""
        known = cards("AH", "KD", "2C")
        deck = Deck(exclude=known)
        assert len(deck) == 49
        assert not set(known) & set(deck.cards)

    def test_seeded_shuffle_is_reproducible(self):
        deck1 = Deck(rng=random.Random(5))
        deck2 = Deck(rng=random.Random(5))
        deck1.shuffle()
        deck2.shuffle()
        assert deck1.cards == deck2.cards
        assert deck1.cards != Deck().cards

    def test_deal_cards(self):
        """Test dealing cards from the deck."""
        deck = Deck()
        dealt = deck.deal(5)
        assert len(dealt) == 5
        assert len(deck) == 47
        assert deck.remaining == 47

    def test_deal_one(self):
        deck = Deck()
        card = deck.deal_one()
        assert card == Card.parse("2H")
        assert len(deck) == 51

    def test_deal_too_many(self):
        """Test dealing more cards than available."""
        deck = Deck()
        deck.deal(52)
        with pytest.raises(InsufficientDeck):
            deck.deal(1)

    def test_reset(self):
        """Test resetting the deck."""
        deck = Deck(exclude=cards("AS"))
        deck.deal(10)
        assert len(deck) == 41
        deck.reset()
        assert len(deck) == 51
        assert Card.parse("AS") not in deck.cards


class TestHandComparison:
    """Tests for HandEvaluator.compare."""

    @pytest.fixture
    def hands(self):
        groups = [
            ("AH", "KH", "QH", "JH", "TH"),
            ("9S", "8S", "7S", "6S", "5S"),
            ("QC", "QD", "QH", "QS", "2D"),
            ("QC", "QD", "QH", "QS", "3D"),
            ("7H", "7D", "7C", "2S", "2H"),
            ("AD", "JD", "8D", "6D", "3D"),
            ("5C", "4D", "3H", "2S", "AS"),
            ("6C", "5D", "4H", "3S", "2S"),
            ("8H", "8D", "8C", "AS", "4H"),
            ("KH", "KD", "8C", "8S", "3H"),
            ("KS", "KC", "8H", "8D", "3C"),
            ("AH", "AD", "KC", "7S", "4H"),
            ("AS", "AC", "QC", "7S", "4H"),
            ("AH", "JD", "9C", "7S", "4H"),
            ("AH", "JD", "9C", "7S", "3H"),
        ]
        return [HandEvaluator.evaluate(cards(*g)) for g in groups]

    def test_category_beats_tiebreak(self):
        pair = HandEvaluator.evaluate(cards("2S", "2H", "5D", "4C", "3S"))
        high_card = HandEvaluator.evaluate(cards("AS", "KH", "QD", "JC", "9S"))
        assert HandEvaluator.compare(pair, high_card) == Comparison.GREATER
        assert HandEvaluator.compare(high_card, pair) == Comparison.LESS

    def test_kicker_decides(self):
        king_kicker = HandEvaluator.evaluate(cards("AH", "AD", "KC", "7S", "4H"))
        queen_kicker = HandEvaluator.evaluate(cards("AS", "AC", "QC", "7S", "4H"))
        assert HandEvaluator.compare(king_kicker, queen_kicker) == Comparison.GREATER

    def test_wheel_is_lowest_straight(self):
        wheel = HandEvaluator.evaluate(cards("5C", "4D", "3H", "2S", "AS"))
        six_high = HandEvaluator.evaluate(cards("6C", "5D", "4H", "3S", "2S"))
        assert HandEvaluator.compare(wheel, six_high) == Comparison.LESS

    def test_suits_do_not_break_ties(self):
        a = HandEvaluator.evaluate(cards("KH", "KD", "8C", "8S", "3H"))
        b = HandEvaluator.evaluate(cards("KS", "KC", "8H", "8D", "3C"))
        assert HandEvaluator.compare(a, b) == Comparison.EQUAL

    def test_compare_cards(self):
        assert HandEvaluator.compare_cards(
            cards("AH", "AD", "8D", "5C", "2S"),
            cards("KS", "QH", "JD", "TC", "8S"),
        ) == Comparison.GREATER

    def test_reflexive(self, hands):
        for h in hands:
            assert HandEvaluator.compare(h, h) == Comparison.EQUAL

    def test_antisymmetric(self, hands):
        for a, b in itertools.product(hands, repeat=2):
            assert HandEvaluator.compare(a, b) == -HandEvaluator.compare(b, a)

    def test_transitive(self, hands):
        for a, b, c in itertools.product(hands, repeat=3):
            ab = HandEvaluator.compare(a, b)
            bc = HandEvaluator.compare(b, c)
            if ab >= 0 and bc >= 0:
                assert HandEvaluator.compare(a, c) >= 0

    def test_category_precedence(self, hands):
        for a, b in itertools.product(hands, repeat=2):
            if a.category > b.category:
                assert HandEvaluator.compare(a, b) == Comparison.GREATER


class TestSimulationConfig:
    """Input validation before any trial runs."""

    def test_valid(self):
        cfg = SimulationConfig.from_codes(["AH", "KH"], ["QH", "JH", "2C"],
                                          opponent_count=3, trial_count=10)
        assert cfg.board_draw_count == 2
        assert cfg.cards_needed == 8
        assert len(cfg.known_cards) == 5

    def test_invalid_card_code(self):
        with pytest.raises(InvalidCardCode):
            SimulationConfig.from_codes(["AH", "1H"])

    def test_duplicate_hole_cards(self):
        with pytest.raises(DuplicateCard):
            SimulationConfig.from_codes(["AH", "AH"])

    def test_duplicate_across_board(self):
        with pytest.raises(DuplicateCard):
            SimulationConfig.from_codes(["AH", "KH"], ["QD", "KH", "2C"])

    def test_insufficient_deck(self):
        # 5 board cards + 48 hole cards > 50 remaining
        with pytest.raises(InsufficientDeck):
            SimulationConfig.from_codes(["AH", "KH"], opponent_count=24)

    def test_largest_table_fits(self):
        cfg = SimulationConfig.from_codes(["AH", "KH"], opponent_count=22)
        assert cfg.cards_needed == 49

    @pytest.mark.parametrize("kwargs", [
        {"opponent_count": 0},
        {"trial_count": 0},
        {"opponent_count": -2},
    ])
    def test_invalid_counts(self, kwargs):
        with pytest.raises(InvalidConfig):
            SimulationConfig.from_codes(["AH", "KH"], **kwargs)

    def test_wrong_hole_card_count(self):
        with pytest.raises(InvalidConfig):
            SimulationConfig.from_codes(["AH", "KH", "QH"])

    def test_too_many_community_cards(self):
        with pytest.raises(InvalidConfig):
            SimulationConfig.from_codes(["AH", "KH"], ["2C", "3C", "4C", "5C", "6C", "7C"])

    def test_errors_are_value_errors(self):
        for exc in (InvalidCardCode, DuplicateCard, InsufficientDeck, InvalidConfig):
            assert issubclass(exc, EquityError)
            assert issubclass(exc, ValueError)


class TestSimulationResult:

    def test_probability(self):
        result = SimulationResult(wins=25, trials=200)
        assert result.probability == 12.5
        assert result.losses == 175


class TestEquitySimulator:
    """Tests for the Monte Carlo simulator."""

    def test_nuts_always_win(self):
        assert estimate_win_probability(["AH", "KH"], ["QH", "JH", "TH", "2C", "3D"],
                                        opponent_count=3, trial_count=500, seed=1) == 100.0

    def test_ties_count_as_wins(self):
        """Everyone plays the royal flush on the board."""
        assert estimate_win_probability(["2C", "3D"], ["AH", "KH", "QH", "JH", "TH"],
                                        opponent_count=5, trial_count=300, seed=2) == 100.0

    def test_opponents_dealt_after_board_cards(self):
        """With an unshuffled deck the board takes 3H and the opponent 4H 5H.

        The opponent's kings and fives beat the player's kings and threes.
        """
        cfg = SimulationConfig.from_codes(["2H", "3D"], ["4C", "5C", "KC", "KS"],
                                          opponent_count=1, trial_count=10)
        result = EquitySimulator(cfg, rng=_NoShuffle()).run()
        assert result.wins == 0
        assert result.probability == 0.0

    def test_seeded_runs_are_identical(self):
        kwargs = dict(community_cards=["7D", "8D", "2S"], opponent_count=3, trial_count=3000)
        first = estimate_win_probability(["QS", "JS"], seed=42, **kwargs)
        second = estimate_win_probability(["QS", "JS"], seed=42, **kwargs)
        assert first == second

    def test_injected_rng_is_reproducible(self):
        cfg = SimulationConfig.from_codes(["9C", "9D"], opponent_count=2, trial_count=2000)
        a = EquitySimulator(cfg, rng=random.Random(7)).run()
        b = EquitySimulator(cfg, rng=random.Random(7)).run()
        assert a == b

    def test_result_in_range(self):
        p = estimate_win_probability(["7C", "2D"], opponent_count=4, trial_count=1000, seed=3)
        assert 0.0 <= p <= 100.0

    def test_single_trial(self):
        p = estimate_win_probability(["7C", "2D"], trial_count=1, seed=3)
        assert p in (0.0, 100.0)

    def test_accepts_card_objects(self):
        p = estimate_win_probability(cards("AH", "KH"), cards("QH", "JH", "TH"),
                                     trial_count=50, seed=4)
        assert p == 100.0

    def test_invalid_workers(self):
        cfg = SimulationConfig.from_codes(["AH", "KH"])
        with pytest.raises(InvalidConfig):
            EquitySimulator(cfg, workers=0)

    def test_validation_before_trials(self):
        with pytest.raises(DuplicateCard):
            estimate_win_probability(["AH", "KH"], ["AH"], trial_count=10)

    def test_pocket_aces_heads_up(self):
        """AA holds up roughly 85% of the time against one random hand."""
        p = estimate_win_probability(["AH", "AD"], opponent_count=1,
                                     trial_count=200000, seed=2024)
        assert 82.0 <= p <= 88.0

    def test_equity_drops_with_more_opponents(self):
        results = [
            estimate_win_probability(["AH", "AD"], opponent_count=n,
                                     trial_count=20000, seed=11)
            for n in (1, 3, 6)
        ]
        assert results[0] > results[1] > results[2]

    def test_worker_pool(self):
        cfg = SimulationConfig.from_codes(["KH", "KD"], opponent_count=2, trial_count=4000)
        a = EquitySimulator(cfg, rng=random.Random(9), workers=2).run()
        b = EquitySimulator(cfg, rng=random.Random(9), workers=2).run()
        assert a == b
        assert a.trials == 4000
        # KK against two hands wins roughly 70% of the time
        assert 60.0 <= a.probability <= 80.0
