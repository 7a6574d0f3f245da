"""Monte Carlo equity simulation."""

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List, Optional

from poker_equity import config
from poker_equity.errors import InvalidConfig
from poker_equity.models.card import CardLike
from poker_equity.models.simulation import SimulationConfig, SimulationResult
from poker_equity.simulation.deck import Deck
from poker_equity.simulation.evaluator import Comparison, HandEvaluator

logger = logging.getLogger(__name__)


def _run_trials(sim_config: SimulationConfig, trials: int, rng: random.Random) -> int:
    """Run ``trials`` independent deals and return how many the player won."""
    deck = Deck(exclude=sim_config.known_cards, rng=rng)
    hole = list(sim_config.hole_cards)
    community = list(sim_config.community_cards)
    board_draw = sim_config.board_draw_count
    wins = 0

    for _ in range(trials):
        deck.reset()
        board = community + deck.deal(board_draw)
        player_hand = HandEvaluator.evaluate(hole + board)

        # Opponents are dealt right after the cards drawn for the board
        for _ in range(sim_config.opponent_count):
            opponent_hand = HandEvaluator.evaluate(deck.deal(2) + board)
            if HandEvaluator.compare(opponent_hand, player_hand) == Comparison.GREATER:
                break
        else:
            wins += 1

    return wins


def _run_chunk(sim_config: SimulationConfig, trials: int, seed: int) -> int:
    return _run_trials(sim_config, trials, random.Random(seed))


def _split(total: int, parts: int) -> List[int]:
    """Split ``total`` trials into ``parts`` near-equal non-empty chunks."""
    parts = min(parts, total)
    base, extra = divmod(total, parts)
    return [base + (1 if i < extra else 0) for i in range(parts)]


class EquitySimulator:
    """Estimates the player's chance of not being beaten at showdown.

    Each trial shuffles the unknown cards, completes the board, deals every
    opponent two cards and counts a win when no opponent holds a strictly
    better hand. Ties count as wins.

    Args:
        sim_config: The hand to simulate.
        rng: Random source; pass a seeded ``random.Random`` for
            reproducible results.
        workers: Number of worker processes. With more than one, trials are
            split into chunks, each seeded from ``rng``, and the win counts
            are summed.
    """

    def __init__(self, sim_config: SimulationConfig,
                 rng: Optional[random.Random] = None,
                 workers: int = 1):
        if workers < 1:
            raise InvalidConfig(f"workers must be >= 1, got {workers}")
        self.config = sim_config
        self.rng = rng or random.Random()
        self.workers = workers

    def run(self) -> SimulationResult:
        """Run all trials and return the aggregate result."""
        cfg = self.config
        logger.debug("Simulating %s | %s vs %d opponent(s), %d trials, %d worker(s)",
                     " ".join(c.to_short() for c in cfg.hole_cards),
                     " ".join(c.to_short() for c in cfg.community_cards) or "-",
                     cfg.opponent_count, cfg.trial_count, self.workers)

        if self.workers == 1 or cfg.trial_count == 1:
            wins = _run_trials(cfg, cfg.trial_count, self.rng)
        else:
            wins = self._run_parallel()

        result = SimulationResult(wins=wins, trials=cfg.trial_count)
        logger.debug("Simulation finished: %d/%d wins (%.2f%%)",
                     result.wins, result.trials, result.probability)
        return result

    def _run_parallel(self) -> int:
        chunks = _split(self.config.trial_count, self.workers)
        seeds = [self.rng.getrandbits(64) for _ in chunks]
        with ProcessPoolExecutor(max_workers=len(chunks)) as pool:
            futures = [pool.submit(_run_chunk, self.config, trials, seed)
                       for trials, seed in zip(chunks, seeds)]
            return sum(f.result() for f in futures)


def estimate_win_probability(hole_cards: Iterable[CardLike],
                             community_cards: Iterable[CardLike] = (),
                             opponent_count: int = 1,
                             trial_count: Optional[int] = None,
                             rng: Optional[random.Random] = None,
                             seed: Optional[int] = None,
                             workers: Optional[int] = None) -> float:
    """Estimate the percentage of deals in which the player is not beaten.

    Args:
        hole_cards: The player's two cards, as codes like ``"AH"`` or Cards.
        community_cards: 0-5 revealed board cards.
        opponent_count: Number of opponents, at least 1.
        trial_count: Number of simulated deals (default from config).
        rng: Random source. Takes precedence over ``seed``.
        seed: Seed for a fresh ``random.Random`` when ``rng`` is not given.
        workers: Worker processes (default from config).

    Returns:
        Win probability in percent, 0-100.

    Raises:
        InvalidCardCode, DuplicateCard, InsufficientDeck, InvalidConfig.
    """
    if trial_count is None:
        trial_count = config.DEFAULT_TRIAL_COUNT
    if workers is None:
        workers = config.DEFAULT_WORKERS
    if rng is None:
        rng = random.Random(seed if seed is not None else config.DEFAULT_SEED)

    sim_config = SimulationConfig.from_codes(
        hole_cards, community_cards,
        opponent_count=opponent_count,
        trial_count=trial_count,
    )
    return EquitySimulator(sim_config, rng=rng, workers=workers).run().probability
