"""Poker Equity CLI — Typer-based command line interface."""

import logging
import random
from typing import List, Optional

import typer
from rich.console import Console

from poker_equity import config
from poker_equity.errors import EquityError

app = typer.Typer(
    name="poker-equity",
    help="Texas Hold'em win probability estimator",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log simulation details"),
):
    """Estimate how often a hand holds up against random opponents."""
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _parse_cards(text: str) -> List:
    from poker_equity.models.card import parse_card_list
    try:
        return parse_card_list(text)
    except EquityError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def equity(
    hole: str = typer.Argument(..., help="Your two hole cards, e.g. 'AH,KH'"),
    board: str = typer.Option("", "--board", "-b", help="Community cards, e.g. 'QH,JH,2C'"),
    opponents: int = typer.Option(1, "--opponents", "-o", help="Number of opponents"),
    trials: int = typer.Option(config.DEFAULT_TRIAL_COUNT, "--trials", "-t",
                               help="Number of simulated deals"),
    seed: Optional[int] = typer.Option(config.DEFAULT_SEED, help="Random seed for reproducible runs"),
    workers: int = typer.Option(config.DEFAULT_WORKERS, "--workers", "-w",
                                help="Worker processes"),
):
    """Estimate the win probability of a hand."""
    from poker_equity.formatters.table import TableFormatter
    from poker_equity.models.simulation import SimulationConfig
    from poker_equity.simulation.equity import EquitySimulator

    hole_cards = _parse_cards(hole)
    board_cards = _parse_cards(board)

    try:
        sim_config = SimulationConfig.from_codes(
            hole_cards, board_cards,
            opponent_count=opponents,
            trial_count=trials,
        )
        simulator = EquitySimulator(sim_config, rng=random.Random(seed), workers=workers)
        result = simulator.run()
    except EquityError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    fmt = TableFormatter(console)
    fmt.print_result(sim_config, result)


@app.command()
def evaluate(
    cards: str = typer.Argument(..., help="5 to 7 cards, e.g. 'AH,KH,QH,JH,TH'"),
):
    """Classify the best five-card hand."""
    from poker_equity.formatters.table import TableFormatter
    from poker_equity.simulation.evaluator import HandEvaluator

    hand_cards = _parse_cards(cards)
    if len(set(hand_cards)) != len(hand_cards):
        console.print("[red]Error:[/red] duplicate cards")
        raise typer.Exit(1)
    if not 5 <= len(hand_cards) <= 7:
        console.print(f"[red]Error:[/red] need 5 to 7 cards, got {len(hand_cards)}")
        raise typer.Exit(1)

    fmt = TableFormatter(console)
    fmt.print_hand(hand_cards, HandEvaluator.evaluate(hand_cards))


if __name__ == "__main__":
    app()
