"""Rich table formatting for terminal output."""

from typing import Sequence

from rich.console import Console
from rich.table import Table

from poker_equity.models.card import Card
from poker_equity.models.simulation import SimulationConfig, SimulationResult
from poker_equity.simulation.evaluator import EvaluatedHand


def _cards_str(cards: Sequence[Card]) -> str:
    return " ".join(str(c) for c in cards)


class TableFormatter:
    """Format equity results as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_result(self, sim_config: SimulationConfig,
                     result: SimulationResult) -> None:
        """Print a simulation result as a Rich table."""
        table = Table(title="Win Probability")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="green")

        table.add_row("Hole cards", _cards_str(sim_config.hole_cards))
        table.add_row("Board", _cards_str(sim_config.community_cards) or "-")
        table.add_row("Opponents", str(sim_config.opponent_count))
        table.add_row("Trials", f"{result.trials:,}")
        table.add_row("Wins", f"{result.wins:,}")
        table.add_row("", "")
        table.add_row("Win Probability", f"[bold]{result.probability:.2f}%[/bold]")

        self.console.print(table)

    def print_hand(self, cards: Sequence[Card], hand: EvaluatedHand) -> None:
        """Print an evaluated hand."""
        table = Table(title=_cards_str(cards))
        table.add_column("Category", style="cyan")
        table.add_column("Strength", justify="right")
        table.add_column("Tie-break")

        table.add_row(
            hand.name,
            str(int(hand.category)),
            " ".join(r.value for r in hand.tiebreak_ranks()),
        )

        self.console.print(table)
