"""Output formatting for terminal and tables."""

from poker_equity.formatters.table import TableFormatter

__all__ = ["TableFormatter"]
