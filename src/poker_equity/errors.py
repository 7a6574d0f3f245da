"""Exceptions raised while validating equity requests.

All of them are input errors, so they derive from ``ValueError``.
"""


class EquityError(ValueError):
    """Base class for invalid equity simulation input."""


class InvalidCardCode(EquityError):
    """A token does not decode to a known rank and suit."""


class DuplicateCard(EquityError):
    """The same card appears more than once among the known cards."""


class InsufficientDeck(EquityError):
    """The deal needs more cards than remain in the deck."""


class InvalidConfig(EquityError):
    """Opponent count, trial count or card counts are out of range."""
