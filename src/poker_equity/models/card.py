"""Card, Rank, and Suit models."""

from enum import Enum
from typing import Iterable, List, Union

from poker_equity.errors import InvalidCardCode


class Suit(str, Enum):
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        for suit in cls:
            if suit.value == s:
                return suit
        raise InvalidCardCode(f"Unknown suit: {s!r}")

    @property
    def symbol(self) -> str:
        return {"H": "♥", "D": "♦", "C": "♣", "S": "♠"}[self.value]


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        return _RANK_VALUES[self.value]

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        for r in cls:
            if r.value == c:
                return r
        raise InvalidCardCode(f"Unknown rank: {c!r}")

    @classmethod
    def from_value(cls, value: int) -> "Rank":
        """Look up a rank by its numeric value (2-14)."""
        for r in cls:
            if r.numeric_value == value:
                return r
        raise ValueError(f"No rank with value {value}")


_RANK_VALUES = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8,
    "9": 9, "T": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
}


class Card:
    """A single playing card."""

    def __init__(self, rank: Rank, suit: Suit):
        self.rank = rank
        self.suit = suit

    @classmethod
    def parse(cls, code: str) -> "Card":
        """Decode a 2-character card code like 'AH', 'TD', '2C'.

        Codes are case-sensitive: the rank is one of ``23456789TJQKA`` and
        the suit one of ``HDCS``.
        """
        if not isinstance(code, str) or len(code) != 2:
            raise InvalidCardCode(f"Cannot parse card: {code!r}")
        return cls(Rank.from_char(code[0]), Suit.from_symbol(code[1]))

    @property
    def value(self) -> int:
        """Numeric rank value, 2-14."""
        return self.rank.numeric_value

    def __repr__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.symbol}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def to_short(self) -> str:
        """Return the card code, e.g. 'AH'."""
        return f"{self.rank.value}{self.suit.value}"


CardLike = Union[Card, str]


def to_cards(items: Iterable[CardLike]) -> List[Card]:
    """Convert a mix of Card objects and card codes into Cards."""
    return [item if isinstance(item, Card) else Card.parse(item) for item in items]


def parse_card_list(text: str) -> List[Card]:
    """Parse a comma or whitespace separated list of card codes.

    Empty input yields an empty list, e.g. a preflop board.
    """
    tokens = [t.strip() for t in text.replace(",", " ").split()]
    return [Card.parse(t) for t in tokens if t]
