"""Card representation - immutable cards as dealt by the shoe."""

from dataclasses import dataclass
from enum import Enum

ACE = 1


class Suite(Enum):
    """Card suites."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suite.CLUBS: "♣",
            Suite.DIAMONDS: "♦",
            Suite.HEARTS: "♥",
            Suite.SPADES: "♠",
        }
        return symbols[self]


_RANK_SYMBOLS = {1: "A", 11: "J", 12: "Q", 13: "K"}

_RANK_MAP = {
    "A": 1,
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "10": 10,
    "T": 10,
    "J": 11,
    "Q": 12,
    "K": 13,
}

_SUITE_MAP = {
    "C": Suite.CLUBS,
    "♣": Suite.CLUBS,
    "D": Suite.DIAMONDS,
    "♦": Suite.DIAMONDS,
    "H": Suite.HEARTS,
    "♥": Suite.HEARTS,
    "S": Suite.SPADES,
    "♠": Suite.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """
    Immutable playing card.

    ``value`` runs from 1 (ace) to 13 (king). Face cards keep their
    literal value; the hand calculator sums values as given.
    """

    value: int
    suite: Suite

    def __str__(self) -> str:
        return f"{_RANK_SYMBOLS.get(self.value, self.value)}{self.suite}"

    def __repr__(self) -> str:
        return f"Card({self.value}, {self.suite.name})"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.value == ACE

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suite_str = s[-1]

        if rank_str not in _RANK_MAP:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suite_str not in _SUITE_MAP:
            raise ValueError(f"Invalid suite: {suite_str}")

        return cls(_RANK_MAP[rank_str], _SUITE_MAP[suite_str])
