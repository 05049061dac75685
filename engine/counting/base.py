"""Abstract base class for card counting systems."""

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from engine.cards import Card

CARD_VALUES = range(1, 14)


class CountingSystem(ABC):
    """
    Abstract base class for card counting systems.

    A system only assigns tag values; it keeps no running state. The
    running count of a sequence of cards is the sum of their tags.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the counting system."""
        ...

    @property
    @abstractmethod
    def tag_values(self) -> Mapping[int, int]:
        """
        Return the tag value mapping for this system.

        Maps each card value (1 = ace ... 13 = king) to its count value.
        """
        ...

    @property
    @abstractmethod
    def is_balanced(self) -> bool:
        """
        Return whether this is a balanced counting system.

        A balanced system sums to 0 over a complete deck.
        """
        ...

    @property
    def full_deck_sum(self) -> int:
        """Calculate the sum of tag values for a full 52-card deck."""
        # Each value appears 4 times in a deck (once per suite)
        return sum(self.tag_values[value] * 4 for value in CARD_VALUES)

    def tag(self, card: Card) -> int:
        """Return the tag value of a single card."""
        return self.tag_values[card.value]

    def count_cards(self, cards: Sequence[Card]) -> int:
        """
        Count multiple cards.

        Args:
            cards: Cards to count

        Returns:
            The total tag value of all cards
        """
        return sum(self.tag(card) for card in cards)

    @staticmethod
    def true_count(running_count: float, decks_remaining: float) -> float:
        """
        Calculate the true count.

        Args:
            running_count: Running count of the cards seen
            decks_remaining: Number of decks remaining in the shoe

        Returns:
            The true count (running count / decks remaining)
        """
        if decks_remaining <= 0:
            return 0.0
        return running_count / decks_remaining

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
