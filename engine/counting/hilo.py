"""Hi-Lo card counting system."""

from types import MappingProxyType
from typing import Mapping, Sequence

from engine.cards import Card
from engine.counting.base import CountingSystem

# Indexed by card value - 1
_HI_LO_TABLE = (-1, 1, 1, 1, 1, 1, 0, 0, 0, -1, -1, -1, -1)


class HiLoSystem(CountingSystem):
    """
    Hi-Lo counting system.

    Tag values:
        2-6: +1 (low cards)
        7-9: 0  (neutral)
        10-K, A: -1 (high cards)

    Full deck sum: 0 (balanced)
    """

    _TAG_VALUES: Mapping[int, int] = MappingProxyType(
        {value: tag for value, tag in enumerate(_HI_LO_TABLE, start=1)}
    )

    @property
    def name(self) -> str:
        return "Hi-Lo"

    @property
    def tag_values(self) -> Mapping[int, int]:
        return self._TAG_VALUES

    @property
    def is_balanced(self) -> bool:
        return True


HI_LO = HiLoSystem()


def count_cards(cards: Sequence[Card]) -> int:
    """Return the Hi-Lo bias of a sequence of cards."""
    return HI_LO.count_cards(cards)
