"""Hand evaluation for blackjack."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from engine.cards import Card

logger = logging.getLogger(__name__)

BLACKJACK = 21
_ACE_HIGH = 11
_SOFT_17 = 17


@dataclass(frozen=True)
class HandValue:
    """Dual hand total: ``lo`` counts every ace as 1, ``hi`` promotes aces to 11."""

    hi: int
    lo: int


@dataclass(frozen=True)
class AvailableActions:
    """Player actions available on a hand."""

    double: bool = False
    split: bool = False
    insurance: bool = False
    hit: bool = False
    stand: bool = False
    surrender: bool = False

    @classmethod
    def closed(cls) -> "AvailableActions":
        """Return a record with every action disabled."""
        return cls()


@dataclass(frozen=True)
class Hand:
    """
    A blackjack hand as derived after one game transition.

    Records are never mutated: each transition builds a new one from the
    current card sequence.
    """

    cards: tuple[Card, ...]
    player_value: HandValue
    player_has_blackjack: bool = False
    player_has_busted: bool = False
    player_has_surrendered: bool = False
    close: bool = False
    available_actions: AvailableActions = field(default_factory=AvailableActions)
    bet: float = 0

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({get_higher_valid_value(self.player_value)})"
        if self.player_has_blackjack:
            value_str = "(BLACKJACK)"
        if self.player_has_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"


@dataclass(frozen=True)
class HandInfo:
    """Concurrent player hands. ``left`` only exists after a split."""

    right: Optional[Hand] = None
    left: Optional[Hand] = None


def calculate(cards: Sequence[Optional[Card]]) -> Optional[HandValue]:
    """
    Calculate the hi/lo value of a sequence of cards.

    Aces are folded one at a time in encounter order. Each ace counts 11
    while that keeps ``hi`` at or below 21, otherwise 1; when ``hi`` goes
    over 21 with a valid ``lo`` the soft total collapses onto ``lo``.

    Returns:
        The hand value, or None for a single not-yet-dealt card slot
    """
    if len(cards) == 1:
        card = cards[0]
        if card is None:
            logger.debug("No hand value for an absent card")
            return None
        if card.is_ace:
            return HandValue(hi=_ACE_HIGH, lo=1)
        return HandValue(hi=card.value, lo=card.value)

    aces = 0
    total = 0
    for card in cards:
        if card.is_ace:
            aces += 1
        else:
            total += card.value

    hi = lo = total
    for _ in range(aces):
        if hi + _ACE_HIGH <= BLACKJACK:
            hi += _ACE_HIGH
        else:
            hi += 1
        lo += 1
        if hi > BLACKJACK and lo <= BLACKJACK:
            hi = lo

    return HandValue(hi=hi, lo=lo)


def get_higher_valid_value(hand_value: HandValue) -> int:
    """Return ``hi`` when it does not bust, else ``lo``."""
    return hand_value.hi if hand_value.hi <= BLACKJACK else hand_value.lo


def check_for_busted(hand_value: HandValue) -> bool:
    """Check that no valid total remains."""
    return hand_value.hi > BLACKJACK and hand_value.lo == hand_value.hi


def is_blackjack(cards: Sequence[Card]) -> bool:
    """Check for a natural (21 with exactly 2 cards)."""
    return len(cards) == 2 and calculate(cards).hi == BLACKJACK


def is_soft_hand(cards: Sequence[Card]) -> bool:
    """
    Check for a soft 17.

    Aces count 11 only while the running total is below 11, so this only
    recognises hands totalling exactly 17 that way, not soft hands in
    general.
    """
    if not any(card.is_ace for card in cards):
        return False

    total = 0
    for card in cards:
        total += _ACE_HIGH if card.is_ace and total < _ACE_HIGH else card.value
    return total == _SOFT_17


def is_suited(cards: Sequence[Card] = ()) -> bool:
    """Check if all cards share one suite. An empty hand is not suited."""
    if not cards:
        return False
    suite = cards[0].suite
    return all(card.suite == suite for card in cards)
