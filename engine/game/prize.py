"""Showdown payouts for main bets."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from engine.cards import Card
from engine.hand import (
    BLACKJACK,
    Hand,
    HandInfo,
    calculate,
    get_higher_valid_value,
    is_blackjack,
)
from engine.rules import DEFAULT_RULES, RuleSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wager:
    """One entry of the wager history (initial bet, double, split...)."""

    value: float
    kind: str | None = None


@dataclass(frozen=True)
class Prizes:
    """Showdown result for both hands."""

    final_bet: float
    won_on_right: float
    won_on_left: float

    @property
    def total_won(self) -> float:
        """Return the amount paid back over both hands."""
        return self.won_on_right + self.won_on_left


def get_prize(
    hand: Optional[Hand],
    dealer_cards: Sequence[Card],
    rules: RuleSet = DEFAULT_RULES,
) -> float:
    """
    Calculate the amount paid back on a hand at showdown.

    Payouts include the returned stake: a win pays twice the bet, a push
    returns the bet and a loss pays nothing.

    Args:
        hand: The player hand (None for a hand that was never played)
        dealer_cards: The dealer's final cards
        rules: Payout rules

    Returns:
        The amount paid back
    """
    if hand is None or not hand.close:
        return 0
    bet = hand.bet

    if hand.player_has_busted:
        return 0

    if hand.player_has_surrendered:
        return bet * rules.surrender_refund

    if hand.player_has_blackjack and not is_blackjack(dealer_cards):
        return bet + bet * rules.blackjack_payout

    dealer_value = get_higher_valid_value(calculate(dealer_cards))
    if dealer_value > BLACKJACK:
        logger.debug("Dealer busted with %d", dealer_value)
        return bet * 2

    player_value = get_higher_valid_value(hand.player_value)
    logger.debug("Showdown player %d vs dealer %d", player_value, dealer_value)
    if player_value > dealer_value:
        return bet * 2
    if player_value == dealer_value:
        return bet
    return 0


def get_prizes(
    history: Iterable[Wager],
    hand_info: HandInfo,
    dealer_cards: Sequence[Card],
    rules: RuleSet = DEFAULT_RULES,
) -> Prizes:
    """
    Calculate the total wagered and the payout of each hand.

    Args:
        history: Wagers placed during the round
        hand_info: The right hand and, after a split, the left hand
        dealer_cards: The dealer's final cards
        rules: Payout rules

    Returns:
        The showdown prizes
    """
    return Prizes(
        final_bet=sum(wager.value for wager in history),
        won_on_right=get_prize(hand_info.right, dealer_cards, rules),
        won_on_left=get_prize(hand_info.left, dealer_cards, rules),
    )
