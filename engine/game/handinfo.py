"""
Hand state derivation for each game transition.

Every function builds a fresh Hand record from the current player cards
(or from a previous record) and never modifies its inputs. A None hand
value propagates as a None record.
"""

from dataclasses import replace
from typing import Optional, Sequence

from engine.cards import Card
from engine.hand import (
    BLACKJACK,
    AvailableActions,
    Hand,
    calculate,
    check_for_busted,
    is_blackjack,
)


def get_hand_info(
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    has_split: bool = False,
) -> Optional[Hand]:
    """
    Build the base hand record with its default available actions.

    Args:
        player_cards: Cards in the player hand
        dealer_cards: Dealer cards (the first one is the up card)
        has_split: Whether the hand came from a split; split hands never
            count as blackjack

    Returns:
        The hand record, or None if the hand value cannot be derived yet
    """
    hand_value = calculate(player_cards)
    if hand_value is None:
        return None

    has_blackjack = is_blackjack(player_cards) and not has_split
    has_busted = check_for_busted(hand_value)
    is_closed = has_busted or has_blackjack or hand_value.hi == BLACKJACK

    can_split = (
        len(player_cards) > 1
        and player_cards[0].value == player_cards[1].value
        and not is_closed
    )
    can_insure = bool(dealer_cards) and dealer_cards[0].is_ace and not is_closed

    return Hand(
        cards=tuple(player_cards),
        player_value=hand_value,
        player_has_blackjack=has_blackjack,
        player_has_busted=has_busted,
        player_has_surrendered=False,
        close=is_closed,
        available_actions=AvailableActions(
            double=not is_closed,
            split=can_split,
            insurance=can_insure,
            hit=not is_closed,
            stand=not is_closed,
            surrender=not is_closed,
        ),
    )


def _with_actions(hand: Hand, **overrides: bool) -> Hand:
    return replace(hand, available_actions=replace(hand.available_actions, **overrides))


def get_hand_info_after_deal(
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    initial_bet: float,
) -> Optional[Hand]:
    """Hand right after the initial deal; only a natural closes it."""
    hand = get_hand_info(player_cards, dealer_cards)
    if hand is None:
        return None

    hand = _with_actions(hand, stand=True, hit=True, surrender=True)
    return replace(hand, bet=initial_bet, close=hand.player_has_blackjack)


def get_hand_info_after_split(
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    initial_bet: float,
) -> Optional[Hand]:
    """Hand created by a split (or the hand that was split)."""
    hand = get_hand_info(player_cards, dealer_cards, has_split=True)
    if hand is None:
        return None

    hand = _with_actions(
        hand,
        split=False,
        double=not hand.close and len(player_cards) == 2,
        insurance=False,
        surrender=False,
    )
    return replace(hand, bet=initial_bet)


def get_hand_info_after_hit(
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    initial_bet: float,
    has_split: bool = False,
) -> Optional[Hand]:
    """Hand after taking one more card."""
    hand = get_hand_info(player_cards, dealer_cards, has_split)
    if hand is None:
        return None

    hand = _with_actions(
        hand,
        double=len(player_cards) == 2,
        split=False,
        insurance=False,
        surrender=False,
    )
    return replace(hand, bet=initial_bet)


def get_hand_info_after_double(
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    initial_bet: float,
    has_split: bool = False,
) -> Optional[Hand]:
    """Hand after doubling down: one card, twice the bet, then closed."""
    hand = get_hand_info_after_hit(player_cards, dealer_cards, initial_bet, has_split)
    if hand is None:
        return None

    hand = _with_actions(hand, hit=False, stand=False)
    return replace(hand, bet=initial_bet * 2, close=True)


def get_hand_info_after_stand(hand: Optional[Hand]) -> Optional[Hand]:
    """Close the hand with no further actions."""
    if hand is None:
        return None
    return replace(hand, close=True, available_actions=AvailableActions.closed())


def get_hand_info_after_surrender(hand: Optional[Hand]) -> Optional[Hand]:
    """Close the hand and mark it surrendered."""
    hand = get_hand_info_after_stand(hand)
    if hand is None:
        return None
    return replace(hand, player_has_surrendered=True, close=True)


def get_hand_info_after_insurance(
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    initial_bet: float = 0,
) -> Optional[Hand]:
    """Hand after the insurance decision; insurance cannot be taken twice."""
    hand = get_hand_info(player_cards, dealer_cards)
    if hand is None:
        return None

    hand = _with_actions(hand, stand=True, hit=True, surrender=True, insurance=False)
    return replace(hand, bet=initial_bet, close=hand.player_has_blackjack)
