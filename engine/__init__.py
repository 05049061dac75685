"""Blackjack rules engine - pure, UI-agnostic game rules."""

import logging

from engine.cards import Card, Suite
from engine.counting import count_cards
from engine.hand import (
    AvailableActions,
    Hand,
    HandInfo,
    HandValue,
    calculate,
    check_for_busted,
    get_higher_valid_value,
    is_blackjack,
    is_soft_hand,
    is_suited,
)
from engine.rules import RuleSet
from engine.sidebets import (
    AvailableBets,
    SideBets,
    get_lucky_lucky_multiplier,
    get_side_bets_info,
    is_lucky_lucky,
    is_perfect_pairs,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Card",
    "Suite",
    "HandValue",
    "AvailableActions",
    "Hand",
    "HandInfo",
    "RuleSet",
    "AvailableBets",
    "SideBets",
    "calculate",
    "get_higher_valid_value",
    "check_for_busted",
    "is_blackjack",
    "is_soft_hand",
    "is_suited",
    "count_cards",
    "is_lucky_lucky",
    "get_lucky_lucky_multiplier",
    "is_perfect_pairs",
    "get_side_bets_info",
]
