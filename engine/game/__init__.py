"""Hand transitions, action legality and showdown payouts."""

from engine.game.handinfo import (
    get_hand_info,
    get_hand_info_after_deal,
    get_hand_info_after_double,
    get_hand_info_after_hit,
    get_hand_info_after_insurance,
    get_hand_info_after_split,
    get_hand_info_after_stand,
    get_hand_info_after_surrender,
)
from engine.game.prize import Prizes, Wager, get_prize, get_prizes
from engine.game.state import STAGE_ACTIONS, Action, Stage, allowed_actions, is_action_allowed

__all__ = [
    "get_hand_info",
    "get_hand_info_after_deal",
    "get_hand_info_after_split",
    "get_hand_info_after_hit",
    "get_hand_info_after_double",
    "get_hand_info_after_stand",
    "get_hand_info_after_surrender",
    "get_hand_info_after_insurance",
    "Prizes",
    "Wager",
    "get_prize",
    "get_prizes",
    "Action",
    "Stage",
    "STAGE_ACTIONS",
    "allowed_actions",
    "is_action_allowed",
]
