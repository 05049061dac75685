"""Lucky Lucky and Perfect Pairs side bets."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from engine.cards import Card
from engine.hand import calculate, is_suited
from engine.paytables import Paytable, lucky_lucky
from engine.rules import DEFAULT_RULES, RuleSet

if TYPE_CHECKING:
    from config import TableConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SideBets:
    """Side bet amounts, either wagered or won."""

    lucky_lucky: float = 0
    perfect_pairs: float = 0


@dataclass(frozen=True)
class AvailableBets:
    """Side bets offered at the table."""

    lucky_lucky: bool = True
    perfect_pairs: bool = True

    @classmethod
    def from_config(cls, table: "TableConfig") -> "AvailableBets":
        """Build the offered side bets from the table configuration."""
        return cls(
            lucky_lucky=table.lucky_lucky_enabled,
            perfect_pairs=table.perfect_pairs_enabled,
        )


def is_lucky_lucky(
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    rules: RuleSet = DEFAULT_RULES,
) -> bool:
    """Check if the player hand and dealer up card fall in the Lucky Lucky window."""
    player = calculate(player_cards)
    dealer = calculate(dealer_cards)
    if player is None or dealer is None:
        return False

    totals = (
        player.hi + dealer.hi,
        player.lo + dealer.lo,
        player.hi + dealer.lo,
        player.lo + dealer.hi,
    )
    return any(rules.lucky_lucky_min <= total <= rules.lucky_lucky_max for total in totals)


def get_lucky_lucky_multiplier(
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    paytable: Paytable = lucky_lucky,
) -> float:
    """Build the paytable key from player and dealer cards and look it up."""
    cards = [*player_cards, *dealer_cards]
    flat_cards = "".join(str(card.value) for card in cards)
    multiplier = paytable(flat_cards, is_suited(cards), calculate(cards))
    logger.debug("Lucky Lucky %s pays %s", flat_cards, multiplier)
    return multiplier


def is_perfect_pairs(player_cards: Sequence[Card]) -> bool:
    """Check if the first two player cards share a value."""
    return len(player_cards) >= 2 and player_cards[0].value == player_cards[1].value


def get_side_bets_info(
    available_bets: AvailableBets,
    side_bets: SideBets,
    player_cards: Sequence[Card],
    dealer_cards: Sequence[Card],
    rules: RuleSet = DEFAULT_RULES,
    paytable: Paytable = lucky_lucky,
) -> SideBets:
    """
    Calculate side bet winnings.

    A side bet pays only when it is offered, placed and qualifies.

    Args:
        available_bets: Side bets offered at the table
        side_bets: Side bet wagers
        player_cards: The player's first two cards
        dealer_cards: The dealer up card
        rules: Payout rules
        paytable: Lucky Lucky paytable

    Returns:
        Winnings per side bet
    """
    lucky_lucky_won: float = 0
    perfect_pairs_won: float = 0

    if (
        available_bets.lucky_lucky
        and side_bets.lucky_lucky > 0
        and is_lucky_lucky(player_cards, dealer_cards, rules)
    ):
        multiplier = get_lucky_lucky_multiplier(player_cards, dealer_cards, paytable)
        lucky_lucky_won = side_bets.lucky_lucky * multiplier

    # Rank pairs only; coloured and mixed pair tiers are not offered
    if (
        available_bets.perfect_pairs
        and side_bets.perfect_pairs > 0
        and is_perfect_pairs(player_cards)
    ):
        perfect_pairs_won = side_bets.perfect_pairs * rules.perfect_pairs_payout

    return SideBets(lucky_lucky=lucky_lucky_won, perfect_pairs=perfect_pairs_won)
