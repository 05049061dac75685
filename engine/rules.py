"""Blackjack payout rules."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config import PayoutConfig


@dataclass(frozen=True)
class RuleSet:
    """
    Payout rules applied at showdown and to side bets.

    Multipliers are applied to the wager; main bet payouts also return the
    stake, side bet payouts do not.
    """

    # Blackjack payout (3:2 = 1.5, 6:5 = 1.2)
    blackjack_payout: float = 1.5

    # Fraction of the bet returned on surrender
    surrender_refund: float = 0.5

    # Side bets
    perfect_pairs_payout: float = 5
    lucky_lucky_min: int = 19
    lucky_lucky_max: int = 21

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.blackjack_payout < 1.0:
            raise ValueError("blackjack_payout must be at least 1.0")
        if not 0.0 <= self.surrender_refund <= 1.0:
            raise ValueError("surrender_refund must be between 0 and 1")
        if self.perfect_pairs_payout < 0:
            raise ValueError("perfect_pairs_payout cannot be negative")
        if self.lucky_lucky_min > self.lucky_lucky_max:
            raise ValueError("lucky_lucky_min cannot exceed lucky_lucky_max")

    @classmethod
    def standard(cls) -> "RuleSet":
        """Standard 3:2 table."""
        return cls()

    @classmethod
    def six_to_five(cls) -> "RuleSet":
        """Table paying 6:5 on blackjack."""
        return cls(blackjack_payout=1.2)

    @classmethod
    def from_config(cls, payouts: "PayoutConfig") -> "RuleSet":
        """Build rules from the environment-driven payout configuration."""
        return cls(
            blackjack_payout=payouts.blackjack_payout,
            surrender_refund=payouts.surrender_refund,
            perfect_pairs_payout=payouts.perfect_pairs_payout,
        )


# Environment payout overrides apply through RuleSet.from_config only
DEFAULT_RULES = RuleSet.standard()
