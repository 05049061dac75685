"""Side bet paytables."""

from types import MappingProxyType
from typing import Callable, Mapping

from engine.hand import HandValue, get_higher_valid_value

# Paytable signature: (concatenated card values, suited, combined total) -> multiplier
Paytable = Callable[[str, bool, HandValue], float]

# Three-card patterns, keyed by (sorted values, suited)
LUCKY_LUCKY_PATTERNS: Mapping[tuple[str, bool], int] = MappingProxyType({
    ("777", True): 200,
    ("678", True): 100,
    ("777", False): 50,
    ("678", False): 30,
})

# Combined totals, keyed by (total, suited)
LUCKY_LUCKY_TOTALS: Mapping[tuple[int, bool], int] = MappingProxyType({
    (21, True): 15,
    (21, False): 3,
    (20, True): 2,
    (20, False): 2,
    (19, True): 2,
    (19, False): 2,
})


def lucky_lucky(flat_cards: str, suited: bool, total: HandValue) -> int:
    """
    Look up the Lucky Lucky multiplier.

    Args:
        flat_cards: Player and dealer up card values concatenated, e.g. "786"
        suited: Whether all three cards share a suite
        total: Combined value of the three cards

    Returns:
        The multiplier (0 if the combination does not pay)
    """
    pattern = "".join(sorted(flat_cards))
    if (pattern, suited) in LUCKY_LUCKY_PATTERNS:
        return LUCKY_LUCKY_PATTERNS[(pattern, suited)]
    return LUCKY_LUCKY_TOTALS.get((get_higher_valid_value(total), suited), 0)
