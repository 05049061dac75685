"""Pytest fixtures for blackjack engine tests."""

import pytest
from hypothesis import strategies as st

from engine.cards import Card, Suite
from engine.rules import RuleSet
from engine.sidebets import AvailableBets, SideBets


def cards(*notations: str) -> list[Card]:
    """Build cards from short notation, e.g. cards("AS", "TH")."""
    return [Card.from_string(n) for n in notations]


@pytest.fixture
def full_deck():
    """All 52 cards of a single deck."""
    return [Card(value, suite) for suite in Suite for value in range(1, 14)]


@pytest.fixture
def blackjack_cards():
    """A natural blackjack (A-10)."""
    return cards("AS", "TH")


@pytest.fixture
def soft_17_cards():
    """A soft 17 (A-6)."""
    return cards("AS", "6H")


@pytest.fixture
def hard_16_cards():
    """A hard 16 (10-6)."""
    return cards("TS", "6H")


@pytest.fixture
def pair_8s_cards():
    """A pair of 8s."""
    return cards("8S", "8H")


@pytest.fixture
def bust_cards():
    """A busted hand (10-6-9)."""
    return cards("TS", "6H", "9C")


@pytest.fixture
def dealer_ace():
    """Dealer showing an ace."""
    return cards("AD")


@pytest.fixture
def dealer_ten():
    """Dealer showing a ten."""
    return cards("TD")


@pytest.fixture
def rules():
    """Default payout rules."""
    return RuleSet()


@pytest.fixture
def all_side_bets():
    """A table offering every side bet."""
    return AvailableBets(lucky_lucky=True, perfect_pairs=True)


@pytest.fixture
def side_bet_wagers():
    """10 on each side bet."""
    return SideBets(lucky_lucky=10, perfect_pairs=10)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw, max_value=13):
    """Generate a random card."""
    value = draw(st.integers(min_value=1, max_value=max_value))
    suite = draw(st.sampled_from(list(Suite)))
    return Card(value, suite)


@st.composite
def hand_strategy(draw, min_cards=2, max_cards=5, max_value=13):
    """Generate a random list of cards."""
    return draw(
        st.lists(card_strategy(max_value=max_value), min_size=min_cards, max_size=max_cards)
    )
