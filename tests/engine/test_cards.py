"""Tests for the Card class."""

import pytest

from engine.cards import Card, Suite


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(1, Suite.SPADES)
        assert card.value == 1
        assert card.suite == Suite.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(1, Suite.SPADES)
        with pytest.raises(AttributeError):
            card.value = 13

    def test_card_is_ace(self):
        """Test ace detection."""
        assert Card(1, Suite.SPADES).is_ace
        assert not Card(13, Suite.SPADES).is_ace

    def test_face_cards_keep_literal_value(self):
        """Test face cards are not clamped to 10."""
        assert Card.from_string("JH").value == 11
        assert Card.from_string("QH").value == 12
        assert Card.from_string("KH").value == 13

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(1, Suite.SPADES)
        assert Card.from_string("2H") == Card(2, Suite.HEARTS)
        assert Card.from_string("10D") == Card(10, Suite.DIAMONDS)
        assert Card.from_string("TD") == Card(10, Suite.DIAMONDS)
        assert Card.from_string("kc") == Card(13, Suite.CLUBS)

    def test_card_from_string_with_symbols(self):
        """Test creating cards from strings with suite symbols."""
        assert Card.from_string("A♠") == Card(1, Suite.SPADES)
        assert Card.from_string("K♥") == Card(13, Suite.HEARTS)

    @pytest.mark.parametrize("notation", ["", "A", "1S", "AX", "11H"])
    def test_card_from_string_invalid(self, notation):
        """Test malformed strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(notation)

    def test_card_str(self):
        """Test string representation."""
        assert str(Card(1, Suite.SPADES)) == "A♠"
        assert str(Card(10, Suite.HEARTS)) == "10♥"
        assert str(Card(12, Suite.CLUBS)) == "Q♣"

    def test_card_equality_and_hash(self):
        """Test cards compare by value and suite."""
        assert Card(1, Suite.SPADES) == Card(1, Suite.SPADES)
        assert Card(1, Suite.SPADES) != Card(1, Suite.HEARTS)
        assert len({Card(1, Suite.SPADES), Card(1, Suite.SPADES)}) == 1

    def test_suite_values(self):
        """Test suite wire values."""
        assert Suite("hearts") is Suite.HEARTS
        assert {s.value for s in Suite} == {"hearts", "diamonds", "clubs", "spades"}
