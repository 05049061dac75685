"""Tests for showdown payouts."""

import pytest

from engine.game.handinfo import (
    get_hand_info,
    get_hand_info_after_deal,
    get_hand_info_after_double,
    get_hand_info_after_hit,
    get_hand_info_after_split,
    get_hand_info_after_stand,
    get_hand_info_after_surrender,
)
from engine.game.prize import Prizes, Wager, get_prize, get_prizes
from engine.hand import HandInfo
from engine.rules import RuleSet
from tests.conftest import cards


def stood(notations, bet=10):
    """A closed hand after standing on the dealt cards."""
    return get_hand_info_after_stand(get_hand_info_after_deal(cards(*notations), cards("TD"), bet))


class TestGetPrize:
    """Tests for the payout of one hand."""

    def test_blackjack_pays_three_to_two(self):
        """Test a natural against a non-blackjack dealer."""
        hand = get_hand_info_after_deal(cards("AS", "TH"), cards("TD"), 10)
        assert get_prize(hand, cards("TD", "7C")) == 25

    def test_blackjack_six_to_five(self):
        """Test a 6:5 table."""
        hand = get_hand_info_after_deal(cards("AS", "TH"), cards("TD"), 10)
        assert get_prize(hand, cards("TD", "7C"), RuleSet.six_to_five()) == pytest.approx(22)

    def test_blackjack_against_blackjack_pushes(self):
        """Test both naturals push."""
        hand = get_hand_info_after_deal(cards("AS", "TH"), cards("AD"), 10)
        assert get_prize(hand, cards("AD", "TC")) == 10

    def test_surrender_returns_half(self):
        """Test surrender refunds half the bet."""
        dealt = get_hand_info_after_deal(cards("TS", "6H"), cards("TD"), 10)
        assert get_prize(get_hand_info_after_surrender(dealt), cards("TD", "7C")) == 5

    def test_push(self):
        """Test equal totals return the bet."""
        assert get_prize(stood(("TS", "8H")), cards("TD", "8C")) == 10

    def test_win(self):
        """Test a higher total wins even money."""
        assert get_prize(stood(("TS", "9H")), cards("TD", "8C")) == 20

    def test_soft_total_wins(self):
        """Test the best valid player total is used."""
        assert get_prize(stood(("AS", "7H")), cards("TD", "7C")) == 20

    def test_lose(self):
        """Test a lower total loses."""
        assert get_prize(stood(("TS", "7H")), cards("TD", "9C")) == 0

    def test_dealer_bust(self):
        """Test a dealer bust pays the standing hand."""
        assert get_prize(stood(("TS", "2H")), cards("TD", "6C", "9S")) == 20

    @pytest.mark.parametrize("dealer", [("TD", "7C"), ("TD", "6C", "9S"), ("AD", "TC")])
    def test_player_bust_loses(self, dealer):
        """Test a bust pays nothing regardless of the dealer."""
        hand = get_hand_info_after_hit(cards("TS", "6H", "9C"), cards("TD"), 10)
        assert get_prize(hand, cards(*dealer)) == 0

    def test_open_hand_pays_nothing(self):
        """Test an unfinished hand pays nothing."""
        hand = get_hand_info_after_deal(cards("TS", "9H"), cards("TD"), 10)
        assert get_prize(hand, cards("TD", "6C")) == 0

    def test_missing_hand(self):
        """Test a hand that was never played pays nothing."""
        assert get_prize(None, cards("TD", "7C")) == 0

    def test_doubled_win(self):
        """Test a doubled hand is paid on the doubled bet."""
        hand = get_hand_info_after_double(cards("5S", "6H", "9C"), cards("TD"), 10)
        assert get_prize(hand, cards("TD", "8C")) == 40

    def test_split_21_is_not_paid_as_blackjack(self):
        """Test a split 21 wins even money."""
        hand = get_hand_info_after_split(cards("AS", "TH"), cards("TD"), 10)
        assert get_prize(hand, cards("TD", "8C")) == 20

    def test_three_card_21_against_blackjack_pushes(self):
        """Test a dealer natural only compares totals against a non-natural 21."""
        hand = get_hand_info_after_hit(cards("7S", "7H", "7C"), cards("AD"), 10)
        assert hand.close
        assert get_prize(hand, cards("AD", "TC")) == 10

    def test_base_record_has_no_bet(self):
        """Test a record built without a bet pays nothing."""
        hand = get_hand_info(cards("7S", "7H", "7C"), cards("TD"))
        assert get_prize(hand, cards("TD", "7C")) == 0


class TestGetPrizes:
    """Tests for the round totals."""

    def test_single_hand(self):
        """Test a game without a split only pays the right hand."""
        prizes = get_prizes(
            history=[Wager(10, "DEAL")],
            hand_info=HandInfo(right=stood(("TS", "9H"))),
            dealer_cards=cards("TD", "8C"),
        )
        assert prizes == Prizes(final_bet=10, won_on_right=20, won_on_left=0)

    def test_split_hands(self):
        """Test both hands are paid independently."""
        right = get_hand_info_after_stand(get_hand_info_after_split(cards("8S", "TH"), cards("TD"), 10))
        left = get_hand_info_after_double(cards("8H", "3C", "5D"), cards("TD"), 10, has_split=True)
        prizes = get_prizes(
            history=[Wager(10, "DEAL"), Wager(10, "SPLIT"), Wager(10, "DOUBLE")],
            hand_info=HandInfo(right=right, left=left),
            dealer_cards=cards("TD", "7C"),
        )
        assert prizes.final_bet == 30
        assert prizes.won_on_right == 20
        assert prizes.won_on_left == 0
        assert prizes.total_won == 20

    def test_empty_history(self):
        """Test nothing wagered."""
        prizes = get_prizes([], HandInfo(), cards("TD", "7C"))
        assert prizes == Prizes(final_bet=0, won_on_right=0, won_on_left=0)
