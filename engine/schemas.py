"""Pydantic schemas for the records exchanged with the table orchestrator."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from engine.cards import Card, Suite
from engine.game.prize import Prizes, Wager, get_prizes
from engine.hand import AvailableActions, Hand, HandInfo, HandValue
from engine.rules import DEFAULT_RULES, RuleSet
from engine.sidebets import SideBets


class CamelModel(BaseModel):
    """Base schema using camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def dump(self) -> dict[str, Any]:
        """Serialize using wire names."""
        return self.model_dump(by_alias=True, mode="json")


class CardSchema(CamelModel):
    """Card representation."""

    value: int = Field(..., ge=1, le=13, description="1 = ace, 11-13 = face cards")
    suite: Suite

    def to_card(self) -> Card:
        return Card(self.value, self.suite)


class HandValueSchema(CamelModel):
    """Dual hand total."""

    hi: int
    lo: int


class AvailableActionsSchema(CamelModel):
    """Actions available on a hand."""

    double: bool = False
    split: bool = False
    insurance: bool = False
    hit: bool = False
    stand: bool = False
    surrender: bool = False


class HandSchema(CamelModel):
    """Hand record."""

    cards: list[CardSchema]
    player_value: HandValueSchema
    player_has_blackjack: bool = False
    player_has_busted: bool = False
    player_has_surrendered: bool = False
    close: bool = False
    available_actions: AvailableActionsSchema = Field(default_factory=AvailableActionsSchema)
    bet: float = Field(default=0, ge=0)

    def to_hand(self) -> Hand:
        return Hand(
            cards=tuple(card.to_card() for card in self.cards),
            player_value=HandValue(hi=self.player_value.hi, lo=self.player_value.lo),
            player_has_blackjack=self.player_has_blackjack,
            player_has_busted=self.player_has_busted,
            player_has_surrendered=self.player_has_surrendered,
            close=self.close,
            available_actions=AvailableActions(**self.available_actions.model_dump()),
            bet=self.bet,
        )


class HandInfoSchema(CamelModel):
    """Right hand and, after a split, left hand."""

    right: Optional[HandSchema] = None
    left: Optional[HandSchema] = None

    def to_hand_info(self) -> HandInfo:
        return HandInfo(
            right=self.right.to_hand() if self.right else None,
            left=self.left.to_hand() if self.left else None,
        )


class WagerSchema(CamelModel):
    """Wager history entry."""

    value: float
    kind: Optional[str] = Field(default=None, alias="type")

    def to_wager(self) -> Wager:
        return Wager(value=self.value, kind=self.kind)


class SideBetsSchema(CamelModel):
    """Side bet wagers or winnings."""

    lucky_lucky: float = Field(default=0, ge=0)
    perfect_pairs: float = Field(default=0, ge=0)

    def to_side_bets(self) -> SideBets:
        return SideBets(lucky_lucky=self.lucky_lucky, perfect_pairs=self.perfect_pairs)


class PrizesSchema(CamelModel):
    """Showdown result."""

    final_bet: float
    won_on_right: float
    won_on_left: float


class ShowdownRequest(CamelModel):
    """Showdown payload: wager history, player hands and dealer cards."""

    history: list[WagerSchema] = Field(default_factory=list)
    hand_info: HandInfoSchema
    dealer_cards: list[CardSchema] = Field(..., min_length=1)

    def resolve(self, rules: RuleSet = DEFAULT_RULES) -> PrizesSchema:
        """Compute the prizes for this showdown."""
        prizes: Prizes = get_prizes(
            history=[wager.to_wager() for wager in self.history],
            hand_info=self.hand_info.to_hand_info(),
            dealer_cards=[card.to_card() for card in self.dealer_cards],
            rules=rules,
        )
        return PrizesSchema.model_validate(prizes)


def dump_hand(hand: Optional[Hand]) -> Optional[dict[str, Any]]:
    """Serialize a hand record, keeping None for a hand that cannot be derived."""
    if hand is None:
        return None
    return HandSchema.model_validate(hand).dump()
