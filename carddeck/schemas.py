"""Pydantic schemas for deck reports."""

from pydantic import BaseModel, ConfigDict, Field

from carddeck.cards import Card


class CardSchema(BaseModel):
    """Card representation."""

    model_config = ConfigDict(frozen=True)

    rank: str
    suit: str
    name: str

    @classmethod
    def from_card(cls, card: Card) -> "CardSchema":
        return cls(rank=str(card.rank), suit=str(card.suit), name=str(card))


class DeckReport(BaseModel):
    """Snapshot of the cards remaining in a deck, in deal order."""

    size: int = Field(..., ge=0, description="Number of cards remaining")
    cards: list[CardSchema]
