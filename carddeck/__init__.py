"""Playing-card deck: construction, shuffling and dealing."""

from carddeck.cards import DECK_SIZE, NUM_RANKS, NUM_SUITS, Card, Rank, Suit, random_card
from carddeck.deck import Deck, Hand, new_deck
from carddeck.schemas import CardSchema, DeckReport

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "random_card",
    "Deck",
    "Hand",
    "new_deck",
    "CardSchema",
    "DeckReport",
    "NUM_RANKS",
    "NUM_SUITS",
    "DECK_SIZE",
]
