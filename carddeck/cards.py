"""Rank, Suit, and Card - immutable card representations."""

import random
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import TextIO


class Suit(Enum):
    """Card suits in canonical order."""

    SPADES = auto()
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        return self.name.title()


class Rank(Enum):
    """Card ranks in canonical order, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.name.title()


NUM_RANKS = len(Rank)
NUM_SUITS = len(Suit)
DECK_SIZE = NUM_RANKS * NUM_SUITS

_RANKS = tuple(Rank)
_SUITS = tuple(Suit)


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def read(self, file: TextIO | None = None) -> None:
        """Write the card's name, e.g. 'Ace of Spades', as one line."""
        print(self, file=file)


def random_card(rng: Random | None = None) -> Card:
    """
    Draw a card with a uniformly random rank and suit.

    Draws are independent, so two calls may return the same card. Without
    an explicit rng the process-wide random source is used.
    """
    source = rng or random
    rank = _RANKS[source.randrange(NUM_RANKS)]
    suit = _SUITS[source.randrange(NUM_SUITS)]
    return Card(rank, suit)
