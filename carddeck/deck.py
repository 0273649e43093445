"""Deck of cards with shuffle and deal operations."""

import random
from random import Random
from typing import Iterator, TextIO

from carddeck.cards import Card, Rank, Suit
from carddeck.logging_utils import get_logger
from carddeck.schemas import CardSchema, DeckReport

logger = get_logger(__name__)

Hand = list[Card]


class Deck:
    """
    A standard 52-card deck.

    Cards are dealt from the front. The deck only ever shrinks: dealing
    removes cards and shuffling reorders them in place.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a full deck in rank-major order.

        Args:
            rng: Random number generator for shuffling. Defaults to the
                process-wide source shared by every deck.
        """
        self._rng = rng or random
        self._cards: list[Card] = [Card(rank, suit) for rank in Rank for suit in Suit]

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self._rng.shuffle(self._cards)
        logger.debug("Shuffled %d cards", len(self._cards))

    def deal_hand(self, size: int) -> Hand:
        """
        Remove the first `size` cards from the deck and return them in order.

        If fewer than `size` cards remain, every remaining card is dealt
        instead and a notice is logged.

        Args:
            size: Number of cards requested (non-negative)

        Returns:
            The dealt cards, independent of the deck.
        """
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"Hand size must be an integer, got {size!r}")
        if size < 0:
            raise ValueError(f"Hand size must be non-negative, got {size}")

        if size > len(self._cards):
            size = len(self._cards)
            logger.warning("Not enough cards in the deck. Dealing %d cards instead.", size)

        hand = self._cards[:size]
        del self._cards[:size]
        logger.debug("Dealt %d cards, %d remaining", size, len(self._cards))
        return hand

    def report(self) -> DeckReport:
        """Return a snapshot of the remaining cards."""
        return DeckReport(
            size=len(self._cards),
            cards=[CardSchema.from_card(card) for card in self._cards],
        )

    def read(self, file: TextIO | None = None) -> None:
        """Write the number of cards remaining, then each card in order."""
        print(f"There are {len(self._cards)} cards in the deck.", file=file)
        for card in self._cards:
            card.read(file)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the remaining cards in deal order."""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """Check if every card has been dealt."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


def new_deck(rng: Random | None = None) -> Deck:
    """Build a full, ordered 52-card deck."""
    return Deck(rng=rng)
