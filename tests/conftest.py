"""Pytest fixtures for deck tests."""

import pytest
from random import Random

from carddeck.deck import Deck


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def ordered_deck(rng):
    """A fresh, unshuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d
