"""Tests for the deck report schemas."""

import pytest
from pydantic import ValidationError

from carddeck.cards import Card, Rank, Suit
from carddeck.schemas import CardSchema, DeckReport


class TestCardSchema:
    """Tests for CardSchema."""

    def test_from_card(self):
        """Test building a schema from a card."""
        schema = CardSchema.from_card(Card(Rank.JACK, Suit.HEARTS))
        assert schema.rank == "Jack"
        assert schema.suit == "Hearts"
        assert schema.name == "Jack of Hearts"


class TestDeckReport:
    """Tests for DeckReport."""

    def test_report_of_fresh_deck(self, ordered_deck):
        """Test a full deck report."""
        report = ordered_deck.report()
        assert report.size == 52
        assert len(report.cards) == 52
        assert report.cards[0].name == "Ace of Spades"

    def test_report_does_not_mutate(self, deck):
        """Test building a report keeps the deck intact."""
        before = deck.cards
        deck.report()
        assert deck.cards == before

    def test_json_round_trip(self, deck):
        """Test a report survives JSON serialization."""
        deck.deal_hand(49)
        report = deck.report()
        assert DeckReport.model_validate_json(report.model_dump_json()) == report

    def test_negative_size_rejected(self):
        """Test report size must be non-negative."""
        with pytest.raises(ValidationError):
            DeckReport(size=-1, cards=[])
