"""Command-line demonstration: build, shuffle and deal from a deck."""

import argparse
from random import Random

from carddeck.config import config
from carddeck.deck import Deck, Hand, new_deck
from carddeck.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)

_ORDINALS = [
    "First", "Second", "Third", "Fourth", "Fifth",
    "Sixth", "Seventh", "Eighth", "Ninth", "Tenth",
]


def hand_label(number: int) -> str:
    """Name the n-th dealt hand, e.g. 'Second hand'."""
    if 1 <= number <= len(_ORDINALS):
        return f"{_ORDINALS[number - 1]} hand"
    return f"Hand {number}"


def _hand_size(value: str) -> int:
    size = int(value)
    if size < 0:
        raise argparse.ArgumentTypeError(f"hand size must be non-negative, got {size}")
    return size


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shuffle a deck and deal hands from it")
    parser.add_argument("--seed", type=int, default=config.deck.seed, help="Random seed")
    parser.add_argument(
        "--hands",
        type=_hand_size,
        nargs="*",
        default=config.deck.hand_sizes,
        help="Sizes of the hands to deal, in order",
    )
    parser.add_argument("--json", action="store_true", help="Print deck reports as JSON")
    parser.add_argument("--log-level", default=config.logging.level, help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the deck demonstration."""
    args = parse_args(argv)
    setup_logging(args.log_level, config.logging.format, config.logging.datefmt)

    def show(deck: Deck) -> None:
        if args.json:
            print(deck.report().model_dump_json(indent=2))
        else:
            deck.read()

    print("Welcome to the casino!")
    deck = new_deck(rng=Random(args.seed))
    show(deck)

    print("Shuffling...")
    deck.shuffle()

    hand: Hand = []
    for size in args.hands:
        hand = deck.deal_hand(size)
        logger.debug("Requested %d cards, got %d", size, len(hand))

    if args.hands:
        print(f"{hand_label(len(args.hands))}:")
        for card in hand:
            card.read()

    show(deck)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
