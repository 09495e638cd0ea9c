"""Card model and deck helpers."""

import random
from enum import IntEnum

from pydantic import BaseModel, model_validator


class Suit(IntEnum):
    """Card suit (order used to break ties when sorting for display)."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3


class Rank(IntEnum):
    """Card rank.

    The value is the card strength used for every comparison:
    3 < 4 < ... < K < A < 2 < Joker
    """

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
    ACE = 14
    TWO = 15  # Ranked above Ace in this game
    JOKER = 16


class Ordering(IntEnum):
    """Result of comparing two cards."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# Map rank to display string
RANK_NAMES = {
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.JOKER: "Joker",
}

SUIT_SYMBOLS = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
}

JOKER_STRENGTH = int(Rank.JOKER)
JOKERS_PER_DECK = 2


class Card(BaseModel, frozen=True):
    """Single card representation."""

    rank: Rank
    suit: Suit | None = None  # None for Joker

    @model_validator(mode="after")
    def _check_suit(self) -> "Card":
        if self.rank == Rank.JOKER and self.suit is not None:
            raise ValueError("Joker cannot have a suit")
        if self.rank != Rank.JOKER and self.suit is None:
            raise ValueError("Non-joker card must have a suit")
        return self

    @classmethod
    def joker(cls) -> "Card":
        """Create a joker."""
        return cls(rank=Rank.JOKER)

    @property
    def is_joker(self) -> bool:
        """Check if this card is a joker."""
        return self.rank == Rank.JOKER

    def strength(self) -> int:
        """Get card strength for comparison. Higher is stronger."""
        return int(self.rank)

    def __str__(self) -> str:
        if self.is_joker:
            return "Joker"
        return f"{RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


def compare_cards(a: Card, b: Card) -> Ordering:
    """Compare two cards by strength (suits never matter)."""
    if a.strength() > b.strength():
        return Ordering.GREATER
    if a.strength() < b.strength():
        return Ordering.LESS
    return Ordering.EQUAL


def create_full_deck() -> list[Card]:
    """Create a full 54-card deck (52 + 2 jokers), unshuffled."""
    cards = [
        Card(rank=rank, suit=suit)
        for suit in Suit
        for rank in Rank
        if rank != Rank.JOKER
    ]
    cards.extend(Card.joker() for _ in range(JOKERS_PER_DECK))
    return cards


def shuffle_deck(deck: list[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy of the deck.

    Args:
        deck: Cards to shuffle (left untouched).
        rng: Random source. Uses the module-level generator if not provided.

    Returns:
        New list with the same cards in random order.
    """
    shuffled = list(deck)
    (rng or random).shuffle(shuffled)
    return shuffled
