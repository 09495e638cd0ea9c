"""Game models."""

from .card import Card, Ordering, Rank, Suit, compare_cards, create_full_deck, shuffle_deck
from .game_state import CardPattern, GameState, PatternType
from .player import Player

__all__ = [
    "Card",
    "Ordering",
    "Rank",
    "Suit",
    "compare_cards",
    "create_full_deck",
    "shuffle_deck",
    "CardPattern",
    "GameState",
    "PatternType",
    "Player",
]
