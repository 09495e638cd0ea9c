"""Shared fixtures and card helpers for tests."""

import random

import pytest

from gandengyan_server.config import RulesConfig
from gandengyan_server.game.classifier import PatternClassifier
from gandengyan_server.game.engine import GameEngine
from gandengyan_server.models.card import Card, Rank, Suit
from gandengyan_server.models.game_state import GameState
from gandengyan_server.models.player import Player

H, D, C, S = Suit.HEART, Suit.DIAMOND, Suit.CLUB, Suit.SPADE


def card(rank: Rank, suit: Suit = Suit.HEART) -> Card:
    """Create a non-joker card."""
    return Card(rank=rank, suit=suit)


def joker() -> Card:
    """Create a joker."""
    return Card.joker()


def started_state(hands: list[list[Card]], deck: list[Card] | None = None, current: int = 0) -> GameState:
    """Build a started game with fixed hands (first player is banker)."""
    players = tuple(
        Player(name=f"P{i + 1}", hand=tuple(hand), is_banker=(i == 0))
        for i, hand in enumerate(hands)
    )
    return GameState(
        players=players,
        current_player_index=current,
        started=True,
        deck=tuple(deck or ()),
    )


@pytest.fixture
def classifier():
    return PatternClassifier()


@pytest.fixture
def engine():
    return GameEngine(RulesConfig(), random.Random(42))
