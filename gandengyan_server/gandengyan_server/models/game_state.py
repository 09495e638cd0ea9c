"""Game state models."""

from enum import Enum

from pydantic import BaseModel

from .card import Card
from .player import Player


class PatternType(str, Enum):
    """Type of card combination played."""

    INVALID = "invalid"
    SINGLE = "single"
    PAIR = "pair"
    BOMB = "bomb"  # Three of a kind, or the two jokers
    ABOMB = "abomb"  # Four of a kind
    SEQUENCE = "sequence"  # Three consecutive ranks
    STRAIGHT = "straight"  # Two consecutive pairs


PATTERN_NAMES = {
    PatternType.INVALID: "Invalid pattern",
    PatternType.SINGLE: "Single",
    PatternType.PAIR: "Pair",
    PatternType.BOMB: "Bomb",
    PatternType.ABOMB: "Atomic Bomb",
    PatternType.SEQUENCE: "Sequence",
    PatternType.STRAIGHT: "Straight pairs",
}


class CardPattern(BaseModel, frozen=True):
    """A classified card combination.

    Built by the classifier only. `strength` is comparable between patterns
    of the same kind; bombs have their own cross-kind rules.
    """

    kind: PatternType
    cards: tuple[Card, ...]
    strength: int = 0

    @classmethod
    def invalid(cls, cards: tuple[Card, ...]) -> "CardPattern":
        """Create the pattern returned when no category matches."""
        return cls(kind=PatternType.INVALID, cards=cards, strength=0)

    @property
    def is_valid(self) -> bool:
        """Check if the cards formed a playable combination."""
        return self.kind != PatternType.INVALID

    @property
    def is_bomb(self) -> bool:
        """Check if this is a Bomb or an ABomb."""
        return self.kind in (PatternType.BOMB, PatternType.ABOMB)

    def __str__(self) -> str:
        cards = ", ".join(str(c) for c in self.cards)
        return f"{PATTERN_NAMES[self.kind]}: {cards}"


class GameState(BaseModel, frozen=True):
    """Overall game state.

    Immutable snapshot: every accepted command produces a new GameState.
    """

    players: tuple[Player, ...] = ()
    current_player_index: int = 0
    started: bool = False

    # Live pattern of the current round (None right after a round reset)
    last_play: CardPattern | None = None
    last_player_index: int | None = None

    consecutive_passes: int = 0
    winner: str | None = None
    deck: tuple[Card, ...] = ()  # Undealt remainder, top card first

    turn_number: int = 0

    @property
    def is_finished(self) -> bool:
        """Check if a player has won."""
        return self.winner is not None

    @property
    def current_player(self) -> Player | None:
        """Get the player whose turn it is (None before the game starts)."""
        if not self.started or not self.players:
            return None
        return self.players[self.current_player_index]

    @property
    def last_player(self) -> Player | None:
        """Get the player who made the live play."""
        if self.last_player_index is None:
            return None
        return self.players[self.last_player_index]

    def find_player_index(self, name: str) -> int | None:
        """Get the seat index of a player by name."""
        for i, player in enumerate(self.players):
            if player.name == name:
                return i
        return None

    def get_player(self, name: str) -> Player | None:
        """Get a player by name."""
        index = self.find_player_index(name)
        return None if index is None else self.players[index]

    def roster(self) -> list[str]:
        """Get player names in join order."""
        return [p.name for p in self.players]

    def total_cards(self) -> int:
        """Count cards held by players plus the undealt deck."""
        return sum(p.hand_count() for p in self.players) + len(self.deck)

    def __str__(self) -> str:
        if not self.started:
            return f"Waiting to start ({len(self.players)} players)"
        if self.winner is not None:
            return f"Game over, {self.winner} wins"
        return f"Turn {self.turn_number}, {self.current_player.name}'s turn"
