"""Command results returned by the game engine."""

from dataclasses import dataclass
from enum import Enum

from gandengyan_server.errors import GameError
from gandengyan_server.models.card import Card
from gandengyan_server.models.game_state import CardPattern, GameState


class Outcome(str, Enum):
    """Successful command outcomes."""

    JOINED = "joined"
    STARTED = "started"
    CARD_PLAYED = "card_played"
    GAME_OVER = "game_over"
    PASSED = "passed"
    EVERYONE_ELSE_PASSED = "everyone_else_passed"


@dataclass(frozen=True)
class CommandResult:
    """Result of applying one command to a game state.

    Exactly one of `outcome` and `error` is set. On error, `state` is the
    unchanged input state.
    """

    state: GameState
    outcome: Outcome | None = None
    error: GameError | None = None

    pattern: CardPattern | None = None  # CARD_PLAYED / GAME_OVER
    winner: str | None = None  # GAME_OVER
    rewarded_player: str | None = None  # EVERYONE_ELSE_PASSED
    drawn_card: Card | None = None  # EVERYONE_ELSE_PASSED, None if deck was empty

    @classmethod
    def fail(cls, state: GameState, error: GameError) -> "CommandResult":
        """Create a rejection that leaves the state untouched."""
        return cls(state=state, error=error)

    @property
    def is_ok(self) -> bool:
        """Check if the command was accepted."""
        return self.error is None

    @property
    def roster(self) -> list[str]:
        """Get player names after the command."""
        return self.state.roster()

    def __str__(self) -> str:
        if self.error is not None:
            return f"Error: {self.error.value}"
        return f"OK: {self.outcome.value}"
