"""Game sessions: one serialized mutator per game.

A GameSession owns the current state of one game and applies commands one
at a time under a lock. Front ends (terminal, bots) talk to the session, never
to the engine directly. Sessions share nothing, so independent games run in
parallel.
"""

from __future__ import annotations

import logging
import random
import string
import threading
from collections.abc import Sequence

from gandengyan_server.config import RulesConfig
from gandengyan_server.logging.formatters import format_pattern
from gandengyan_server.logging.game_logger import GameLogger
from gandengyan_server.models.game_state import GameState

from .engine import GameEngine
from .results import CommandResult, Outcome

logger = logging.getLogger(__name__)


class GameSession:
    """A single game instance."""

    def __init__(
        self,
        game_id: str = "local",
        engine: GameEngine | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game session.

        Args:
            game_id: Identifier used in logs
            engine: GameEngine instance (creates one if not provided)
            game_logger: GameLogger instance for detailed logging
        """
        self.game_id = game_id
        self.engine = engine or GameEngine()
        self.game_logger = game_logger

        self._state = GameState()
        self._lock = threading.Lock()

    def get_state(self) -> GameState:
        """Get a snapshot of the current state."""
        with self._lock:
            return self._state

    def join(self, name: str) -> CommandResult:
        """Add a player to the game."""
        with self._lock:
            result = self._apply(self.engine.join(self._state, name), f"join {name}")
            if result.is_ok:
                logger.info(f"[{self.game_id}] {name} joined ({len(result.state.players)} players)")
            return result

    def start(self) -> CommandResult:
        """Deal cards and start the game."""
        with self._lock:
            result = self._apply(self.engine.start(self._state), "start")
            if result.is_ok:
                logger.info(
                    f"[{self.game_id}] Game started, {result.state.current_player.name} leads"
                )
                if self.game_logger:
                    self.game_logger.log_game_start(self.game_id, result.state)
            return result

    def play(self, name: str, card_indices: Sequence[int]) -> CommandResult:
        """Play cards by their index in the player's hand."""
        with self._lock:
            result = self._apply(
                self.engine.play(self._state, name, card_indices),
                f"play {name} {list(card_indices)}",
            )
            if not result.is_ok:
                return result

            logger.info(f"[{self.game_id}] {name} played {format_pattern(result.pattern)}")
            if self.game_logger:
                self.game_logger.log_turn(self.game_id, name, "play", result.pattern, result.state)

            if result.outcome == Outcome.GAME_OVER:
                logger.info(f"[{self.game_id}] {name} wins")
                if self.game_logger:
                    self.game_logger.log_game_end(self.game_id, result.state)
            return result

    def pass_turn(self, name: str) -> CommandResult:
        """Pass on the live pattern."""
        with self._lock:
            result = self._apply(self.engine.pass_turn(self._state, name), f"pass {name}")
            if not result.is_ok:
                return result

            logger.info(f"[{self.game_id}] {name} passed")
            if self.game_logger:
                self.game_logger.log_turn(self.game_id, name, "pass", None, result.state)

            if result.outcome == Outcome.EVERYONE_ELSE_PASSED:
                logger.info(f"[{self.game_id}] Everyone passed, {result.rewarded_player} leads")
                if self.game_logger:
                    self.game_logger.log_round_reset(
                        self.game_id, result.state, result.rewarded_player, result.drawn_card
                    )
            return result

    def _apply(self, result: CommandResult, command: str) -> CommandResult:
        """Swap in the new state on success. Caller holds the lock."""
        if result.is_ok:
            self._state = result.state
        else:
            logger.debug(f"[{self.game_id}] Rejected {command}: {result.error.value}")
        return result


class GameRegistry:
    """Manages all active games.

    Provides game creation with unique codes, lookup, and cleanup.
    """

    def __init__(
        self,
        rules: RulesConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            rules: Rules applied to every game created
            rng: Random source for game codes and for seeding each game's shuffles
        """
        self.rules = rules or RulesConfig()
        self.rng = rng or random.Random()
        self.games: dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def _generate_code(self, max_attempts: int = 100) -> str:
        """Generate a unique 4-letter game code."""
        for _ in range(max_attempts):
            code = "".join(self.rng.choices(string.ascii_uppercase, k=4))
            if code not in self.games:
                return code
        raise RuntimeError("Could not generate unique game code")

    def create_game(self, game_logger: GameLogger | None = None) -> GameSession:
        """Create a new game with a unique code.

        Returns:
            The newly created GameSession.
        """
        with self._lock:
            code = self._generate_code()
            engine = GameEngine(self.rules, random.Random(self.rng.getrandbits(64)))
            session = GameSession(code, engine, game_logger)
            self.games[code] = session
            logger.info(f"Created game {code}")
            return session

    def get_game(self, code: str) -> GameSession | None:
        """Get a game by its code (case-insensitive)."""
        with self._lock:
            return self.games.get(code.upper())

    def remove_game(self, code: str) -> None:
        """Delete a game."""
        with self._lock:
            self.games.pop(code.upper(), None)

    def find_player_game(self, name: str) -> GameSession | None:
        """Find which game a player has joined."""
        with self._lock:
            sessions = list(self.games.values())
        for session in sessions:
            if session.get_state().find_player_index(name) is not None:
                return session
        return None
