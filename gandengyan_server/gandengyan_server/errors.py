"""Rule violations reported by game commands.

Errors are returned as values inside a CommandResult, never raised.
"""

from enum import Enum


class GameError(str, Enum):
    """Closed set of reasons a command can be rejected."""

    NAME_TAKEN = "name_taken"
    GAME_IN_PROGRESS = "game_in_progress"
    NOT_ENOUGH_PLAYERS = "not_enough_players"
    GAME_ALREADY_STARTED = "game_already_started"
    GAME_NOT_STARTED = "game_not_started"
    PLAYER_NOT_FOUND = "player_not_found"
    NOT_YOUR_TURN = "not_your_turn"
    INVALID_CARD_INDICES = "invalid_card_indices"
    INVALID_PATTERN = "invalid_pattern"
    CANNOT_BEAT_LAST_PLAY = "cannot_beat_last_play"
    CANNOT_PASS_FIRST_PLAY = "cannot_pass_first_play"
    GAME_OVER = "game_over"

    @property
    def message(self) -> str:
        """Get the user-facing description."""
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    GameError.NAME_TAKEN: "That name is already taken.",
    GameError.GAME_IN_PROGRESS: "The game is already in progress.",
    GameError.NOT_ENOUGH_PLAYERS: "Need at least 2 players to start the game.",
    GameError.GAME_ALREADY_STARTED: "The game has already started.",
    GameError.GAME_NOT_STARTED: "The game hasn't started yet.",
    GameError.PLAYER_NOT_FOUND: "No player with that name is in the game.",
    GameError.NOT_YOUR_TURN: "It's not your turn.",
    GameError.INVALID_CARD_INDICES: "One or more card indices are invalid.",
    GameError.INVALID_PATTERN: "The selected cards don't form a valid pattern.",
    GameError.CANNOT_BEAT_LAST_PLAY: (
        "Your play cannot beat the last play. "
        "Try higher cards of same type or a bomb."
    ),
    GameError.CANNOT_PASS_FIRST_PLAY: "You cannot pass on the first play.",
    GameError.GAME_OVER: "The game is over.",
}
