"""Game logging and display formatting."""

from .formatters import (
    format_card,
    format_cards,
    format_error,
    format_game_state,
    format_hand_for_selection,
    format_hands,
    format_pattern,
    format_play_prompt,
)
from .game_logger import GameLogger

__all__ = [
    "GameLogger",
    "format_card",
    "format_cards",
    "format_error",
    "format_game_state",
    "format_hand_for_selection",
    "format_hands",
    "format_pattern",
    "format_play_prompt",
]
