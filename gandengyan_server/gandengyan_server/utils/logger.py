"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from gandengyan_server.logging.formatters import (
    format_card,
    format_game_state,
    format_hands,
    format_pattern,
)

if TYPE_CHECKING:
    from gandengyan_server.game.results import CommandResult
    from gandengyan_server.models.game_state import GameState


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show every player's hand
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_state(self, state: "GameState") -> None:
        """Print the table and, if enabled, every hand."""
        print(format_game_state(state))
        self.print_hands(state)

    def print_hands(self, state: "GameState") -> None:
        """Print hands for all players (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("Hands:")
        for name, hand in format_hands(state.players).items():
            print(f"  {name}: {hand}")

    def print_move(self, name: str, result: "CommandResult") -> None:
        """Print an accepted move."""
        if result.pattern is not None:
            print(f"  {name} -> {format_pattern(result.pattern)}")
        else:
            print(f"  {name} -> PASS")

        if result.rewarded_player is not None:
            print(f"Everyone passed! {result.rewarded_player} leads the next round.")
            if result.drawn_card is not None:
                print(f"{result.rewarded_player} draws a card.")

    def print_drawn_card(self, result: "CommandResult") -> None:
        """Tell a human player which card they drew."""
        if result.drawn_card is not None:
            print(f"You drew {format_card(result.drawn_card)}.")

    def print_game_end(self, winner: str) -> None:
        """Print game end results."""
        self.print_separator()
        print(f"Game over! {winner} wins!")
        self.print_separator()

    def print_roster(self, names: list[str]) -> None:
        """Print all joined players."""
        print("\nPlayers:")
        for i, name in enumerate(names):
            banker = " (Banker)" if i == 0 else ""
            print(f"  {name}{banker}")
        print()
