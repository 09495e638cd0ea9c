"""Base strategy class for computer players.

Defines the interface that all strategies must implement.
"""

from abc import ABC, abstractmethod

from gandengyan_server.models.game_state import CardPattern, GameState
from gandengyan_server.models.player import Player


class Strategy(ABC):
    """Abstract base class for game strategies.

    Strategies return indices into the player's unsorted hand, ready to be
    passed to GameSession.play.
    """

    @abstractmethod
    def select_lead(self, player: Player, state: GameState) -> list[int]:
        """Select cards to play when leading a round.

        Args:
            player: Acting player (with current hand)
            state: Current game state

        Returns:
            Hand indices of the cards to play (never empty)
        """

    @abstractmethod
    def select_follow(
        self, player: Player, state: GameState, live: CardPattern
    ) -> list[int]:
        """Select cards to play over the live pattern.

        Args:
            player: Acting player (with current hand)
            state: Current game state
            live: Pattern to beat

        Returns:
            Hand indices of the cards to play (empty = pass)
        """

    def select_play(self, player: Player, state: GameState) -> list[int]:
        """Select cards to play based on current state.

        Dispatches to select_lead or select_follow depending on whether a
        pattern is live.
        """
        if state.last_play is None:
            return self.select_lead(player, state)
        return self.select_follow(player, state, state.last_play)
