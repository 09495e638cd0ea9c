"""Simple strategy implementation.

Strategy:
- Lead: Play the combination with the most cards, lowest strength, keeping
  bombs back unless nothing else is left
- Follow: Play the weakest combination of the same kind that beats the
  table, then the weakest bomb that does, otherwise pass
"""

from itertools import combinations

from gandengyan_server.game.classifier import MAX_PATTERN_SIZE, PatternClassifier
from gandengyan_server.game.validator import can_beat
from gandengyan_server.models.game_state import CardPattern, GameState
from gandengyan_server.models.player import Player

from .base import Strategy

# Largest combination any category accepts
MAX_COMBINATION = min(4, MAX_PATTERN_SIZE)


class SimpleStrategy(Strategy):
    """Greedy strategy that sheds cards as cheaply as possible."""

    def __init__(self, classifier: PatternClassifier | None = None):
        """Initialize strategy.

        Args:
            classifier: PatternClassifier instance (creates one if not provided)
        """
        self.classifier = classifier or PatternClassifier()

    def candidates(self, player: Player) -> list[tuple[tuple[int, ...], CardPattern]]:
        """Enumerate every valid combination in the hand.

        Returns:
            List of (hand indices, pattern) pairs
        """
        found = []
        for size in range(1, min(MAX_COMBINATION, player.hand_count()) + 1):
            for indices in combinations(range(player.hand_count()), size):
                pattern = self.classifier.classify(player.hand[i] for i in indices)
                if pattern.is_valid and not self._strands_joker(player, indices):
                    found.append((indices, pattern))
        return found

    @staticmethod
    def _strands_joker(player: Player, indices: tuple[int, ...]) -> bool:
        """Check if playing these cards would leave a lone joker in hand.

        A lone joker can never be played, so it could not lead a round.
        """
        left = [c for i, c in enumerate(player.hand) if i not in indices]
        return len(left) == 1 and left[0].is_joker

    def select_lead(self, player: Player, state: GameState) -> list[int]:
        """Lead with the most cards at the lowest strength."""
        options = self.candidates(player)
        if not options:
            return []

        # Bombs last, then more cards first, then weakest
        indices, _ = min(
            options,
            key=lambda o: (o[1].is_bomb, -len(o[0]), o[1].strength),
        )
        return list(indices)

    def select_follow(
        self, player: Player, state: GameState, live: CardPattern
    ) -> list[int]:
        """Beat the live pattern as cheaply as possible, or pass."""
        beaters = [o for o in self.candidates(player) if can_beat(o[1], live)]
        if not beaters:
            return []

        indices, _ = min(
            beaters,
            key=lambda o: (o[1].kind != live.kind, o[1].is_bomb, o[1].strength, len(o[0])),
        )
        return list(indices)
