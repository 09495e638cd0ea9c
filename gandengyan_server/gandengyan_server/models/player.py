"""Player model."""

from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from .card import Card


class Player(BaseModel, frozen=True):
    """Player state.

    The hand keeps the order cards were received in. Card indices submitted
    for a play always refer to this order, never to the display order.
    """

    name: str
    hand: tuple[Card, ...] = ()
    is_banker: bool = False

    def hand_count(self) -> int:
        """Get number of cards in hand."""
        return len(self.hand)

    def has_cards(self) -> bool:
        """Check if the player still holds any card."""
        return len(self.hand) > 0

    def with_cards(self, cards: Iterable[Card]) -> "Player":
        """Return a copy with cards appended to the end of the hand."""
        return self.model_copy(update={"hand": self.hand + tuple(cards)})

    def without_indices(self, indices: Sequence[int]) -> tuple["Player", tuple[Card, ...]]:
        """Remove cards by hand index.

        Args:
            indices: Positions in the current hand. Must be valid and distinct.

        Returns:
            Tuple of (updated player, removed cards in the order requested).
        """
        removed = tuple(self.hand[i] for i in indices)
        selected = set(indices)
        remaining = tuple(c for i, c in enumerate(self.hand) if i not in selected)
        return self.model_copy(update={"hand": remaining}), removed

    def sorted_hand(self) -> list[tuple[int, Card]]:
        """Get (hand index, card) pairs in display order.

        Strongest first, ties broken by suit. Jokers sort before everything.
        """
        return sorted(
            enumerate(self.hand),
            key=lambda item: (-item[1].strength(), item[1].suit if item[1].suit is not None else -1),
        )

    def __str__(self) -> str:
        banker = " (Banker)" if self.is_banker else ""
        return f"{self.name}: {len(self.hand)} cards{banker}"
