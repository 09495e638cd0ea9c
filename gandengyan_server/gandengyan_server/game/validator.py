"""Move validation for submitted plays."""

from dataclasses import dataclass

from gandengyan_server.errors import GameError
from gandengyan_server.models.game_state import CardPattern, PatternType


def can_beat(candidate: CardPattern, previous: CardPattern) -> bool:
    """Check if a pattern may be played over the previous one.

    Rules:
    - Different kinds never beat each other, unless the candidate is a bomb
    - A Bomb or ABomb beats any non-bomb pattern
    - An ABomb beats any Bomb
    - Within the same kind, strictly higher strength wins

    Args:
        candidate: Pattern being played (never INVALID)
        previous: Live pattern on the table (never INVALID)

    Returns:
        True if candidate beats previous
    """
    if candidate.kind != previous.kind and not candidate.is_bomb:
        return False
    if candidate.is_bomb and not previous.is_bomb:
        return True
    if candidate.kind == PatternType.ABOMB and previous.kind == PatternType.BOMB:
        return True
    if candidate.kind == previous.kind:
        return candidate.strength > previous.strength
    return False


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error: GameError | None = None

    @property
    def error_message(self) -> str:
        """Get the user-facing reason for a rejected move."""
        return self.error.message if self.error else ""


class MoveValidator:
    """Validates classified plays against the live pattern."""

    def validate(
        self,
        pattern: CardPattern,
        live_pattern: CardPattern | None,
    ) -> ValidationResult:
        """Validate a classified play.

        Args:
            pattern: Classification of the submitted cards
            live_pattern: Pattern to beat, None when leading a round

        Returns:
            ValidationResult
        """
        if not pattern.is_valid:
            return ValidationResult(is_valid=False, error=GameError.INVALID_PATTERN)

        # Leading a round: any valid combination is allowed
        if live_pattern is None:
            return ValidationResult(is_valid=True)

        if not can_beat(pattern, live_pattern):
            return ValidationResult(is_valid=False, error=GameError.CANNOT_BEAT_LAST_PLAY)

        return ValidationResult(is_valid=True)
