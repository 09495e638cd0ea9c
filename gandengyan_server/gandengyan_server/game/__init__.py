"""Game logic."""

from .classifier import PatternClassifier, classify
from .engine import GameEngine
from .results import CommandResult, Outcome
from .session import GameRegistry, GameSession
from .validator import MoveValidator, ValidationResult, can_beat

__all__ = [
    "CommandResult",
    "GameEngine",
    "GameRegistry",
    "GameSession",
    "MoveValidator",
    "Outcome",
    "PatternClassifier",
    "ValidationResult",
    "can_beat",
    "classify",
]
