"""Game engine for GanDengYan.

Every command is a transition from one immutable GameState to the next. A
rejected command returns the input state object itself, so nothing is ever
partially applied.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from gandengyan_server.config import RulesConfig
from gandengyan_server.errors import GameError
from gandengyan_server.models.card import Card, create_full_deck, shuffle_deck
from gandengyan_server.models.game_state import GameState
from gandengyan_server.models.player import Player

from .classifier import PatternClassifier
from .results import CommandResult, Outcome
from .validator import MoveValidator

logger = logging.getLogger(__name__)


class GameEngine:
    """Turn state machine: applies join/start/play/pass to a GameState."""

    def __init__(
        self,
        rules: RulesConfig | None = None,
        rng: random.Random | None = None,
        classifier: PatternClassifier | None = None,
        validator: MoveValidator | None = None,
    ):
        """Initialize game engine.

        Args:
            rules: Rules configuration (uses defaults if not provided)
            rng: Random source for shuffling (a fresh unseeded one if not provided)
            classifier: PatternClassifier instance (creates one if not provided)
            validator: MoveValidator instance (creates one if not provided)
        """
        self.rules = rules or RulesConfig()
        self.rng = rng or random.Random()
        self.classifier = classifier or PatternClassifier()
        self.validator = validator or MoveValidator()

    def join(self, state: GameState, name: str) -> CommandResult:
        """Add a player. The first player to join is the banker."""
        if state.started:
            return CommandResult.fail(state, GameError.GAME_IN_PROGRESS)
        if state.find_player_index(name) is not None:
            return CommandResult.fail(state, GameError.NAME_TAKEN)

        player = Player(name=name, is_banker=not state.players)
        new_state = state.model_copy(update={"players": state.players + (player,)})
        return CommandResult(state=new_state, outcome=Outcome.JOINED)

    def start(self, state: GameState) -> CommandResult:
        """Shuffle a fresh deck, deal, and hand the first turn to the banker."""
        if state.started:
            return CommandResult.fail(state, GameError.GAME_ALREADY_STARTED)
        if len(state.players) < self.rules.min_players:
            return CommandResult.fail(state, GameError.NOT_ENOUGH_PLAYERS)

        deck = shuffle_deck(create_full_deck(), self.rng)
        players, remaining = self._deal(state.players, deck)
        banker_index = next((i for i, p in enumerate(players) if p.is_banker), 0)

        new_state = state.model_copy(
            update={
                "players": players,
                "deck": remaining,
                "current_player_index": banker_index,
                "started": True,
                "last_play": None,
                "last_player_index": None,
                "consecutive_passes": 0,
                "winner": None,
                "turn_number": 0,
            }
        )
        return CommandResult(state=new_state, outcome=Outcome.STARTED)

    def _deal(
        self,
        players: tuple[Player, ...],
        deck: list[Card],
    ) -> tuple[tuple[Player, ...], tuple[Card, ...]]:
        """Deal cards in join order, banker first-sized.

        Returns:
            Tuple of (players with hands, undealt remainder)
        """
        dealt: list[Player] = []
        position = 0
        for player in players:
            count = self.rules.banker_hand_size if player.is_banker else self.rules.hand_size
            cards = deck[position:position + count]
            if len(cards) < count:
                logger.warning(f"Deck ran out while dealing to {player.name}")
            position += len(cards)
            dealt.append(player.model_copy(update={"hand": tuple(cards)}))

        logger.debug(f"Dealt {position} cards, {len(deck) - position} left in deck")
        return tuple(dealt), tuple(deck[position:])

    def _check_turn(self, state: GameState, name: str) -> tuple[int | None, GameError | None]:
        """Check that the named player may act now.

        Returns:
            Tuple of (player index, error). Exactly one is None.
        """
        if not state.started:
            return None, GameError.GAME_NOT_STARTED
        if state.is_finished:
            return None, GameError.GAME_OVER

        index = state.find_player_index(name)
        if index is None:
            return None, GameError.PLAYER_NOT_FOUND
        if index != state.current_player_index:
            return None, GameError.NOT_YOUR_TURN
        return index, None

    def play(self, state: GameState, name: str, card_indices: Sequence[int]) -> CommandResult:
        """Play cards selected by position in the player's hand.

        Args:
            state: Current state
            name: Acting player
            card_indices: Positions in the player's current (unsorted) hand

        Returns:
            CARD_PLAYED with the pattern, or GAME_OVER when the hand empties
        """
        index, error = self._check_turn(state, name)
        if error is not None:
            return CommandResult.fail(state, error)

        player = state.players[index]
        if not self._indices_valid(card_indices, player.hand_count()):
            return CommandResult.fail(state, GameError.INVALID_CARD_INDICES)

        updated_player, selected = player.without_indices(card_indices)
        pattern = self.classifier.classify(selected)

        validation = self.validator.validate(pattern, state.last_play)
        if not validation.is_valid:
            return CommandResult.fail(state, validation.error)

        players = list(state.players)
        players[index] = updated_player
        update = {
            "players": tuple(players),
            "last_play": pattern,
            "last_player_index": index,
            "consecutive_passes": 0,
            "turn_number": state.turn_number + 1,
        }

        if not updated_player.has_cards():
            # Terminal: the turn no longer advances
            update["winner"] = name
            new_state = state.model_copy(update=update)
            return CommandResult(
                state=new_state,
                outcome=Outcome.GAME_OVER,
                pattern=pattern,
                winner=name,
            )

        update["current_player_index"] = (index + 1) % len(state.players)
        new_state = state.model_copy(update=update)
        return CommandResult(state=new_state, outcome=Outcome.CARD_PLAYED, pattern=pattern)

    @staticmethod
    def _indices_valid(indices: Sequence[int], hand_size: int) -> bool:
        """Check indices are non-empty, distinct and inside the hand."""
        if not indices:
            return False
        if len(set(indices)) != len(indices):
            return False
        return all(0 <= i < hand_size for i in indices)

    def pass_turn(self, state: GameState, name: str) -> CommandResult:
        """Pass on the live pattern.

        When everyone but the live pattern's player has passed, the round
        resets: that player draws the top card of the deck (if any) and
        leads the next round.
        """
        index, error = self._check_turn(state, name)
        if error is not None:
            return CommandResult.fail(state, error)
        if state.last_play is None:
            return CommandResult.fail(state, GameError.CANNOT_PASS_FIRST_PLAY)

        num_players = len(state.players)
        passes = state.consecutive_passes + 1

        if passes < num_players - 1:
            new_state = state.model_copy(
                update={
                    "current_player_index": (index + 1) % num_players,
                    "consecutive_passes": passes,
                    "turn_number": state.turn_number + 1,
                }
            )
            return CommandResult(state=new_state, outcome=Outcome.PASSED)

        return self._reset_round(state)

    def _reset_round(self, state: GameState) -> CommandResult:
        """Reward the live pattern's player and clear the table."""
        rewarded_index = state.last_player_index
        rewarded = state.players[rewarded_index]

        drawn: Card | None = None
        deck = state.deck
        if self.rules.draw_on_round_reset and deck:
            drawn, deck = deck[0], deck[1:]

        players = list(state.players)
        if drawn is not None:
            players[rewarded_index] = rewarded.with_cards([drawn])

        new_state = state.model_copy(
            update={
                "players": tuple(players),
                "deck": deck,
                "current_player_index": rewarded_index,
                "last_play": None,
                "last_player_index": None,
                "consecutive_passes": 0,
                "turn_number": state.turn_number + 1,
            }
        )
        return CommandResult(
            state=new_state,
            outcome=Outcome.EVERYONE_ELSE_PASSED,
            rewarded_player=rewarded.name,
            drawn_card=drawn,
        )
