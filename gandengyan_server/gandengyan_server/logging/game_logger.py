"""JSONL event log of GanDengYan games, one event per line."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from gandengyan_server.config import GameLogConfig
from gandengyan_server.models.card import Card
from gandengyan_server.models.game_state import CardPattern, GameState

from .formatters import format_card, format_cards, format_hands


class GameLogger:
    """Records accepted commands of one or more games for later replay.

    Use as a context manager. While disabled, or outside the ``with`` block,
    every ``log_*`` call is a no-op. Events carry a running ``seq`` number so
    interleaved games in one file can be put back in order.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Game log settings. Disabled when not provided.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None
        self._seq = 0

    def __enter__(self) -> "GameLogger":
        self.open()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self) -> None:
        """Open the log file for appending, creating its directory."""
        if not self.config.enabled or self.is_open:
            return
        log_path = Path(self.config.output_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = log_path.open("a", encoding="utf-8")

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file is None:
            return
        self._seq += 1
        line = json.dumps({"seq": self._seq, **event}, ensure_ascii=False)
        self._file.write(line + "\n")
        self._file.flush()

    def log_game_start(self, game_id: str, state: GameState) -> None:
        """Log game start with the dealt hands.

        Args:
            game_id: Identifier of the game.
            state: State right after dealing.
        """
        self._write({
            "type": "game_start",
            "game": game_id,
            "timestamp": datetime.now().isoformat(),
            "players": state.roster(),
            "banker": next((p.name for p in state.players if p.is_banker), None),
            "hands": format_hands(state.players),
            "deck_size": len(state.deck),
        })

    def log_turn(
        self,
        game_id: str,
        player: str,
        action: str,
        pattern: CardPattern | None,
        state: GameState,
    ) -> None:
        """Log a single accepted turn.

        Args:
            game_id: Identifier of the game.
            player: Player who took the action.
            action: "play" or "pass".
            pattern: Pattern played (None if pass).
            state: Game state after the action.
        """
        record: dict[str, Any] = {
            "type": "turn",
            "game": game_id,
            "turn": state.turn_number,
            "player": player,
            "action": action,
            "cards": format_cards(pattern.cards) if pattern else "",
            "hand_counts": {p.name: p.hand_count() for p in state.players},
        }
        if pattern is not None:
            record["pattern"] = pattern.kind.value
            record["strength"] = pattern.strength
        self._write(record)

    def log_special(
        self,
        game_id: str,
        turn_num: int,
        event: str,
        player: str,
        detail: dict[str, Any] | None = None,
    ) -> None:
        """Log a special event.

        Args:
            game_id: Identifier of the game.
            turn_num: Turn number when the event occurred.
            event: Event type (e.g., "round_reset").
            player: Player the event concerns.
            detail: Additional event details.
        """
        record: dict[str, Any] = {
            "type": "special",
            "game": game_id,
            "turn": turn_num,
            "event": event,
            "player": player,
        }
        if detail:
            record["detail"] = detail
        self._write(record)

    def log_round_reset(self, game_id: str, state: GameState, player: str, drawn: Card | None) -> None:
        """Log everyone else passing, with the card the leader drew."""
        self.log_special(
            game_id,
            state.turn_number,
            "round_reset",
            player,
            {"drawn": format_card(drawn) if drawn else None, "deck_size": len(state.deck)},
        )

    def log_game_end(self, game_id: str, state: GameState) -> None:
        """Log game end with results.

        Args:
            game_id: Identifier of the game.
            state: Final state.
        """
        self._write({
            "type": "game_end",
            "game": game_id,
            "winner": state.winner,
            "turns": state.turn_number,
            "hands": format_hands(state.players),
        })
