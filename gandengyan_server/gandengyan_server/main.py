"""Main entry point for a local GanDengYan game.

Human players share one terminal (hot seat); computer players use
SimpleStrategy. Hands are shown sorted, and the numbers typed by a human
are translated back to hand indices before they reach the session.
"""

import argparse
import logging
import random
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from gandengyan_server.config import GameLogConfig, load_config
from gandengyan_server.game.engine import GameEngine
from gandengyan_server.game.results import CommandResult
from gandengyan_server.game.session import GameSession
from gandengyan_server.logging import (
    GameLogger,
    format_error,
    format_hand_for_selection,
    format_play_prompt,
)
from gandengyan_server.models.player import Player
from gandengyan_server.strategy import SimpleStrategy, Strategy
from gandengyan_server.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

PASS_COMMAND = "pass"
QUIT_COMMAND = "quit"


def generate_log_filename(log_dir: str, names: list[str]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_{player2}_..._{playerN}.jsonl
    Player names are sorted alphabetically.

    Args:
        log_dir: Directory for log files.
        names: Names of the players in the game.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    player_names = "_".join(sorted(n.replace(" ", "-") for n in names))
    filename = f"{timestamp}_{player_names}.jsonl"
    return str(Path(log_dir) / filename)


def parse_selection(text: str, index_map: dict[int, int]) -> list[int] | None:
    """Translate typed display numbers into hand indices.

    Args:
        text: Space-separated numbers as shown next to the sorted hand.
        index_map: Display index -> hand index map for the hand on screen.

    Returns:
        Hand indices, or None if the input is not a list of shown numbers.
    """
    try:
        shown = [int(token) for token in text.split()]
    except ValueError:
        return None
    if not shown or any(i not in index_map for i in shown):
        return None
    return [index_map[i] for i in shown]


def can_lead(player: Player, strategy: SimpleStrategy) -> bool:
    """Check if the player holds any playable combination."""
    return bool(strategy.candidates(player))


def play_bot_turn(session: GameSession, player: Player, strategy: Strategy) -> CommandResult:
    """Let a computer player act."""
    state = session.get_state()
    indices = strategy.select_play(player, state)
    if indices:
        result = session.play(player.name, indices)
        if result.is_ok:
            return result
        logger.warning(f"{player.name} chose a rejected play: {result.error.value}")

    result = session.pass_turn(player.name)
    if not result.is_ok:
        raise RuntimeError(f"{player.name} has no legal move: {result.error.value}")
    return result


def play_human_turn(
    session: GameSession,
    player: Player,
    read_line: Callable[[str], str],
) -> CommandResult | None:
    """Prompt a human player until they make an accepted move.

    Returns:
        The accepted result, or None if the player quit.
    """
    while True:
        state = session.get_state()
        hand_text, index_map = format_hand_for_selection(state.get_player(player.name))
        print(f"\n{player.name}, your cards:")
        print(hand_text)

        text = read_line(format_play_prompt(state)).strip().lower()
        if text == QUIT_COMMAND:
            return None

        if text == PASS_COMMAND:
            result = session.pass_turn(player.name)
        else:
            indices = parse_selection(text, index_map)
            if indices is None:
                print("Invalid input. Please enter space-separated numbers shown, or 'pass'.")
                continue
            result = session.play(player.name, indices)

        if result.is_ok:
            return result
        print(f"Error: {format_error(result.error)}")


def run_game(
    session: GameSession,
    strategies: dict[str, Strategy],
    display: GameDisplay,
    read_line: Callable[[str], str] = input,
) -> str | None:
    """Run a started game until someone wins.

    Args:
        session: Started game session
        strategies: Strategy per computer player name; other players are human
        display: Output helper
        read_line: Prompt reader for human players

    Returns:
        Winner name, or None if the game was abandoned or stalled.
    """
    lead_checker = SimpleStrategy()

    while True:
        state = session.get_state()
        if state.is_finished:
            display.print_game_end(state.winner)
            return state.winner

        player = state.current_player
        if state.last_play is None and not can_lead(player, lead_checker):
            print(f"{player.name} cannot lead with {player.hand_count()} card(s). Game stalled.")
            return None

        display.print_state(state)

        strategy = strategies.get(player.name)
        if strategy is not None:
            result = play_bot_turn(session, player, strategy)
        else:
            result = play_human_turn(session, player, read_line)
            if result is None:
                print(f"{player.name} quit the game.")
                return None

        display.print_move(player.name, result)
        if result.rewarded_player is not None and result.rewarded_player not in strategies:
            display.print_drawn_card(result)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="GanDengYan card game (hot seat)")
    parser.add_argument(
        "players",
        nargs="*",
        help="Names of human players, in seating order (first is banker)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-b",
        "--bots",
        type=int,
        help="Number of computer players (overrides config)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for shuffling (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show every player's hand in output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    config = load_config(args.config)

    # Apply command-line overrides
    if args.bots is not None:
        config.game.bots = args.bots
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    humans = args.players or ([] if config.game.bots >= config.rules.min_players else ["Player"])
    bots = {f"Bot {i}": SimpleStrategy() for i in range(1, config.game.bots + 1)}
    names = humans + list(bots)

    if game_log_enabled:
        log_config = GameLogConfig(enabled=True, output_path=generate_log_filename(game_log_dir, names))
        print(f"Game log: {log_config.output_path}")
    else:
        log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(log_config) as game_logger:
            engine = GameEngine(config.rules, random.Random(config.game.seed))
            session = GameSession(engine=engine, game_logger=game_logger)

            for name in names:
                result = session.join(name)
                if not result.is_ok:
                    print(f"Cannot add {name}: {format_error(result.error)}")
                    return 1
            display.print_roster(session.get_state().roster())

            result = session.start()
            if not result.is_ok:
                print(f"Cannot start: {format_error(result.error)}")
                return 1

            winner = run_game(session, bots, display)
            return 0 if winner is not None else 1

    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
