"""Formatters for game display and log output."""

from collections.abc import Iterable

from gandengyan_server.errors import GameError
from gandengyan_server.models.card import RANK_NAMES, SUIT_SYMBOLS, Card
from gandengyan_server.models.game_state import PATTERN_NAMES, CardPattern, GameState
from gandengyan_server.models.player import Player

CARDS_PER_ROW = 5


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "A♥" for Ace of hearts, "Joker" for Joker).
    """
    if card.is_joker:
        return RANK_NAMES[card.rank]
    return f"{RANK_NAMES[card.rank]}{SUIT_SYMBOLS[card.suit]}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string.

    Args:
        cards: Cards to format, in the order given.

    Returns:
        Comma-separated card strings (e.g., "8♠, 8♥, 8♦").
        Empty string if no cards.
    """
    return ", ".join(format_card(c) for c in cards)


def format_pattern(pattern: CardPattern) -> str:
    """Format a classified pattern (e.g., "Pair: 7♥, 7♠")."""
    return f"{PATTERN_NAMES[pattern.kind]}: {format_cards(pattern.cards)}"


def format_hands(players: Iterable[Player]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        players: Players whose hands to format.

    Returns:
        Dict mapping player name to formatted hand in display order.
    """
    return {p.name: format_cards(c for _, c in p.sorted_hand()) for p in players}


def format_hand_for_selection(player: Player) -> tuple[str, dict[int, int]]:
    """Format a hand with selection numbers.

    The hand is shown sorted (strongest first); the returned map translates
    each shown number back to the card's index in the unsorted hand.

    Args:
        player: Player whose hand to show.

    Returns:
        Tuple of (display text, display index -> hand index map)
    """
    ordered = player.sorted_hand()
    index_map = {shown: actual for shown, (actual, _) in enumerate(ordered)}

    labels = [f"{shown}:{format_card(card)}" for shown, (_, card) in enumerate(ordered)]
    rows = [
        "  ".join(labels[i:i + CARDS_PER_ROW])
        for i in range(0, len(labels), CARDS_PER_ROW)
    ]
    return "\n".join(rows), index_map


def format_game_state(state: GameState) -> str:
    """Format the game state for display."""
    lines = ["", "=== Current Game State ==="]
    current = state.current_player
    for player in state.players:
        marker = "-> " if current is not None and player.name == current.name else "   "
        lines.append(f"{marker}{player}")

    if state.winner is not None:
        lines.append(f"Winner: {state.winner}")
    elif state.last_play is not None:
        lines.append(f"Last play: {format_pattern(state.last_play)}")
    else:
        lines.append("No plays yet")

    if state.started:
        lines.append(f"Cards left in deck: {len(state.deck)}")
    return "\n".join(lines) + "\n"


def format_play_prompt(state: GameState) -> str:
    """Format the prompt shown to the player whose turn it is."""
    if state.last_play is None:
        return "\nYou're first to play! Select cards to play:\n> "
    return (
        f"\nLast played: {format_pattern(state.last_play)}\n\n"
        "Select cards to play (or type 'pass' to pass):\n> "
    )


def format_error(error: GameError) -> str:
    """Format an error for display."""
    return error.message
