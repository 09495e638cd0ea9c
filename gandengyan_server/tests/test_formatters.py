"""Tests for display formatters."""

from conftest import C, D, H, S, card, joker, started_state
from gandengyan_server.errors import GameError
from gandengyan_server.game.classifier import classify
from gandengyan_server.logging.formatters import (
    format_card,
    format_cards,
    format_error,
    format_game_state,
    format_hand_for_selection,
    format_hands,
    format_pattern,
    format_play_prompt,
)
from gandengyan_server.models.card import Rank
from gandengyan_server.models.game_state import GameState
from gandengyan_server.models.player import Player


class TestFormatCard:
    """Tests for card formatting."""

    def test_format_card(self):
        """Test rank name plus suit symbol."""
        assert format_card(card(Rank.ACE, H)) == "A♥"
        assert format_card(card(Rank.TEN, D)) == "10♦"
        assert format_card(card(Rank.TWO, C)) == "2♣"

    def test_format_joker(self):
        """Test jokers have no suit symbol."""
        assert format_card(joker()) == "Joker"

    def test_format_cards(self):
        """Test comma-separated output."""
        assert format_cards([card(Rank.EIGHT, S), card(Rank.EIGHT, H)]) == "8♠, 8♥"
        assert format_cards([]) == ""


class TestFormatPattern:
    """Tests for pattern formatting."""

    def test_format_pair(self):
        """Test a pattern shows its kind and cards."""
        pattern = classify([card(Rank.SEVEN, H), card(Rank.SEVEN, S)])
        assert format_pattern(pattern) == "Pair: 7♥, 7♠"

    def test_format_abomb(self):
        """Test the display name of an abomb."""
        pattern = classify([card(Rank.FIVE, s) for s in (H, D, C, S)])
        assert format_pattern(pattern).startswith("Atomic Bomb: ")


class TestFormatHands:
    """Tests for hand formatting."""

    def test_hands_sorted_strongest_first(self):
        """Test every hand is shown in display order."""
        players = [
            Player(name="Alice", hand=(card(Rank.THREE, H), joker(), card(Rank.TWO, S))),
            Player(name="Bob", hand=()),
        ]
        assert format_hands(players) == {"Alice": "Joker, 2♠, 3♥", "Bob": ""}

    def test_selection_map(self):
        """Test shown numbers map back to hand positions."""
        player = Player(name="Alice", hand=(card(Rank.THREE, H), card(Rank.ACE, S), card(Rank.NINE, D)))
        text, index_map = format_hand_for_selection(player)

        assert text == "0:A♠  1:9♦  2:3♥"
        assert index_map == {0: 1, 1: 2, 2: 0}

    def test_selection_rows(self):
        """Test long hands wrap every five cards."""
        hand = tuple(card(rank, H) for rank in (Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX, Rank.SEVEN, Rank.EIGHT, Rank.NINE))
        text, index_map = format_hand_for_selection(Player(name="Alice", hand=hand))

        assert len(text.splitlines()) == 2
        assert len(index_map) == 7
        assert index_map[0] == 6

    def test_ties_broken_by_suit(self):
        """Test equal ranks are ordered by suit."""
        player = Player(name="Alice", hand=(card(Rank.KING, S), card(Rank.KING, H)))
        text, index_map = format_hand_for_selection(player)
        assert text == "0:K♥  1:K♠"
        assert index_map == {0: 1, 1: 0}


class TestFormatGameState:
    """Tests for the table display."""

    def test_waiting_game(self):
        """Test a game that has not started."""
        state = GameState(players=(Player(name="Alice", is_banker=True),))
        text = format_game_state(state)
        assert "=== Current Game State ===" in text
        assert "Alice: 0 cards (Banker)" in text
        assert "No plays yet" in text
        assert "deck" not in text

    def test_current_player_marked(self):
        """Test the arrow marks whose turn it is."""
        state = started_state([[card(Rank.FIVE)], [card(Rank.SIX)]], deck=[card(Rank.NINE)], current=1)
        text = format_game_state(state)
        assert "-> P2: 1 cards" in text
        assert "   P1: 1 cards (Banker)" in text
        assert "Cards left in deck: 1" in text

    def test_last_play_shown(self):
        """Test the live pattern is shown."""
        state = started_state([[card(Rank.FIVE)], [card(Rank.SIX)]])
        state = state.model_copy(update={"last_play": classify([card(Rank.NINE, C)])})
        assert "Last play: Single: 9♣" in format_game_state(state)

    def test_winner_shown(self):
        """Test the winner replaces the last play line."""
        state = started_state([[], [card(Rank.SIX)]]).model_copy(update={"winner": "P1"})
        text = format_game_state(state)
        assert "Winner: P1" in text
        assert "Last play" not in text


class TestPrompts:
    """Tests for prompts and errors."""

    def test_lead_prompt(self):
        """Test the prompt on an empty table."""
        state = started_state([[card(Rank.FIVE)], [card(Rank.SIX)]])
        assert "first to play" in format_play_prompt(state)

    def test_follow_prompt(self):
        """Test the prompt shows what to beat."""
        state = started_state([[card(Rank.FIVE)], [card(Rank.SIX)]])
        state = state.model_copy(update={"last_play": classify([card(Rank.NINE, C)])})
        prompt = format_play_prompt(state)
        assert "Last played: Single: 9♣" in prompt
        assert "'pass'" in prompt

    def test_format_error(self):
        """Test errors use their user-facing message."""
        assert format_error(GameError.NOT_YOUR_TURN) == "It's not your turn."
        assert all(format_error(e) for e in GameError)
