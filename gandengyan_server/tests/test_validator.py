"""Tests for move validation."""

import pytest

from conftest import C, D, H, S, card, joker
from gandengyan_server.errors import GameError
from gandengyan_server.game.classifier import classify
from gandengyan_server.game.validator import MoveValidator, can_beat
from gandengyan_server.models.card import Rank
from gandengyan_server.models.game_state import CardPattern, PatternType


def pattern(kind: PatternType, strength: int) -> CardPattern:
    """Build a pattern directly (cards do not matter for comparison)."""
    return CardPattern(kind=kind, cards=(), strength=strength)


@pytest.fixture
def validator():
    return MoveValidator()


class TestCanBeat:
    """Tests for can_beat."""

    def test_same_kind_higher_wins(self):
        """Test a higher pair beats a lower pair."""
        assert can_beat(pattern(PatternType.PAIR, 9), pattern(PatternType.PAIR, 7))

    def test_same_kind_equal_loses(self):
        """Test that equal strength never beats."""
        assert not can_beat(pattern(PatternType.SINGLE, 10), pattern(PatternType.SINGLE, 10))

    def test_same_kind_lower_loses(self):
        """Test a lower single does not beat a higher one."""
        assert not can_beat(pattern(PatternType.SINGLE, 5), pattern(PatternType.SINGLE, 14))

    def test_different_kinds_never_beat(self):
        """Test that non-bomb kinds cannot cross."""
        assert not can_beat(pattern(PatternType.PAIR, 15), pattern(PatternType.SINGLE, 3))
        assert not can_beat(pattern(PatternType.STRAIGHT, 14), pattern(PatternType.SEQUENCE, 5))
        assert not can_beat(pattern(PatternType.SINGLE, 15), pattern(PatternType.PAIR, 3))

    @pytest.mark.parametrize(
        "previous",
        [PatternType.SINGLE, PatternType.PAIR, PatternType.SEQUENCE, PatternType.STRAIGHT],
    )
    def test_bombs_beat_non_bombs(self, previous):
        """Test the lowest bomb and abomb beat any non-bomb."""
        assert can_beat(pattern(PatternType.BOMB, 3), pattern(previous, 16))
        assert can_beat(pattern(PatternType.ABOMB, 3), pattern(previous, 16))

    def test_abomb_beats_any_bomb(self):
        """Test a low abomb beats the joker bomb."""
        assert can_beat(pattern(PatternType.ABOMB, 3), pattern(PatternType.BOMB, 16))

    def test_bomb_never_beats_abomb(self):
        """Test a bomb cannot beat an abomb."""
        assert not can_beat(pattern(PatternType.BOMB, 16), pattern(PatternType.ABOMB, 3))

    def test_bomb_vs_bomb_by_strength(self):
        """Test bombs compare by strength."""
        assert can_beat(pattern(PatternType.BOMB, 13), pattern(PatternType.BOMB, 5))
        assert not can_beat(pattern(PatternType.BOMB, 5), pattern(PatternType.BOMB, 13))

    def test_abomb_vs_abomb_by_strength(self):
        """Test abombs compare by strength."""
        assert can_beat(pattern(PatternType.ABOMB, 11), pattern(PatternType.ABOMB, 10))
        assert not can_beat(pattern(PatternType.ABOMB, 10), pattern(PatternType.ABOMB, 10))

    def test_irreflexive(self):
        """Test that no pattern beats itself."""
        for kind in PatternType:
            if kind == PatternType.INVALID:
                continue
            p = pattern(kind, 9)
            assert not can_beat(p, p)

    def test_joker_bomb_beats_king_bomb(self):
        """Test classified joker pair against three kings."""
        jokers = classify([joker(), joker()])
        kings = classify([card(Rank.KING, H), card(Rank.KING, S), card(Rank.KING, D)])
        assert can_beat(jokers, kings)
        assert not can_beat(kings, jokers)


class TestMoveValidator:
    """Tests for MoveValidator."""

    def test_invalid_pattern_rejected(self, validator):
        """Test that invalid selections fail before comparison."""
        result = validator.validate(classify([joker()]), None)
        assert not result.is_valid
        assert result.error == GameError.INVALID_PATTERN
        assert result.error_message == GameError.INVALID_PATTERN.message

    def test_any_valid_pattern_leads(self, validator):
        """Test leading a round accepts any valid pattern."""
        result = validator.validate(classify([card(Rank.THREE, C)]), None)
        assert result.is_valid
        assert result.error is None
        assert result.error_message == ""

    def test_follow_must_beat(self, validator):
        """Test following with a weaker pattern."""
        live = classify([card(Rank.NINE, H), card(Rank.NINE, S)])
        weaker = classify([card(Rank.FOUR, H), card(Rank.FOUR, S)])
        result = validator.validate(weaker, live)
        assert not result.is_valid
        assert result.error == GameError.CANNOT_BEAT_LAST_PLAY

    def test_follow_with_stronger(self, validator):
        """Test following with a stronger pattern of the same kind."""
        live = classify([card(Rank.NINE, H), card(Rank.NINE, S)])
        stronger = classify([card(Rank.TEN, H), joker()])
        assert validator.validate(stronger, live).is_valid

    def test_invalid_checked_before_beat(self, validator):
        """Test an invalid pattern reports INVALID_PATTERN even when following."""
        live = classify([card(Rank.NINE, H)])
        result = validator.validate(classify([card(Rank.THREE, H), card(Rank.SEVEN, H)]), live)
        assert result.error == GameError.INVALID_PATTERN
