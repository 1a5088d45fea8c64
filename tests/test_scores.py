"""Unit tests for pickleball score rules."""

import pytest

from pickleleague.scores import get_winning_team, parse_score_input, validate_score


class TestValidateScore:
    """Tests for score validation."""

    @pytest.mark.parametrize('t1,t2', [(11, 0), (11, 10), (0, 11), (7, 11)])
    def test_valid_scores(self, t1, t2):
        result = validate_score(t1, t2)
        assert result.valid
        assert result.error is None

    @pytest.mark.parametrize(
        't1,t2,message',
        [
            (None, 5, 'Team 1 score is required'),
            (11, None, 'Team 2 score is required'),
            (-1, 11, 'Team 1 score must be a non-negative integer'),
            (11, 2.5, 'Team 2 score must be a non-negative integer'),
            (12, 3, 'Scores cannot exceed 11'),
            (11, 11, 'Both teams cannot score 11'),
            (9, 7, 'Exactly one team must score 11'),
        ],
    )
    def test_invalid_scores(self, t1, t2, message):
        result = validate_score(t1, t2)
        assert not result.valid
        assert result.error == message


class TestWinningTeam:
    """Tests for picking the winner."""

    def test_winner(self):
        assert get_winning_team(11, 4) == 1
        assert get_winning_team(4, 11) == 2

    def test_invalid_has_no_winner(self):
        assert get_winning_team(10, 9) is None
        assert get_winning_team(None, 11) is None


class TestParseScoreInput:
    """Tests for score field parsing."""

    @pytest.mark.parametrize('text,expected', [('11', 11), (' 7 ', 7), ('0', 0)])
    def test_parses(self, text, expected):
        assert parse_score_input(text) == expected

    @pytest.mark.parametrize('text', ['', '   ', 'abc', '-3'])
    def test_rejects(self, text):
        assert parse_score_input(text) is None
