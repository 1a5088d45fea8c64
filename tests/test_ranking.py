"""Unit tests for leaderboard ranking."""

import pytest

from pickleleague.models import Game, PlayerStats
from pickleleague.ranking import (
    aggregate_player_stats,
    are_players_tied,
    calculate_rankings,
    calculate_win_percentage,
    compare_players_for_ranking,
    format_rank,
    format_win_percentage,
)


def stats(player_id, points, games, wins):
    return PlayerStats(player_id=player_id, total_points=points, games_played=games, wins=wins)


class TestWinPercentage:
    """Tests for win percentage."""

    def test_no_games(self):
        assert calculate_win_percentage(0, 0) == 0

    def test_basic(self):
        assert calculate_win_percentage(3, 4) == 75.0
        assert calculate_win_percentage(8, 8) == 100.0

    def test_format(self):
        assert format_win_percentage(100) == '100%'
        assert format_win_percentage(75.5) == '75.5%'
        assert format_win_percentage(0) == '0%'
        assert format_win_percentage(66.6666) == '66.7%'


class TestComparison:
    """Tests for ranking order and ties."""

    def test_points_first(self):
        assert compare_players_for_ranking(stats('a', 50, 4, 0), stats('b', 40, 4, 4)) < 0

    def test_win_percentage_breaks_tie(self):
        assert compare_players_for_ranking(stats('a', 50, 4, 1), stats('b', 50, 4, 3)) > 0

    def test_tied(self):
        assert are_players_tied(stats('a', 50, 4, 2), stats('b', 50, 2, 1))

    def test_not_tied_on_points(self):
        assert not are_players_tied(stats('a', 50, 4, 2), stats('b', 49, 4, 2))

    def test_not_tied_on_win_percentage(self):
        assert not are_players_tied(stats('a', 50, 4, 2), stats('b', 50, 4, 3))

    def test_tied_within_tolerance(self):
        """Test 1/3 and 2/6 compare equal despite float rounding."""
        assert are_players_tied(stats('a', 30, 3, 1), stats('b', 30, 6, 2))


class TestCalculateRankings:
    """Tests for rank assignment."""

    def test_empty(self):
        assert calculate_rankings([]) == []

    def test_sequential_without_ties(self):
        ranked = calculate_rankings(
            [stats('c', 30, 4, 1), stats('a', 50, 4, 3), stats('b', 40, 4, 2)]
        )
        assert [p.player_id for p in ranked] == ['a', 'b', 'c']
        assert [p.rank for p in ranked] == [1, 2, 3]
        assert not any(p.is_tied for p in ranked)

    def test_competition_ranking(self):
        """Test 1-2-2-4: the rank after a tied block jumps by its size."""
        ranked = calculate_rankings(
            [
                stats('a', 60, 4, 4),
                stats('b', 50, 4, 2),
                stats('c', 50, 4, 2),
                stats('d', 40, 4, 1),
            ]
        )
        assert [p.rank for p in ranked] == [1, 2, 2, 4]
        assert [p.is_tied for p in ranked] == [False, True, True, False]

    def test_three_way_tie(self):
        ranked = calculate_rankings(
            [stats(pid, 44, 4, 2) for pid in 'xyz'] + [stats('w', 10, 4, 0)]
        )
        assert [p.rank for p in ranked] == [1, 1, 1, 4]
        assert [p.is_tied for p in ranked] == [True, True, True, False]

    def test_win_percentage_recorded(self):
        ranked = calculate_rankings([stats('a', 50, 4, 3)])
        assert ranked[0].win_percentage == 75.0
        assert ranked[0].rank == 1

    def test_input_not_mutated(self):
        players = [stats('b', 40, 4, 2), stats('a', 50, 4, 3)]
        before = list(players)
        calculate_rankings(players)
        assert players == before

    def test_rerank_is_stable(self):
        """Test ranking an already ranked list keeps the same ranks."""
        first = calculate_rankings(
            [stats('a', 60, 4, 4), stats('b', 50, 4, 2), stats('c', 50, 4, 2), stats('d', 40, 4, 1)]
        )
        again = calculate_rankings(
            [
                PlayerStats(p.player_id, p.total_points, p.games_played, p.wins)
                for p in first
            ]
        )
        assert [(p.player_id, p.rank, p.is_tied) for p in again] == [
            (p.player_id, p.rank, p.is_tied) for p in first
        ]


@pytest.mark.parametrize('rank,is_tied,expected', [(3, True, 'T3'), (3, False, '3'), (1, True, 'T1')])
def test_format_rank(rank, is_tied, expected):
    assert format_rank(rank, is_tied) == expected


class TestAggregatePlayerStats:
    """Tests for summing completed games."""

    def test_sums_points_and_wins(self):
        games = [
            Game('g1', 1, 1, 'A', 'B', 'C', 'D', team1_score=11, team2_score=7),
            Game('g2', 2, 1, 'A', 'C', 'B', 'D', team1_score=5, team2_score=11),
        ]
        result = {s.player_id: s for s in aggregate_player_stats(games, {'A': 'Alice'})}

        assert result['A'].total_points == 16
        assert result['A'].games_played == 2
        assert result['A'].wins == 1
        assert result['A'].player_name == 'Alice'
        assert result['D'].total_points == 18
        assert result['D'].wins == 1
        assert result['B'].wins == 2
        assert result['C'].wins == 0
        assert result['C'].player_name == 'Unknown'

    def test_skips_incomplete_games(self):
        games = [
            Game('g1', 1, 1, 'A', 'B', 'C', 'D', team1_score=11, team2_score=None),
            Game('g2', 1, 2, 'E', 'F', 'G', 'H'),
        ]
        assert aggregate_player_stats(games) == []

    def test_zero_score_counts(self):
        games = [Game('g1', 1, 1, 'A', 'B', 'C', 'D', team1_score=0, team2_score=11)]
        result = {s.player_id: s for s in aggregate_player_stats(games)}
        assert result['A'].games_played == 1
        assert result['A'].total_points == 0
        assert result['C'].wins == 1
