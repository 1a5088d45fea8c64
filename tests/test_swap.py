"""Unit tests for player swaps."""

import pytest

from pickleleague.models import Bye, ByeSlot, Game, GameSlot
from pickleleague.swap import (
    find_player_position,
    get_valid_swap_targets,
    partnership_key,
    perform_swap,
    validate_swap,
)
from pickleleague.validators import validate_round_set


@pytest.fixture
def round_games():
    """Two games in round 1: (A,B vs C,D) and (E,F vs G,H)."""
    return [
        Game('g1', 1, 1, 'A', 'B', 'C', 'D'),
        Game('g2', 1, 2, 'E', 'F', 'G', 'H'),
    ]


@pytest.fixture
def round_byes():
    return [Bye('I', 1), Bye('J', 1)]


class TestFindPlayerPosition:
    """Tests for locating players in a round."""

    def test_finds_each_game_slot(self, round_games, round_byes):
        """Test every seat resolves to the right team and position."""
        assert find_player_position('A', round_games, round_byes) == GameSlot('A', 'g1', 1, 1)
        assert find_player_position('B', round_games, round_byes) == GameSlot('B', 'g1', 1, 2)
        assert find_player_position('C', round_games, round_byes) == GameSlot('C', 'g1', 2, 1)
        assert find_player_position('H', round_games, round_byes) == GameSlot('H', 'g2', 2, 2)

    def test_finds_bye(self, round_games, round_byes):
        """Test a player on bye resolves to a ByeSlot."""
        assert find_player_position('I', round_games, round_byes) == ByeSlot('I', 1)

    def test_not_found(self, round_games, round_byes):
        assert find_player_position('Z', round_games, round_byes) is None

    def test_round_filter(self):
        """Test restricting the search to one round of a week."""
        games = [
            Game('g1', 1, 1, 'A', 'B', 'C', 'D'),
            Game('g2', 2, 1, 'C', 'A', 'B', 'D'),
        ]
        pos = find_player_position('A', games, [], round_number=2)
        assert pos == GameSlot('A', 'g2', 1, 2)


class TestValidateSwap:
    """Tests for swap validation rules."""

    def test_self_swap_invalid(self):
        pos = GameSlot('A', 'g1', 1, 1)
        result = validate_swap(pos, pos)
        assert not result.valid
        assert 'themselves' in result.error

    def test_self_swap_on_bye_invalid(self):
        pos = ByeSlot('I', 1)
        assert not validate_swap(pos, pos).valid

    def test_same_team_same_game_invalid(self):
        """Test swapping partners is rejected."""
        result = validate_swap(GameSlot('A', 'g1', 1, 1), GameSlot('B', 'g1', 1, 2))
        assert not result.valid
        assert 'same team' in result.error

    def test_cross_team_same_game_valid(self):
        assert validate_swap(GameSlot('A', 'g1', 1, 1), GameSlot('C', 'g1', 2, 1)).valid

    def test_cross_game_valid(self):
        """Test same team number in different games is allowed."""
        assert validate_swap(GameSlot('A', 'g1', 1, 1), GameSlot('E', 'g2', 1, 1)).valid

    def test_game_and_bye_valid(self):
        assert validate_swap(GameSlot('A', 'g1', 1, 1), ByeSlot('I', 1)).valid
        assert validate_swap(ByeSlot('I', 1), GameSlot('A', 'g1', 1, 1)).valid

    def test_bye_and_bye_valid(self):
        """Test two byes may be swapped (a no-op)."""
        assert validate_swap(ByeSlot('I', 1), ByeSlot('J', 1)).valid


class TestPerformSwap:
    """Tests for applying swaps."""

    def test_cross_game_swap(self, round_games, round_byes):
        result = perform_swap(
            GameSlot('B', 'g1', 1, 2), GameSlot('G', 'g2', 2, 1), round_games, round_byes
        )
        assert result.success
        g1, g2 = result.updated_games
        assert g1.player_ids == ('A', 'G', 'C', 'D')
        assert g2.player_ids == ('E', 'F', 'B', 'H')
        assert [b.player_id for b in result.updated_byes] == ['I', 'J']

    def test_cross_team_same_game_swap(self, round_games, round_byes):
        result = perform_swap(
            GameSlot('A', 'g1', 1, 1), GameSlot('D', 'g1', 2, 2), round_games, round_byes
        )
        assert result.success
        assert result.updated_games[0].player_ids == ('D', 'B', 'C', 'A')
        assert result.updated_games[1] == round_games[1]

    def test_game_to_bye_swap(self, round_games, round_byes):
        """Test the seated player goes to bye and the bye player takes the seat."""
        result = perform_swap(GameSlot('C', 'g1', 2, 1), ByeSlot('J', 1), round_games, round_byes)
        assert result.success
        assert result.updated_games[0].player_ids == ('A', 'B', 'J', 'D')
        assert [b.player_id for b in result.updated_byes] == ['I', 'C']
        assert result.updated_byes[1].round_number == 1

    def test_bye_to_bye_swap(self, round_games, round_byes):
        result = perform_swap(ByeSlot('I', 1), ByeSlot('J', 1), round_games, round_byes)
        assert result.success
        assert {b.player_id for b in result.updated_byes} == {'I', 'J'}
        assert result.updated_games == round_games

    def test_invalid_swap_returns_error(self, round_games, round_byes):
        result = perform_swap(
            GameSlot('A', 'g1', 1, 1), GameSlot('B', 'g1', 1, 2), round_games, round_byes
        )
        assert not result.success
        assert 'same team' in result.error
        assert result.updated_games is None
        assert result.updated_byes is None

    def test_stale_position_rejected(self, round_games, round_byes):
        """Test a position that no longer matches the round set is refused."""
        result = perform_swap(
            GameSlot('A', 'g2', 1, 1), GameSlot('C', 'g1', 2, 1), round_games, round_byes
        )
        assert not result.success

    def test_inputs_not_mutated(self, round_games, round_byes):
        games_before = list(round_games)
        byes_before = list(round_byes)

        result = perform_swap(GameSlot('A', 'g1', 1, 1), ByeSlot('I', 1), round_games, round_byes)

        assert result.success
        assert round_games == games_before
        assert round_byes == byes_before
        assert result.updated_games is not round_games
        assert result.updated_byes is not round_byes

    def test_scores_preserved(self):
        games = [Game('g1', 1, 1, 'A', 'B', 'C', 'D', team1_score=11, team2_score=4)]
        result = perform_swap(GameSlot('A', 'g1', 1, 1), ByeSlot('E', 1), games, [Bye('E', 1)])
        assert result.updated_games[0].team1_score == 11
        assert result.updated_games[0].team2_score == 4

    @pytest.mark.parametrize(
        'player_a,player_b',
        [('A', 'C'), ('A', 'E'), ('B', 'H'), ('D', 'I'), ('I', 'J'), ('F', 'G')],
    )
    def test_round_stays_complete(self, round_games, round_byes, player_a, player_b):
        """Test every player still sits exactly once after a swap."""
        roster = list('ABCDEFGHIJ')
        pos_a = find_player_position(player_a, round_games, round_byes)
        pos_b = find_player_position(player_b, round_games, round_byes)

        result = perform_swap(pos_a, pos_b, round_games, round_byes)

        assert result.success
        assert validate_round_set(result.updated_games, result.updated_byes, roster) == []


class TestValidSwapTargets:
    """Tests for listing swap candidates."""

    def test_excludes_self_and_teammate(self, round_games, round_byes):
        targets = get_valid_swap_targets('A', round_games, round_byes)
        assert 'A' not in targets
        assert 'B' not in targets
        assert set(targets) == set('CDEFGHIJ')

    def test_bye_player_can_swap_with_everyone(self, round_games, round_byes):
        targets = get_valid_swap_targets('I', round_games, round_byes)
        assert set(targets) == set('ABCDEFGHJ')


def test_partnership_key_is_unordered():
    assert partnership_key('A', 'B') == partnership_key('B', 'A')
