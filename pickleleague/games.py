"""Score entry progress and round/court filtering for game lists."""

import math
from typing import Sequence

from .models import Game, GameFilterState, ProgressData


def is_game_complete(game: Game) -> bool:
    return game.is_complete


def calculate_progress(games: Sequence[Game]) -> ProgressData:
    """
    Completed/total games and a whole-number percentage.

    The percentage rounds half up (2 of 3 -> 67) and is 0 for no games.
    """
    total = len(games)
    if total == 0:
        return ProgressData(completed=0, total=0, percentage=0)

    completed = sum(1 for game in games if game.is_complete)
    percentage = math.floor(completed / total * 100 + 0.5)
    return ProgressData(completed=completed, total=total, percentage=percentage)


def get_unique_rounds(games: Sequence[Game]) -> list[int]:
    return sorted({game.round_number for game in games})


def get_unique_courts(games: Sequence[Game]) -> list[int]:
    return sorted({game.court_number for game in games})


def filter_games_by_round(games: Sequence[Game], round_number: int) -> list[Game]:
    """Games in one round, ordered by court."""
    return sorted(
        (game for game in games if game.round_number == round_number),
        key=lambda game: game.court_number,
    )


def filter_games_by_court(games: Sequence[Game], court_number: int) -> list[Game]:
    """Games on one court, ordered by round."""
    return sorted(
        (game for game in games if game.court_number == court_number),
        key=lambda game: game.round_number,
    )


def apply_game_filter(games: Sequence[Game], filter_state: GameFilterState) -> list[Game]:
    if filter_state.filter_type == 'round':
        return filter_games_by_round(games, filter_state.selected_value)
    return filter_games_by_court(games, filter_state.selected_value)


def count_completed_games(games: Sequence[Game]) -> int:
    return sum(1 for game in games if game.is_complete)


def get_filter_summary(games: Sequence[Game]) -> str:
    """Summary line, e.g. 'Showing 6 games | 3 of 6 completed'."""
    total = len(games)
    completed = count_completed_games(games)
    return f'Showing {total} games | {completed} of {total} completed'


def get_default_filter_state(games: Sequence[Game]) -> GameFilterState:
    """Filter by round, starting at the lowest round present (1 if none)."""
    rounds = get_unique_rounds(games)
    return GameFilterState(filter_type='round', selected_value=rounds[0] if rounds else 1)
