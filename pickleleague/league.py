"""League operations over a LeagueStore.

These functions fetch records from the store, run the pure engine, and write
back only when the engine allows it.
"""

import logging
from typing import Optional

from .availability import get_availability_warning, validate_available_count
from .config import get_available_player_bounds
from .games import calculate_progress
from .models import (
    AvailabilityResult,
    CompletionCheck,
    ProgressData,
    RankedPlayer,
    SwapResult,
    UnfinalizeCheck,
    WeekStatus,
)
from .ranking import aggregate_player_stats, calculate_rankings
from .store import LeagueStore
from .swap import find_player_position, perform_swap
from .validators import check_swap_violations
from .weeks import (
    can_mark_week_complete,
    can_unfinalize_week,
    count_games_with_scores,
    find_active_week_id,
    is_valid_transition,
)

logger = logging.getLogger('pickleleague.league')


def swap_players(
    store: LeagueStore,
    week_id: str,
    round_number: int,
    player_a_id: str,
    player_b_id: str,
) -> tuple[SwapResult, list[str]]:
    """
    Swap two players within one round of a week and save the result.

    The round set is fetched fresh so the swap never acts on stale data.
    After a successful swap the whole week is checked for repeat partnerships
    and uneven game counts; those warnings are saved on the week and returned.

    Args:
        store: League storage
        week_id: Week to edit
        round_number: Round both players are in
        player_a_id: First player
        player_b_id: Second player

    Returns:
        Tuple of (SwapResult, warnings)

    Raises:
        KeyError: If the week or its season does not exist; nothing is written
    """
    week = store.get_week(week_id)
    if week.status == WeekStatus.COMPLETED:
        return SwapResult(success=False, error='Cannot edit a completed week'), []

    games = store.get_games(week_id)
    byes = store.get_byes(week_id)
    round_games = [g for g in games if g.round_number == round_number]
    round_byes = [b for b in byes if b.round_number == round_number]

    pos_a = find_player_position(player_a_id, round_games, round_byes)
    pos_b = find_player_position(player_b_id, round_games, round_byes)
    for player_id, pos in ((player_a_id, pos_a), (player_b_id, pos_b)):
        if pos is None:
            error = f'Player {player_id} is not scheduled in round {round_number}'
            logger.warning(error)
            return SwapResult(success=False, error=error), []

    result = perform_swap(pos_a, pos_b, round_games, round_byes)
    if not result.success:
        logger.info(f'Swap rejected in week {week.week_number}: {result.error}')
        return result, []

    week_games = [g for g in games if g.round_number != round_number] + result.updated_games
    week_byes = [b for b in byes if b.round_number != round_number] + result.updated_byes

    scheduled: list[str] = []
    for player_id in [pid for g in week_games for pid in g.player_ids] + [
        b.player_id for b in week_byes
    ]:
        if player_id not in scheduled:
            scheduled.append(player_id)

    names = {p.id: p.name for p in store.get_roster(week.season_id)}
    warnings = check_swap_violations(week_games, scheduled, names)

    store.save_round_set(week_id, week_games, week_byes, warnings)
    logger.info(
        f'Swapped {player_a_id} and {player_b_id} in week {week.week_number} round {round_number}'
    )
    for warning in warnings:
        logger.warning(warning)

    return result, warnings


def season_standings(store: LeagueStore, season_id: str) -> list[RankedPlayer]:
    """Leaderboard for a season from every completed game."""
    names = {p.id: p.name for p in store.get_roster(season_id)}
    stats = aggregate_player_stats(store.get_season_games(season_id), names)
    return calculate_rankings(stats)


def week_progress(store: LeagueStore, week_id: str) -> ProgressData:
    return calculate_progress(store.get_games(week_id))


def active_week_id(store: LeagueStore, season_id: str) -> Optional[str]:
    """Earliest open week of a season, or its last week once all are completed."""
    return find_active_week_id(store.get_weeks(season_id))


def finalize_week(store: LeagueStore, week_id: str) -> Optional[str]:
    """
    Move a draft week to finalized.

    Returns:
        None on success, otherwise the reason it was refused
    """
    week = store.get_week(week_id)
    if not is_valid_transition(week.status, WeekStatus.FINALIZED):
        return f'Cannot finalize - week is {week.status.value}'
    if not store.get_games(week_id):
        return 'Cannot finalize - week has no schedule'

    store.set_week_status(week_id, WeekStatus.FINALIZED)
    logger.info(f'Week {week.week_number} finalized')
    return None


def unfinalize_week(store: LeagueStore, week_id: str) -> UnfinalizeCheck:
    """Return a finalized week to draft if no scores have been recorded."""
    week = store.get_week(week_id)
    if week.status != WeekStatus.FINALIZED:
        return UnfinalizeCheck(
            can_unfinalize=False,
            error_message=f'Cannot unfinalize - week is {week.status.value}',
        )

    check = can_unfinalize_week(count_games_with_scores(store.get_games(week_id)))
    if check.can_unfinalize:
        store.set_week_status(week_id, WeekStatus.DRAFT)
        logger.info(f'Week {week.week_number} returned to draft')
    else:
        logger.info(f'Week {week.week_number}: {check.error_message}')
    return check


def mark_week_complete(store: LeagueStore, week_id: str) -> CompletionCheck:
    """Complete a finalized week; missing scores are logged as a warning."""
    week = store.get_week(week_id)
    games = store.get_games(week_id)

    check = can_mark_week_complete(week.status, len(games), count_games_with_scores(games))
    if not check.can_mark_complete:
        logger.info(f'Week {week.week_number}: {check.error_message}')
        return check

    if check.has_missing_scores:
        logger.warning(
            f'Week {week.week_number} completed with {check.missing_scores_count} games missing scores'
        )
    store.set_week_status(week_id, WeekStatus.COMPLETED)
    logger.info(f'Week {week.week_number} completed')
    return check


def check_week_availability(
    store: LeagueStore, week_id: str
) -> tuple[AvailabilityResult, Optional[str]]:
    """Validate a week's available player count against the configured bounds."""
    min_players, max_players = get_available_player_bounds()
    count = len(store.get_available_player_ids(week_id))

    result = validate_available_count(count, min_players, max_players)
    warning = get_availability_warning(count, min_players, max_players) if result.is_valid else None
    if not result.is_valid:
        logger.warning(result.message)
    return result, warning
