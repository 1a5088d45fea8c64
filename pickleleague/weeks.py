"""Week status gating: draft -> finalized -> completed."""

from typing import Optional, Sequence

from .constants import WEEK_TRANSITIONS
from .models import CompletionCheck, Game, UnfinalizeCheck, Week, WeekStatus


def count_games_with_scores(games: Sequence[Game]) -> int:
    """Games with both team scores set. A single-sided score does not count."""
    return sum(1 for game in games if game.is_complete)


def count_games_missing_scores(games: Sequence[Game]) -> int:
    """Games with either team score unset."""
    return sum(1 for game in games if not game.is_complete)


def can_unfinalize_week(games_with_scores_count: int) -> UnfinalizeCheck:
    """
    Check whether a finalized week may return to draft.

    Only allowed before any score has been recorded.
    """
    if games_with_scores_count > 0:
        noun = 'score has' if games_with_scores_count == 1 else 'scores have'
        return UnfinalizeCheck(
            can_unfinalize=False,
            error_message=f'Cannot unfinalize - {games_with_scores_count} {noun} already been recorded',
        )
    return UnfinalizeCheck(can_unfinalize=True)


def can_mark_week_complete(
    status: str,
    total_games: int,
    games_with_scores_count: int,
) -> CompletionCheck:
    """
    Check whether a week may be marked complete.

    Draft weeks must be finalized first and completed weeks stay completed.
    A finalized week can always be completed; missing scores are reported as
    a warning, not a blocker.

    Args:
        status: Current week status
        total_games: Number of games in the week
        games_with_scores_count: Games with both scores recorded

    Returns:
        CompletionCheck with the gate result and missing score count
    """
    status = WeekStatus(status)

    if status == WeekStatus.DRAFT:
        return CompletionCheck(
            can_mark_complete=False,
            error_message='Cannot mark complete - week must be finalized first',
        )

    if status == WeekStatus.COMPLETED:
        return CompletionCheck(can_mark_complete=False, error_message='Week is already complete')

    missing = max(total_games - games_with_scores_count, 0)
    return CompletionCheck(
        can_mark_complete=True,
        has_missing_scores=missing > 0,
        missing_scores_count=missing,
    )


def is_valid_transition(current: str, target: str) -> bool:
    """Whether a week may move from one status to another."""
    return WeekStatus(target).value in WEEK_TRANSITIONS[WeekStatus(current).value]


def find_active_week_id(weeks: Sequence[Week]) -> Optional[str]:
    """
    Pick the week to show by default.

    The earliest week that is not completed; if every week is completed,
    the last one.
    """
    if not weeks:
        return None

    ordered = sorted(weeks, key=lambda w: w.week_number)
    for week in ordered:
        if week.status != WeekStatus.COMPLETED:
            return week.id
    return ordered[-1].id
