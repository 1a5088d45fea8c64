"""Pickleball score rules: one team scores 11, the other 0-10."""

from typing import Optional

from .constants import MAX_LOSING_SCORE, WINNING_SCORE
from .models import ScoreValidation


def _is_score(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_score(team1_score: Optional[int], team2_score: Optional[int]) -> ScoreValidation:
    """
    Validate a completed game score.

    Checks:
    - Both scores present
    - Non-negative integers no greater than 11
    - Exactly one team reached 11

    Args:
        team1_score: Score for team 1
        team2_score: Score for team 2

    Returns:
        ScoreValidation with the first error found
    """
    if team1_score is None:
        return ScoreValidation(valid=False, error='Team 1 score is required')
    if team2_score is None:
        return ScoreValidation(valid=False, error='Team 2 score is required')

    if not _is_score(team1_score):
        return ScoreValidation(valid=False, error='Team 1 score must be a non-negative integer')
    if not _is_score(team2_score):
        return ScoreValidation(valid=False, error='Team 2 score must be a non-negative integer')

    if team1_score > WINNING_SCORE or team2_score > WINNING_SCORE:
        return ScoreValidation(valid=False, error=f'Scores cannot exceed {WINNING_SCORE}')

    if team1_score == WINNING_SCORE and team2_score == WINNING_SCORE:
        return ScoreValidation(valid=False, error=f'Both teams cannot score {WINNING_SCORE}')

    team1_won = team1_score == WINNING_SCORE and team2_score <= MAX_LOSING_SCORE
    team2_won = team2_score == WINNING_SCORE and team1_score <= MAX_LOSING_SCORE
    if not (team1_won or team2_won):
        return ScoreValidation(valid=False, error=f'Exactly one team must score {WINNING_SCORE}')

    return ScoreValidation(valid=True)


def get_winning_team(team1_score: Optional[int], team2_score: Optional[int]) -> Optional[int]:
    """1 or 2 for a valid score, None otherwise."""
    if not validate_score(team1_score, team2_score).valid:
        return None
    return 1 if team1_score == WINNING_SCORE else 2


def parse_score_input(text: str) -> Optional[int]:
    """Parse a score field; blank or non-numeric input gives None."""
    text = text.strip()
    if not text:
        return None
    try:
        value = int(text)
    except ValueError:
        return None
    return value if value >= 0 else None
