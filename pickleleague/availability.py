"""Weekly player availability bounds."""

from typing import Optional

from .constants import AVAILABILITY_WARNING_MARGIN, MAX_AVAILABLE_PLAYERS, MIN_AVAILABLE_PLAYERS
from .models import AvailabilityResult


def validate_available_count(
    count: int,
    min_players: int = MIN_AVAILABLE_PLAYERS,
    max_players: int = MAX_AVAILABLE_PLAYERS,
) -> AvailabilityResult:
    """
    Check the number of available players against the league bounds.

    Args:
        count: Players marked available for the week
        min_players: Lower bound (inclusive)
        max_players: Upper bound (inclusive)

    Returns:
        AvailabilityResult with status valid, too_few or too_many
    """
    if count < min_players:
        return AvailabilityResult(
            is_valid=False,
            status='too_few',
            message=f'Need at least {min_players} available players (currently {count})',
        )

    if count > max_players:
        return AvailabilityResult(
            is_valid=False,
            status='too_many',
            message=f'Maximum {max_players} available players allowed (currently {count})',
        )

    return AvailabilityResult(is_valid=True, status='valid', message=f'{count} players available')


def is_at_boundary(
    count: int,
    min_players: int = MIN_AVAILABLE_PLAYERS,
    max_players: int = MAX_AVAILABLE_PLAYERS,
) -> bool:
    return count in (min_players, max_players)


def get_availability_warning(
    count: int,
    min_players: int = MIN_AVAILABLE_PLAYERS,
    max_players: int = MAX_AVAILABLE_PLAYERS,
) -> Optional[str]:
    """Warning when the count is valid but close to a bound, else None."""
    if min_players <= count <= min_players + AVAILABILITY_WARNING_MARGIN:
        return f'Close to minimum ({min_players}). Consider having backups.'

    if max_players - AVAILABILITY_WARNING_MARGIN <= count <= max_players:
        return f'Close to maximum ({max_players}). Some players may get extra byes.'

    return None
