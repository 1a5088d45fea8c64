"""Player pool helpers: name normalization, bulk import, search."""

import re
from typing import Optional, Sequence, Set

from .models import DuplicateCheckResult, Player, PlayerRemovalCheck


def normalize_player_name(name: str) -> str:
    """Trim and collapse internal whitespace."""
    return re.sub(r'\s+', ' ', name.strip())


def parse_player_names(text: str) -> list[str]:
    """Split bulk input on newlines and commas into normalized, non-empty names."""
    names = (normalize_player_name(part) for part in re.split(r'[\n,]+', text))
    return [name for name in names if name]


def find_duplicates(names: Sequence[str], existing: Sequence[Player]) -> DuplicateCheckResult:
    """
    Split names into those already in the pool and new ones.

    Comparison is case-insensitive on normalized names.
    """
    existing_names = {normalize_player_name(p.name).lower() for p in existing}
    result = DuplicateCheckResult()
    for name in names:
        if normalize_player_name(name).lower() in existing_names:
            result.duplicates.append(name)
        else:
            result.new_names.append(name)
    return result


def check_player_removal(game_count: int) -> PlayerRemovalCheck:
    """A player with recorded games cannot leave a season roster."""
    if game_count > 0:
        plural = '' if game_count == 1 else 's'
        return PlayerRemovalCheck(
            can_remove=False,
            game_count=game_count,
            message=f'Player has {game_count} game{plural} recorded',
        )
    return PlayerRemovalCheck(
        can_remove=True, game_count=0, message='Player can be removed from this season'
    )


def filter_players(players: Sequence[Player], query: str) -> list[Player]:
    """Case-insensitive substring match on name; blank query returns everyone."""
    query = query.strip().lower()
    if not query:
        return list(players)
    return [p for p in players if query in p.name.lower()]


def validate_player_name(name: str) -> str:
    """
    Return the trimmed name.

    Raises:
        ValueError: If the name is empty after trimming
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValueError('Player name cannot be empty')
    return trimmed


def is_player_in_season(season_player_ids: Set[str], player_id: str) -> bool:
    return player_id in season_player_ids


def find_existing_player(name: str, existing: Sequence[Player]) -> Optional[Player]:
    """Pool player whose normalized name matches, ignoring case."""
    wanted = normalize_player_name(name).lower()
    for player in existing:
        if normalize_player_name(player.name).lower() == wanted:
            return player
    return None


def get_import_preview_summary(total_names: int, duplicate_count: int) -> str:
    """One-line summary shown before a bulk import is confirmed."""
    new_count = total_names - duplicate_count

    if total_names == 0:
        return 'No player names found'

    if duplicate_count == 0:
        return f'{total_names} player{"" if total_names == 1 else "s"} will be added'

    if new_count == 0:
        return f'All {duplicate_count} player{"" if duplicate_count == 1 else "s"} already exist'

    return (
        f'{new_count} new player{"" if new_count == 1 else "s"} will be added, '
        f'{duplicate_count} already exist'
    )
