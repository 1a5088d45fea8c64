"""Leaderboard standings from aggregated game results.

Players are ordered by total points, then win percentage. Ties share a rank
and the next rank skips the tied block (1, 2, 2, 4).
"""

import logging
import math
from functools import cmp_to_key
from typing import Mapping, Optional, Sequence

from .constants import WIN_PERCENTAGE_TOLERANCE
from .models import Game, PlayerStats, RankedPlayer

logger = logging.getLogger('pickleleague.ranking')


def calculate_win_percentage(wins: int, games_played: int) -> float:
    """Win percentage 0-100; 0 when no games have been played."""
    if games_played == 0:
        return 0.0
    return wins / games_played * 100


def _win_pct(player: PlayerStats) -> float:
    return calculate_win_percentage(player.wins, player.games_played)


def compare_players_for_ranking(a: PlayerStats, b: PlayerStats) -> float:
    """
    Comparator for standings order.

    Negative when a ranks above b. Total points decide first (higher is
    better), win percentage breaks ties (higher is better).
    """
    if a.total_points != b.total_points:
        return b.total_points - a.total_points
    return _win_pct(b) - _win_pct(a)


def are_players_tied(a: PlayerStats, b: PlayerStats) -> bool:
    """True when points match and win percentages match within tolerance."""
    if a.total_points != b.total_points:
        return False
    return abs(_win_pct(a) - _win_pct(b)) < WIN_PERCENTAGE_TOLERANCE


def calculate_rankings(players: Sequence[PlayerStats]) -> list[RankedPlayer]:
    """
    Rank players for the leaderboard.

    A player tied with the previous entry takes that entry's rank; otherwise
    the rank is the player's 1-based position in the sorted list. A player is
    flagged as tied when tied with either neighbour.

    Args:
        players: Aggregated stats (not mutated)

    Returns:
        New list of RankedPlayer in standings order
    """
    if not players:
        return []

    ordered = sorted(players, key=cmp_to_key(compare_players_for_ranking))
    ranked: list[RankedPlayer] = []

    for i, player in enumerate(ordered):
        tied_with_previous = i > 0 and are_players_tied(player, ordered[i - 1])
        tied_with_next = i < len(ordered) - 1 and are_players_tied(player, ordered[i + 1])

        rank = ranked[i - 1].rank if tied_with_previous else i + 1

        ranked.append(
            RankedPlayer(
                player_id=player.player_id,
                player_name=player.player_name,
                total_points=player.total_points,
                games_played=player.games_played,
                wins=player.wins,
                win_percentage=_win_pct(player),
                rank=rank,
                is_tied=tied_with_previous or tied_with_next,
            )
        )

    logger.debug(f'Ranked {len(ranked)} players')
    return ranked


def format_rank(rank: int, is_tied: bool) -> str:
    """Display rank, prefixed with T when tied (3 -> '3', tied 3 -> 'T3')."""
    return f'T{rank}' if is_tied else str(rank)


def format_win_percentage(win_percentage: float) -> str:
    """One decimal place, whole numbers without '.0' (100 -> '100%', 75.5 -> '75.5%')."""
    formatted = f'{win_percentage:.1f}'
    if formatted.endswith('.0'):
        return f'{math.floor(win_percentage + 0.5)}%'
    return f'{formatted}%'


def aggregate_player_stats(
    games: Sequence[Game],
    player_names: Optional[Mapping[str, str]] = None,
) -> list[PlayerStats]:
    """
    Sum completed games into per-player season totals.

    Each player on a team is credited with the team's score as points and a
    win when their team outscored the other. Games missing either score are
    skipped, as are players with no completed game.

    Args:
        games: Games from any number of weeks
        player_names: Optional player id -> name for display

    Returns:
        List of PlayerStats in first-seen order
    """
    names = player_names or {}
    totals: dict[str, dict[str, int]] = {}

    for game in games:
        if not game.is_complete:
            continue

        team1_won = game.team1_score > game.team2_score
        sides = (
            ((game.team1_player1_id, game.team1_player2_id), game.team1_score, team1_won),
            ((game.team2_player1_id, game.team2_player2_id), game.team2_score, not team1_won),
        )
        for player_ids, score, won in sides:
            for player_id in player_ids:
                stats = totals.setdefault(player_id, {'points': 0, 'games': 0, 'wins': 0})
                stats['points'] += score
                stats['games'] += 1
                if won:
                    stats['wins'] += 1

    return [
        PlayerStats(
            player_id=player_id,
            player_name=names.get(player_id, 'Unknown'),
            total_points=stats['points'],
            games_played=stats['games'],
            wins=stats['wins'],
        )
        for player_id, stats in totals.items()
        if stats['games'] > 0
    ]
