"""Constraint checks for a week's round set."""

from collections import Counter, defaultdict
from typing import Mapping, Sequence

from .models import Bye, Game
from .swap import partnership_key


def check_swap_violations(
    games: Sequence[Game],
    player_ids: Sequence[str],
    player_names: Mapping[str, str],
) -> list[str]:
    """
    Scan a week's games for problems introduced by manual swaps.

    Checks:
    - Repeat partnerships (same two players on a team more than once)
    - Uneven game counts (anyone below the highest count among player_ids)

    These are diagnostics; nothing here blocks a swap.

    Args:
        games: All games across all rounds of the week
        player_ids: Players scheduled this week
        player_names: Player id -> display name (falls back to the id)

    Returns:
        List of warning messages (empty if the schedule is clean)
    """
    warnings = []
    partnerships: Counter = Counter()
    games_per_player: Counter = Counter()

    for game in games:
        for player_id in game.player_ids:
            games_per_player[player_id] += 1

        partnerships[partnership_key(game.team1_player1_id, game.team1_player2_id)] += 1
        partnerships[partnership_key(game.team2_player1_id, game.team2_player2_id)] += 1

    for (p1, p2), count in partnerships.items():
        if count > 1:
            name1 = player_names.get(p1, p1)
            name2 = player_names.get(p2, p2)
            warnings.append(f'{name1} and {name2} are partnered {count} times')

    target = max((games_per_player[pid] for pid in player_ids), default=0)
    for player_id in player_ids:
        count = games_per_player[player_id]
        if count < target:
            name = player_names.get(player_id, player_id)
            noun = 'game' if count == 1 else 'games'
            warnings.append(f'{name} has played {count} {noun} (expected {target})')

    return warnings


def validate_round_set(
    games: Sequence[Game],
    byes: Sequence[Bye],
    roster_ids: Sequence[str],
) -> list[str]:
    """
    Check that every roster player sits exactly once in every round.

    Args:
        games: All games of the week
        byes: All byes of the week
        roster_ids: Players expected in each round

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    seats: dict[int, Counter] = defaultdict(Counter)

    for game in games:
        for player_id in game.player_ids:
            seats[game.round_number][player_id] += 1
    for bye in byes:
        seats[bye.round_number][bye.player_id] += 1

    for round_number in sorted(seats):
        counts = seats[round_number]
        duplicates = sorted(pid for pid, n in counts.items() if n > 1)
        if duplicates:
            errors.append(
                f'Round {round_number} has players placed more than once: {", ".join(duplicates)}'
            )
        missing = [pid for pid in roster_ids if pid not in counts]
        if missing:
            errors.append(f'Round {round_number} is missing players: {", ".join(missing)}')

    return errors
