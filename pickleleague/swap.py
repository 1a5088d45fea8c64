"""Manual swaps of players within a round of a generated schedule.

A swap exchanges the occupants of two positions in the same round. A position
is either a seat in a game (``GameSlot``) or a bye (``ByeSlot``). All functions
here are pure: inputs are never mutated, swaps return new lists.
"""

import dataclasses
import logging
from typing import Optional, Sequence

from .models import (
    SLOT_FIELDS,
    Bye,
    ByeSlot,
    Game,
    GameSlot,
    PlayerPosition,
    SwapResult,
    SwapValidation,
)

logger = logging.getLogger('pickleleague.swap')


def partnership_key(player_a: str, player_b: str) -> tuple[str, str]:
    """Order-independent key for a pair of teammates."""
    return (player_a, player_b) if player_a <= player_b else (player_b, player_a)


def find_player_position(
    player_id: str,
    games: Sequence[Game],
    byes: Sequence[Bye],
    round_number: Optional[int] = None,
) -> Optional[PlayerPosition]:
    """
    Locate a player in a round set.

    Games are scanned slot by slot, then the bye list. A player occupies at
    most one position per round, so the scan order does not matter.

    Args:
        player_id: Player to find
        games: Games of the round (or the whole week when round_number is given)
        byes: Byes of the round (or the whole week when round_number is given)
        round_number: Optionally restrict the search to one round

    Returns:
        GameSlot or ByeSlot, or None if the player has no position
    """
    for game in games:
        if round_number is not None and game.round_number != round_number:
            continue
        for (team, position), attr in SLOT_FIELDS.items():
            if getattr(game, attr) == player_id:
                return GameSlot(player_id=player_id, game_id=game.id, team=team, position=position)

    for bye in byes:
        if round_number is not None and bye.round_number != round_number:
            continue
        if bye.player_id == player_id:
            return ByeSlot(player_id=player_id, round_number=bye.round_number)

    return None


def validate_swap(pos_a: PlayerPosition, pos_b: PlayerPosition) -> SwapValidation:
    """
    Check whether two positions may be swapped.

    Rules, in order:
    - A player cannot be swapped with themselves
    - Two seats on the same team of the same game cannot be swapped
      (that only reorders partners)

    Everything else is allowed: cross-team within a game, cross-game, and
    any swap involving a bye (bye <-> bye is a legal no-op).
    """
    if pos_a.player_id == pos_b.player_id:
        return SwapValidation(valid=False, error='Cannot swap a player with themselves')

    if isinstance(pos_a, GameSlot) and isinstance(pos_b, GameSlot):
        if pos_a.game_id == pos_b.game_id and pos_a.team == pos_b.team:
            return SwapValidation(
                valid=False,
                error='Cannot swap players on the same team in the same game',
            )

    return SwapValidation(valid=True)


def _bye_index(byes: list[Bye], pos: ByeSlot) -> Optional[int]:
    for i, bye in enumerate(byes):
        if bye.player_id != pos.player_id:
            continue
        if pos.round_number is None or bye.round_number == pos.round_number:
            return i
    return None


def _game_index(games: list[Game], pos: GameSlot) -> Optional[int]:
    for i, game in enumerate(games):
        if game.id == pos.game_id and game.slot(pos.team, pos.position) == pos.player_id:
            return i
    return None


def perform_swap(
    pos_a: PlayerPosition,
    pos_b: PlayerPosition,
    games: Sequence[Game],
    byes: Sequence[Bye],
) -> SwapResult:
    """
    Swap the players at two positions and return the new games and byes.

    The swap is re-validated first; an invalid swap returns success=False with
    the validation error and no collections. Positions are resolved against the
    original inputs before anything is written, so the second write never sees
    the first.

    Args:
        pos_a: First player's position
        pos_b: Second player's position
        games: Games of the round set (not mutated)
        byes: Byes of the round set (not mutated)

    Returns:
        SwapResult with updated_games and updated_byes on success
    """
    validation = validate_swap(pos_a, pos_b)
    if not validation.valid:
        logger.debug(f'Swap rejected ({pos_a.player_id} <-> {pos_b.player_id}): {validation.error}')
        return SwapResult(success=False, error=validation.error)

    updated_games = list(games)
    updated_byes = list(byes)

    targets = []
    for pos, incoming in ((pos_a, pos_b.player_id), (pos_b, pos_a.player_id)):
        if isinstance(pos, GameSlot):
            index = _game_index(updated_games, pos)
        else:
            index = _bye_index(updated_byes, pos)
        if index is None:
            return SwapResult(
                success=False,
                error=f'Player {pos.player_id} is not at the given position',
            )
        targets.append((pos, index, incoming))

    for pos, index, incoming in targets:
        if isinstance(pos, GameSlot):
            attr = SLOT_FIELDS[(pos.team, pos.position)]
            updated_games[index] = dataclasses.replace(updated_games[index], **{attr: incoming})
        else:
            updated_byes[index] = dataclasses.replace(updated_byes[index], player_id=incoming)

    logger.debug(f'Swapped {pos_a.player_id} <-> {pos_b.player_id}')
    return SwapResult(success=True, updated_games=updated_games, updated_byes=updated_byes)


def get_valid_swap_targets(
    player_id: str,
    games: Sequence[Game],
    byes: Sequence[Bye],
) -> list[str]:
    """
    List the players a selected player may be swapped with in one round.

    Everyone on bye and every seated player qualifies except the selected
    player and their current teammate.
    """
    selected = find_player_position(player_id, games, byes)

    targets = [bye.player_id for bye in byes if bye.player_id != player_id]

    for game in games:
        for (team, _position), attr in SLOT_FIELDS.items():
            occupant = getattr(game, attr)
            if occupant == player_id:
                continue
            if (
                isinstance(selected, GameSlot)
                and selected.game_id == game.id
                and selected.team == team
            ):
                continue
            targets.append(occupant)

    return targets
