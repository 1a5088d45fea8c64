"""Storage for seasons, players, weeks, games and byes.

``LeagueStore`` is the interface the service layer consumes. ``JsonLeagueStore``
keeps the whole league in one JSON file validated by ``LeagueFile``.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol, Sequence

from .models import Bye, Game, Player, Week, WeekStatus
from .schemas import ByeRecord, GameRecord, LeagueFile, WeekRecord
from .utils import load_json, save_json

logger = logging.getLogger('pickleleague.store')


class LeagueStore(Protocol):
    """Read/write access to league records by id and parent id."""

    def get_week(self, week_id: str) -> Week: ...

    def get_weeks(self, season_id: str) -> list[Week]: ...

    def get_games(self, week_id: str) -> list[Game]: ...

    def get_byes(self, week_id: str) -> list[Bye]: ...

    def get_season_games(self, season_id: str) -> list[Game]: ...

    def get_roster(self, season_id: str) -> list[Player]: ...

    def get_available_player_ids(self, week_id: str) -> list[str]: ...

    def save_round_set(
        self,
        week_id: str,
        games: Sequence[Game],
        byes: Sequence[Bye],
        warnings: Optional[Sequence[str]] = None,
    ) -> None: ...

    def set_week_status(self, week_id: str, status: WeekStatus) -> None: ...


def _to_game(record: GameRecord) -> Game:
    return Game(**record.model_dump())


def _to_bye(record: ByeRecord) -> Bye:
    return Bye(
        id=record.id,
        week_id=record.week_id,
        round_number=record.round_number,
        player_id=record.player_id,
    )


class JsonLeagueStore:
    """LeagueStore backed by a single league.json file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        if self.path.exists():
            self.data: LeagueFile = load_json(self.path, schema=LeagueFile)
        else:
            logger.info(f'Starting empty league at {self.path}')
            self.data = LeagueFile()

    def save(self) -> None:
        save_json(self.path, self.data)

    def _week_record(self, week_id: str) -> WeekRecord:
        for record in self.data.weeks:
            if record.id == week_id:
                return record
        raise KeyError(f'Week not found: {week_id}')

    def get_week(self, week_id: str) -> Week:
        record = self._week_record(week_id)
        return Week(
            id=record.id,
            season_id=record.season_id,
            week_number=record.week_number,
            status=WeekStatus(record.status),
            date=record.date,
            schedule_warnings=list(record.schedule_warnings or []),
        )

    def get_weeks(self, season_id: str) -> list[Week]:
        weeks = [self.get_week(w.id) for w in self.data.weeks if w.season_id == season_id]
        return sorted(weeks, key=lambda w: w.week_number)

    def get_games(self, week_id: str) -> list[Game]:
        return [_to_game(g) for g in self.data.games if g.week_id == week_id]

    def get_byes(self, week_id: str) -> list[Bye]:
        return [_to_bye(b) for b in self.data.byes if b.week_id == week_id]

    def get_season_games(self, season_id: str) -> list[Game]:
        week_ids = {w.id for w in self.data.weeks if w.season_id == season_id}
        return [_to_game(g) for g in self.data.games if g.week_id in week_ids]

    def get_roster(self, season_id: str) -> list[Player]:
        for season in self.data.seasons:
            if season.id == season_id:
                roster = set(season.player_ids)
                return [Player(id=p.id, name=p.name) for p in self.data.players if p.id in roster]
        raise KeyError(f'Season not found: {season_id}')

    def get_available_player_ids(self, week_id: str) -> list[str]:
        return [
            a.player_id for a in self.data.availability if a.week_id == week_id and a.is_available
        ]

    def save_round_set(
        self,
        week_id: str,
        games: Sequence[Game],
        byes: Sequence[Bye],
        warnings: Optional[Sequence[str]] = None,
    ) -> None:
        """Replace a week's games and byes, and its schedule warnings when given, in one write."""
        week = self._week_record(week_id) if warnings is not None else None
        self.data.games = [g for g in self.data.games if g.week_id != week_id] + [
            GameRecord(
                id=g.id,
                week_id=week_id,
                round_number=g.round_number,
                court_number=g.court_number,
                team1_player1_id=g.team1_player1_id,
                team1_player2_id=g.team1_player2_id,
                team2_player1_id=g.team2_player1_id,
                team2_player2_id=g.team2_player2_id,
                team1_score=g.team1_score,
                team2_score=g.team2_score,
            )
            for g in games
        ]
        self.data.byes = [b for b in self.data.byes if b.week_id != week_id] + [
            ByeRecord(id=b.id, week_id=week_id, round_number=b.round_number, player_id=b.player_id)
            for b in byes
        ]
        if week is not None:
            week.schedule_warnings = list(warnings) or None
        self.save()

    def set_week_status(self, week_id: str, status: WeekStatus) -> None:
        self._week_record(week_id).status = WeekStatus(status).value
        self.save()
