"""Pydantic schemas for league JSON data validation."""

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    DEFAULT_SEASON_COURTS,
    DEFAULT_SEASON_WEEKS,
    MAX_AVAILABLE_PLAYERS,
    MAX_SEASON_COURTS,
    MAX_SEASON_WEEKS,
    MIN_AVAILABLE_PLAYERS,
    MIN_SEASON_COURTS,
    MIN_SEASON_WEEKS,
)
from .scores import validate_score


class SeasonRecord(BaseModel):
    """A league season owned by an administrator."""

    id: str
    admin_id: str = ''
    name: str = Field(..., min_length=1, max_length=255)
    start_date: str
    num_weeks: int = Field(DEFAULT_SEASON_WEEKS, ge=MIN_SEASON_WEEKS, le=MAX_SEASON_WEEKS)
    num_courts: int = Field(DEFAULT_SEASON_COURTS, ge=MIN_SEASON_COURTS, le=MAX_SEASON_COURTS)
    rounds_per_week: int | None = Field(None, ge=1, le=20)
    status: str = Field(default='active', pattern=r'^(active|completed|archived)$')
    player_ids: list[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        """Season names are stored trimmed."""
        v = v.strip()
        if not v:
            raise ValueError('Season name is required')
        return v

    class Config:
        extra = 'forbid'


class PlayerRecord(BaseModel):
    """Player in the administrator's pool."""

    id: str
    name: str = Field(..., min_length=1, max_length=255)

    class Config:
        extra = 'forbid'


class WeekRecord(BaseModel):
    """One week of a season."""

    id: str
    season_id: str
    week_number: int = Field(..., ge=1)
    date: str = ''
    status: str = Field(default='draft', pattern=r'^(draft|finalized|completed)$')
    schedule_warnings: list[str] | None = None

    class Config:
        extra = 'forbid'


class GameRecord(BaseModel):
    """A scheduled or scored game."""

    id: str
    week_id: str
    round_number: int = Field(..., ge=1)
    court_number: int = Field(..., ge=1)
    team1_player1_id: str
    team1_player2_id: str
    team2_player1_id: str
    team2_player2_id: str
    team1_score: int | None = Field(None, ge=0, le=11)
    team2_score: int | None = Field(None, ge=0, le=11)

    @model_validator(mode='after')
    def check_scores(self):
        """Scores are both absent or a valid pickleball result."""
        if self.team1_score is None and self.team2_score is None:
            return self
        result = validate_score(self.team1_score, self.team2_score)
        if not result.valid:
            raise ValueError(f'Game {self.id}: {result.error}')
        return self

    class Config:
        extra = 'forbid'


class ByeRecord(BaseModel):
    """A player sitting out one round."""

    id: str = ''
    week_id: str
    round_number: int = Field(..., ge=1)
    player_id: str

    class Config:
        extra = 'forbid'


class AvailabilityRecord(BaseModel):
    """Whether a player is available for a week."""

    week_id: str
    player_id: str
    is_available: bool = True

    class Config:
        extra = 'forbid'


class LeagueFile(BaseModel):
    """Complete league.json file structure."""

    seasons: list[SeasonRecord] = Field(default_factory=list)
    players: list[PlayerRecord] = Field(default_factory=list)
    weeks: list[WeekRecord] = Field(default_factory=list)
    games: list[GameRecord] = Field(default_factory=list)
    byes: list[ByeRecord] = Field(default_factory=list)
    availability: list[AvailabilityRecord] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class LeagueConfig(BaseModel):
    """League configuration settings."""

    min_available_players: int = Field(MIN_AVAILABLE_PLAYERS, ge=4)
    max_available_players: int = Field(MAX_AVAILABLE_PLAYERS, ge=4)

    @field_validator('min_available_players', 'max_available_players')
    @classmethod
    def validate_full_courts(cls, v):
        """Player bounds must fill doubles courts."""
        if v % 4 != 0:
            raise ValueError(f'Player bound must be a multiple of 4, got {v}')
        return v

    @model_validator(mode='after')
    def check_bounds(self):
        if self.min_available_players > self.max_available_players:
            raise ValueError(
                f'min_available_players ({self.min_available_players}) exceeds '
                f'max_available_players ({self.max_available_players})'
            )
        return self

    class Config:
        extra = 'forbid'
