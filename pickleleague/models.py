"""Data models for the pickleball league engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


class WeekStatus(str, Enum):
    """Lifecycle state of a league week."""
    DRAFT = 'draft'
    FINALIZED = 'finalized'
    COMPLETED = 'completed'


@dataclass(frozen=True)
class Player:
    """A player in an administrator's player pool."""
    id: str
    name: str


@dataclass(frozen=True)
class Game:
    """A doubles game in one round of a week."""
    id: str
    round_number: int
    court_number: int
    team1_player1_id: str
    team1_player2_id: str
    team2_player1_id: str
    team2_player2_id: str
    team1_score: Optional[int] = None
    team2_score: Optional[int] = None
    week_id: str = ''

    @property
    def is_complete(self) -> bool:
        # 0 is a real score
        return self.team1_score is not None and self.team2_score is not None

    @property
    def status(self) -> str:
        return 'completed' if self.is_complete else 'scheduled'

    @property
    def player_ids(self) -> Tuple[str, str, str, str]:
        return (
            self.team1_player1_id,
            self.team1_player2_id,
            self.team2_player1_id,
            self.team2_player2_id,
        )

    def slot(self, team: int, position: int) -> str:
        """Return the player id sitting at a team/position slot."""
        return getattr(self, SLOT_FIELDS[(team, position)])


# (team, position) -> Game attribute
SLOT_FIELDS = {
    (1, 1): 'team1_player1_id',
    (1, 2): 'team1_player2_id',
    (2, 1): 'team2_player1_id',
    (2, 2): 'team2_player2_id',
}


@dataclass(frozen=True)
class Bye:
    """A player excused from one round of a week."""
    player_id: str
    round_number: int
    week_id: str = ''
    id: str = ''


@dataclass(frozen=True)
class GameSlot:
    """A player's seat in a game: team 1|2, position 1|2."""
    player_id: str
    game_id: str
    team: int
    position: int


@dataclass(frozen=True)
class ByeSlot:
    """A player sitting out the round."""
    player_id: str
    round_number: Optional[int] = None


PlayerPosition = Union[GameSlot, ByeSlot]


@dataclass(frozen=True)
class SwapValidation:
    valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class SwapResult:
    """Outcome of a swap; collections are new lists, never the caller's."""
    success: bool
    updated_games: Optional[List[Game]] = None
    updated_byes: Optional[List[Bye]] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class PlayerStats:
    """Season totals for a player, summed from completed games."""
    player_id: str
    total_points: int = 0
    games_played: int = 0
    wins: int = 0
    player_name: str = ''


@dataclass(frozen=True)
class RankedPlayer:
    """PlayerStats plus standings position."""
    player_id: str
    total_points: int
    games_played: int
    wins: int
    win_percentage: float
    rank: int
    is_tied: bool
    player_name: str = ''


@dataclass(frozen=True)
class Week:
    id: str
    season_id: str
    week_number: int
    status: WeekStatus = WeekStatus.DRAFT
    date: str = ''
    schedule_warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class UnfinalizeCheck:
    can_unfinalize: bool
    error_message: Optional[str] = None


@dataclass(frozen=True)
class CompletionCheck:
    can_mark_complete: bool
    error_message: Optional[str] = None
    has_missing_scores: bool = False
    missing_scores_count: int = 0


@dataclass(frozen=True)
class AvailabilityResult:
    is_valid: bool
    status: str  # valid | too_few | too_many
    message: str


@dataclass(frozen=True)
class ProgressData:
    completed: int
    total: int
    percentage: int


@dataclass(frozen=True)
class GameFilterState:
    filter_type: str  # round | court
    selected_value: int


@dataclass(frozen=True)
class ScoreValidation:
    valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class PlayerRemovalCheck:
    can_remove: bool
    game_count: int
    message: str


@dataclass
class DuplicateCheckResult:
    """Names split by whether they already exist in the player pool."""
    duplicates: List[str] = field(default_factory=list)
    new_names: List[str] = field(default_factory=list)
