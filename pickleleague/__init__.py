from .models import (
    Bye,
    ByeSlot,
    Game,
    GameSlot,
    Player,
    PlayerPosition,
    PlayerStats,
    RankedPlayer,
    SwapResult,
    SwapValidation,
    Week,
    WeekStatus,
)
from .swap import (
    find_player_position,
    validate_swap,
    perform_swap,
    get_valid_swap_targets,
    partnership_key,
)
from .validators import check_swap_violations, validate_round_set
from .ranking import (
    calculate_win_percentage,
    compare_players_for_ranking,
    are_players_tied,
    calculate_rankings,
    format_rank,
    format_win_percentage,
    aggregate_player_stats,
)
from .weeks import (
    can_unfinalize_week,
    can_mark_week_complete,
    count_games_with_scores,
    count_games_missing_scores,
    find_active_week_id,
    is_valid_transition,
)
from .availability import validate_available_count, is_at_boundary, get_availability_warning
from .games import calculate_progress, apply_game_filter, get_default_filter_state
from .store import LeagueStore, JsonLeagueStore

__all__ = [
    # Models
    'Bye',
    'ByeSlot',
    'Game',
    'GameSlot',
    'Player',
    'PlayerPosition',
    'PlayerStats',
    'RankedPlayer',
    'SwapResult',
    'SwapValidation',
    'Week',
    'WeekStatus',
    # Swaps
    'find_player_position',
    'validate_swap',
    'perform_swap',
    'get_valid_swap_targets',
    'partnership_key',
    # Schedule checks
    'check_swap_violations',
    'validate_round_set',
    # Standings
    'calculate_win_percentage',
    'compare_players_for_ranking',
    'are_players_tied',
    'calculate_rankings',
    'format_rank',
    'format_win_percentage',
    'aggregate_player_stats',
    # Week status
    'can_unfinalize_week',
    'can_mark_week_complete',
    'count_games_with_scores',
    'count_games_missing_scores',
    'find_active_week_id',
    'is_valid_transition',
    # Availability
    'validate_available_count',
    'is_at_boundary',
    'get_availability_warning',
    # Progress and filters
    'calculate_progress',
    'apply_game_filter',
    'get_default_filter_state',
    # Storage
    'LeagueStore',
    'JsonLeagueStore',
]
