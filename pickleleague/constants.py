"""Constants for the pickleball league engine."""

# Weekly availability bounds (full doubles courts: multiples of 4)
MIN_AVAILABLE_PLAYERS = 24
MAX_AVAILABLE_PLAYERS = 32

# Distance from a bound that triggers a "close to" warning
AVAILABILITY_WARNING_MARGIN = 2

# Pickleball scoring: exactly one team reaches 11
WINNING_SCORE = 11
MAX_LOSING_SCORE = 10

# Win percentages closer than this are treated as equal
WIN_PERCENTAGE_TOLERANCE = 1e-4

# Season limits
MIN_SEASON_WEEKS = 1
MAX_SEASON_WEEKS = 12
MIN_SEASON_COURTS = 4
MAX_SEASON_COURTS = 8
DEFAULT_SEASON_WEEKS = 7
DEFAULT_SEASON_COURTS = 6

# Allowed week status changes: current -> targets
WEEK_TRANSITIONS = {
    'draft': {'finalized'},
    'finalized': {'draft', 'completed'},
    'completed': set(),
}
