"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PUNCH_IN_DEADLINE = "09:45"
DEFAULT_PUNCH_OUT_MINIMUM = "18:25"
DEFAULT_PUNCH_REOPEN_TIME = "08:45"

DEFAULT_CACHE_TTL_SECONDS = 5 * 60
DEFAULT_WEEK_STARTS_ON = 0  # Monday
DEFAULT_LEADERBOARD_SIZE = 10

# Weekly targets used when no target config exists for a user.
DEFAULT_NUM_MEETINGS_TARGET = 30
DEFAULT_ATTENDED_MEETINGS_TARGET = 30
DEFAULT_DURATION_TARGET_SECONDS = 20 * 60 * 60
DEFAULT_CLOSING_AMOUNT_TARGET = 50000

# Axis order: meetings, attended/positive, duration, closing amount.
ACHIEVEMENT_WEIGHTS = (0.25, 0.25, 0.20, 0.30)

UNKNOWN_USER_NAME = "Unknown User"
