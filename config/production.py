import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "performance_db"),
}

DEBUG = False

PUNCH_IN_DEADLINE = os.getenv("PUNCH_IN_DEADLINE", "09:45")
PUNCH_OUT_MINIMUM = os.getenv("PUNCH_OUT_MINIMUM", "18:25")
PUNCH_REOPEN_TIME = os.getenv("PUNCH_REOPEN_TIME", "08:45")

CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "300"))
WEEK_STARTS_ON = int(os.getenv("WEEK_STARTS_ON", "0"))
LEADERBOARD_SIZE = int(os.getenv("LEADERBOARD_SIZE", "10"))
