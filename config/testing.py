import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "performance_test_db"),
}

DEBUG = False
TESTING = True

PUNCH_IN_DEADLINE = "09:45"
PUNCH_OUT_MINIMUM = "18:25"
PUNCH_REOPEN_TIME = "08:45"

CACHE_TTL_SECONDS = 300
WEEK_STARTS_ON = 0
LEADERBOARD_SIZE = 10
