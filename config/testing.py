import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrhub_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LATE_GRACE_MINUTES = 15
HALF_DAY_THRESHOLD_HOURS = 4
PUNCH_FETCH_STRATEGY = "sequential"
