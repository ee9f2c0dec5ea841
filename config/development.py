import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrhub"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Attendance rules
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "15"))
HALF_DAY_THRESHOLD_HOURS = float(os.getenv("HALF_DAY_THRESHOLD_HOURS", "4"))

# "sequential" = one punch query per employee per day, "batched" = one per employee
PUNCH_FETCH_STRATEGY = os.getenv("PUNCH_FETCH_STRATEGY", "sequential")
