import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "daily_timesheet_test"),
}

TIMEZONE = "UTC"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_JSON = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
