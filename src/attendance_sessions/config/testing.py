import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

AUTH_MODE = "enforced"
CREDENTIAL_SCHEME = "hashed"

DEFAULT_TEACHER_USERNAME = "admin"
DEFAULT_TEACHER_PASSWORD = "admin123"

# Tests drive sweep() directly.
START_SWEEPER = False
SWEEP_INTERVAL_SECONDS = 60

CORS_ORIGINS = "*"

LOG_LEVEL = "WARNING"
LOG_FILE = None
