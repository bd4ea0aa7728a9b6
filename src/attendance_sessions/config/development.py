import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# 'enforced' requires a known teacher_id on teacher actions; 'open' accepts any caller.
AUTH_MODE = os.getenv("AUTH_MODE", "enforced")
CREDENTIAL_SCHEME = os.getenv("CREDENTIAL_SCHEME", "hashed")

DEFAULT_TEACHER_USERNAME = os.getenv("DEFAULT_TEACHER_USERNAME", "admin")
DEFAULT_TEACHER_PASSWORD = os.getenv("DEFAULT_TEACHER_PASSWORD", "admin123")

START_SWEEPER = bool(int(os.getenv("START_SWEEPER", "1")))
SWEEP_INTERVAL_SECONDS = int(os.getenv("SWEEP_INTERVAL_SECONDS", "60"))

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE")
