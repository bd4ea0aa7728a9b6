import os


def get_settings_module() -> str:
    # Environment comes from APP_ENV, default is 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "attendance_sessions.config.production"

    if env in {"test", "testing"}:
        return "attendance_sessions.config.testing"

    return "attendance_sessions.config.development"
