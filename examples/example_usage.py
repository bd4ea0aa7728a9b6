"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the session lifecycle lives in the services.
"""

import importlib
from datetime import date

from attendance_sessions.config import get_settings_module
from attendance_sessions.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, auth_mode="open")

    closed = container.lifecycle_service.sweep()
    print(f"closed {closed} expired session(s)")
    print(container.report_service.export_csv(department="CS", day=date.today()))


if __name__ == "__main__":
    main()
