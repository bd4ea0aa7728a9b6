from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from attendance_sessions.config import get_settings_module
from attendance_sessions.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        auth_mode=settings.AUTH_MODE,
        credential_scheme=settings.CREDENTIAL_SCHEME,
    )

    created = container.teacher_service.ensure_default_teacher(
        settings.DEFAULT_TEACHER_USERNAME,
        settings.DEFAULT_TEACHER_PASSWORD,
    )
    if created:
        print(f"OK: Seeded default teacher '{settings.DEFAULT_TEACHER_USERNAME}'")
    else:
        print("OK: Teachers already present, nothing seeded")


if __name__ == "__main__":
    main()
