from __future__ import annotations

import logging
from datetime import date, datetime
from logging.handlers import RotatingFileHandler

import pytest

from attendance_sessions.common.datetime_utils import coerce_date, local_day_bounds_millis
from attendance_sessions.common.logging_setup import configure_logging
from attendance_sessions.common.validators import require_non_empty, require_positive_int, require_secret
from attendance_sessions.config import get_settings_module
from attendance_sessions.core.exceptions import ValidationError
from attendance_sessions.database.bootstrap import SCHEMA_PATH, _iter_sql_statements, _strip_comments


def test_local_day_bounds_cover_whole_day():
    start_ms, end_ms = local_day_bounds_millis(date(2026, 3, 10))

    assert start_ms == int(datetime(2026, 3, 10).timestamp() * 1000)
    assert end_ms == int(datetime(2026, 3, 11).timestamp() * 1000) - 1


def test_coerce_date():
    assert coerce_date("2026-03-10") == date(2026, 3, 10)
    assert coerce_date(datetime(2026, 3, 10, 15, 30)) == date(2026, 3, 10)
    assert coerce_date(date(2026, 3, 10)) == date(2026, 3, 10)


@pytest.mark.parametrize("value, expected", [(5, 5), ("7", 7), (3.0, 3), (" 2 ", 2)])
def test_require_positive_int(value, expected):
    assert require_positive_int(value, "n") == expected


def test_require_non_empty_accepts_json_numbers():
    assert require_non_empty(101, "roll_no") == "101"


@pytest.mark.parametrize(
    "value, message",
    [(True, "must be text"), ([1], "must be text"), ({}, "must be text"), (None, "is required"), ("  ", "is required")],
)
def test_require_non_empty_rejects(value, message):
    with pytest.raises(ValidationError, match=message):
        require_non_empty(value, "roll_no")


def test_require_secret_keeps_padding():
    assert require_secret("  pw  ", "password") == "  pw  "
    with pytest.raises(ValidationError):
        require_secret("   ", "password")
    with pytest.raises(ValidationError):
        require_secret(123, "password")


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "attendance_sessions.config.production"),
        ("TEST", "attendance_sessions.config.testing"),
        ("anything", "attendance_sessions.config.development"),
    ],
)
def test_settings_module_selection(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_configure_logging_applies_on_every_call(restore_root_logger, tmp_path):
    configure_logging("WARNING")
    assert restore_root_logger.level == logging.WARNING

    log_file = tmp_path / "app.log"
    configure_logging("debug", log_file=str(log_file))

    assert restore_root_logger.level == logging.DEBUG
    assert any(isinstance(h, RotatingFileHandler) for h in restore_root_logger.handlers)

    logging.getLogger("attendance_sessions.test").debug("sweep tick")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "sweep tick" in log_file.read_text(encoding="utf-8")


def test_schema_compares_keys_exactly():
    statements = list(_iter_sql_statements(_strip_comments(SCHEMA_PATH.read_text(encoding="utf-8"))))

    tables = [s for s in statements if s.upper().startswith("CREATE TABLE")]
    assert len(tables) == 4
    for statement in tables:
        assert "COLLATE=utf8mb4_bin" in statement
        assert "_ci" not in statement
