from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Tuple, Union


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value).strip())


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_millis() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(now_local().timestamp() * 1000)


def to_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def local_day_bounds_millis(day: date) -> Tuple[int, int]:
    """Inclusive [local midnight, 23:59:59.999] of `day` in epoch milliseconds.

    The end bound is derived from the next local midnight so DST days keep their real length.
    """
    start = datetime.combine(day, time.min)
    next_start = datetime.combine(day + timedelta(days=1), time.min)
    return to_millis(start), to_millis(next_start) - 1
