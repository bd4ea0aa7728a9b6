from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, Union

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import coerce_date, local_day_bounds_millis
from ..common.validators import require_non_empty
from ..core.constants import CSV_HEADER
from ..core.exceptions import ValidationError
from ..teachers.policy import AuthorizationPolicy


class ReportService:
    """Read-only attendance history per department and local calendar day."""

    def __init__(self, attendance: AttendanceRepository, policy: AuthorizationPolicy):
        self._attendance = attendance
        self._policy = policy

    def history(
        self,
        *,
        department: str,
        day: Union[date, str],
        teacher_id: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        self._policy.authorize(teacher_id)
        department = require_non_empty(department, "department")
        if day is None or (isinstance(day, str) and not day.strip()):
            raise ValidationError("date is required")
        try:
            day = coerce_date(day)
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD") from None

        start_ms, end_ms = local_day_bounds_millis(day)
        return self._attendance.get_report_rows(department=department, start_ms=start_ms, end_ms=end_ms)

    def export_csv(
        self,
        *,
        department: str,
        day: Union[date, str],
        teacher_id: Optional[str] = None,
    ) -> str:
        """Render history() as CSV.

        Fields are written as-is: a comma inside a name shifts that row's columns.
        """

        rows = self.history(department=department, day=day, teacher_id=teacher_id)
        lines = [CSV_HEADER]
        lines.extend(f"{r.name},{r.roll_no},{r.status.value}" for r in rows)
        return "\n".join(lines)
