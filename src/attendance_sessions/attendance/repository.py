from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceReportRow


class AttendanceRepository(Protocol):
    def create_record(self, *, session_id: str, student_id: str, status: AttendanceStatus) -> bool:
        """Insert the record; False when the pair already has one (first write wins)."""

        raise NotImplementedError

    def backfill_absent(self, *, session_id: str, department: str) -> int:
        """Insert-if-absent an ABSENT record for every student of `department`.

        Never overwrites an existing record. Returns the number of rows inserted.
        """

        raise NotImplementedError

    def get_report_rows(self, *, department: str, start_ms: int, end_ms: int) -> Sequence[AttendanceReportRow]:
        """Records of sessions started within [start_ms, end_ms], joined to existing students only."""

        raise NotImplementedError
