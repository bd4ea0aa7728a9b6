from __future__ import annotations

from typing import Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, is_duplicate_key
from .model import AttendanceReportRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_record(self, *, session_id: str, student_id: str, status: AttendanceStatus) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO attendance_records(session_id, student_id, status) VALUES(%s,%s,%s)",
                    (session_id, student_id, status.value),
                )
        except IntegrityError as exc:
            if is_duplicate_key(exc):
                return False
            raise
        return True

    def backfill_absent(self, *, session_id: str, department: str) -> int:
        # INSERT IGNORE skips pairs that already have a row, so a PRESENT mark
        # committed first is kept.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO attendance_records(session_id, student_id, status)
                SELECT %s, st.student_id, %s
                FROM students st
                WHERE st.department=%s
                """,
                (session_id, AttendanceStatus.ABSENT.value, department),
            )
            return int(cur.rowcount or 0)

    def get_report_rows(self, *, department: str, start_ms: int, end_ms: int) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT st.name, st.roll_no, ar.status, s.session_id, s.start_time
                FROM attendance_records ar
                JOIN attendance_sessions s ON s.session_id = ar.session_id
                JOIN students st ON st.student_id = ar.student_id
                WHERE s.department=%s
                  AND s.start_time BETWEEN %s AND %s
                ORDER BY s.start_time ASC, st.roll_no ASC
                """,
                (department, int(start_ms), int(end_ms)),
            )
            return [
                AttendanceReportRow(
                    name=r["name"],
                    roll_no=r["roll_no"],
                    status=AttendanceStatus(r["status"]),
                    session_id=r["session_id"],
                    start_time=int(r["start_time"]),
                )
                for r in fetchall(cur)
            ]
