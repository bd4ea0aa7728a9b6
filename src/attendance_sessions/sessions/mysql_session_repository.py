from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import SessionStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Session
from .repository import SessionRepository

_COLUMNS = "session_id, department, start_time, end_time, status"


def _to_session(row: dict) -> Session:
    return Session(
        session_id=row["session_id"],
        department=row["department"],
        start_time=int(row["start_time"]),
        end_time=int(row["end_time"]),
        status=SessionStatus(row["status"]),
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, session_id: str) -> Optional[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_sessions WHERE session_id=%s", (session_id,))
            row = fetchone(cur)
            return _to_session(row) if row else None

    def find_active(self, department: str) -> Optional[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_sessions
                WHERE status=%s AND department=%s
                """,
                (SessionStatus.ACTIVE.value, department),
            )
            row = fetchone(cur)
            return _to_session(row) if row else None

    def find_open(self, department: str, now_ms: int) -> Optional[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_sessions
                WHERE status=%s AND department=%s AND end_time > %s
                """,
                (SessionStatus.ACTIVE.value, department, int(now_ms)),
            )
            row = fetchone(cur)
            return _to_session(row) if row else None

    def list_expired(self, now_ms: int) -> Sequence[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_sessions
                WHERE status=%s AND end_time <= %s
                ORDER BY end_time ASC
                """,
                (SessionStatus.ACTIVE.value, int(now_ms)),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def create_session(self, session: Session) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_sessions(session_id, department, start_time, end_time, status)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (
                        session.session_id,
                        session.department,
                        int(session.start_time),
                        int(session.end_time),
                        session.status.value,
                    ),
                )
        except IntegrityError as exc:
            # uq_sessions_active_department: another ACTIVE session won the race.
            if is_duplicate_key(exc):
                return False
            raise
        return True

    def close_session(self, session_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_sessions SET status=%s WHERE session_id=%s AND status=%s",
                (SessionStatus.INACTIVE.value, session_id, SessionStatus.ACTIVE.value),
            )
            return cur.rowcount > 0
