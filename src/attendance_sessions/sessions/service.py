from __future__ import annotations

import logging
import uuid
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_millis
from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import MILLIS_PER_MINUTE
from ..core.enums import SessionStatus
from ..core.exceptions import ConflictError, NotFoundError
from ..teachers.policy import AuthorizationPolicy
from .model import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionLifecycleService:
    """Open, close and sweep department attendance sessions.

    State machine: ACTIVE --(sweep after end_time, or explicit close)--> INACTIVE.
    INACTIVE is terminal. Closing always backfills ABSENT before flipping the
    status, so a session is never INACTIVE with unmarked students left behind.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        attendance: AttendanceRepository,
        policy: AuthorizationPolicy,
    ):
        self._sessions = sessions
        self._attendance = attendance
        self._policy = policy

    def start_session(
        self,
        *,
        department: str,
        duration_minutes,
        teacher_id: Optional[str] = None,
        now_ms: Optional[int] = None,
    ) -> str:
        self._policy.authorize(teacher_id)
        department = require_non_empty(department, "department")
        duration = require_positive_int(duration_minutes, "duration_minutes")
        now_ms = now_millis() if now_ms is None else int(now_ms)

        if self._sessions.find_active(department):
            raise ConflictError("Session already active")

        session = Session(
            session_id=str(uuid.uuid4()),
            department=department,
            start_time=now_ms,
            end_time=now_ms + duration * MILLIS_PER_MINUTE,
            status=SessionStatus.ACTIVE,
        )
        if not self._sessions.create_session(session):
            raise ConflictError("Session already active")

        logger.info(
            "Started session %s for department=%s (%d min, teacher=%s)",
            session.session_id,
            department,
            duration,
            teacher_id or "-",
        )
        return session.session_id

    def close_session(self, session_id: str, *, teacher_id: Optional[str] = None) -> bool:
        """Close a session before its window ends. False if it was already INACTIVE."""

        self._policy.authorize(teacher_id)
        session_id = require_non_empty(session_id, "session_id")

        session = self._sessions.get_by_id(session_id)
        if not session:
            raise NotFoundError("Session not found")
        if session.status != SessionStatus.ACTIVE:
            return False

        closed = self._close(session)
        if closed:
            logger.info("Closed session %s on request (teacher=%s)", session_id, teacher_id or "-")
        return closed

    def sweep(self, *, now_ms: Optional[int] = None) -> int:
        """Close every ACTIVE session whose end_time has passed.

        A failure on one session is logged and skipped. Returns how many sessions
        this call transitioned to INACTIVE.
        """

        now_ms = now_millis() if now_ms is None else int(now_ms)
        expired = self._sessions.list_expired(now_ms)

        closed = 0
        for session in expired:
            try:
                if self._close(session):
                    closed += 1
            except Exception:
                logger.exception("Sweep failed for session %s (department=%s)", session.session_id, session.department)

        if closed:
            logger.info("Sweep closed %d expired session(s)", closed)
        return closed

    def _close(self, session: Session) -> bool:
        inserted = self._attendance.backfill_absent(session_id=session.session_id, department=session.department)
        if inserted:
            logger.info("Backfilled %d ABSENT record(s) for session %s", inserted, session.session_id)
        return self._sessions.close_session(session.session_id)
