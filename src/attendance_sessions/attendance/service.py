from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import now_millis
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyMarkedError, NotActiveError, ValidationError
from ..sessions.repository import SessionRepository
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class MarkingService:
    """Use case: a student marks themselves PRESENT in their department's open session.

    There is no read-then-write check on the record: the insert itself is the
    check, so a mark racing the sweep's ABSENT backfill resolves in the store.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        sessions: SessionRepository,
    ):
        self._attendance = attendance
        self._students = students
        self._sessions = sessions

    def mark(self, student_id: str, *, now_ms: Optional[int] = None) -> AttendanceRecord:
        try:
            student_id = require_non_empty(student_id, "student_id")
        except ValidationError:
            raise ValidationError("Student ID missing") from None
        now_ms = now_millis() if now_ms is None else int(now_ms)

        student = self._students.get_by_id(student_id)
        session = self._sessions.find_open(student.department, now_ms) if student else None
        if not session:
            raise NotActiveError("Attendance closed or invalid")

        # Prior PRESENT and prior sweep ABSENT are reported the same way.
        if not self._attendance.create_record(
            session_id=session.session_id,
            student_id=student_id,
            status=AttendanceStatus.PRESENT,
        ):
            raise AlreadyMarkedError("Already marked")

        logger.debug("Student %s marked PRESENT in session %s", student_id, session.session_id)
        return AttendanceRecord(session_id=session.session_id, student_id=student_id, status=AttendanceStatus.PRESENT)
