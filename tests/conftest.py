from __future__ import annotations

import dataclasses
import threading
import uuid
from datetime import datetime
from typing import Optional

import pytest

from attendance_sessions.attendance.model import AttendanceRecord, AttendanceReportRow
from attendance_sessions.container import assemble_container
from attendance_sessions.core.enums import AttendanceStatus, AuthMode, SessionStatus
from attendance_sessions.sessions.model import Session
from attendance_sessions.students.model import Student
from attendance_sessions.teachers.credentials import HashedCredentialVerifier
from attendance_sessions.teachers.model import Teacher


class InMemoryStore:
    """Tables plus the uniqueness rules the MySQL schema enforces.

    The lock makes each repository call atomic, like a single-statement transaction.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.students: dict[str, Student] = {}
        self.teachers: dict[str, Teacher] = {}
        self.sessions: dict[str, Session] = {}
        self.records: dict[tuple[str, str], AttendanceRecord] = {}
        self.record_writes = 0


class InMemoryStudents:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._s.students.get(student_id)

    def create_student(self, student: Student) -> bool:
        with self._s.lock:
            if any(s.roll_no == student.roll_no for s in self._s.students.values()):
                return False
            self._s.students[student.student_id] = student
            return True

    def list_all(self):
        return sorted(self._s.students.values(), key=lambda s: (s.department, s.roll_no))

    def delete_by_id(self, student_id: str) -> bool:
        with self._s.lock:
            return self._s.students.pop(student_id, None) is not None


class InMemoryTeachers:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        return self._s.teachers.get(teacher_id)

    def get_by_username(self, username: str) -> Optional[Teacher]:
        return next((t for t in self._s.teachers.values() if t.username == username), None)

    def count(self) -> int:
        return len(self._s.teachers)

    def create_teacher(self, teacher: Teacher) -> bool:
        with self._s.lock:
            if self.get_by_username(teacher.username):
                return False
            self._s.teachers[teacher.teacher_id] = teacher
            return True


class InMemorySessions:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def get_by_id(self, session_id: str) -> Optional[Session]:
        return self._s.sessions.get(session_id)

    def _active(self, department: str) -> Optional[Session]:
        return next(
            (s for s in self._s.sessions.values() if s.status == SessionStatus.ACTIVE and s.department == department),
            None,
        )

    def find_active(self, department: str) -> Optional[Session]:
        return self._active(department)

    def find_open(self, department: str, now_ms: int) -> Optional[Session]:
        s = self._active(department)
        return s if s and s.is_open_at(now_ms) else None

    def list_expired(self, now_ms: int):
        with self._s.lock:
            return sorted(
                (s for s in self._s.sessions.values() if s.is_expired_at(now_ms)),
                key=lambda s: s.end_time,
            )

    def create_session(self, session: Session) -> bool:
        with self._s.lock:
            if self._active(session.department):
                return False
            self._s.sessions[session.session_id] = session
            return True

    def close_session(self, session_id: str) -> bool:
        with self._s.lock:
            s = self._s.sessions.get(session_id)
            if not s or s.status != SessionStatus.ACTIVE:
                return False
            self._s.sessions[session_id] = dataclasses.replace(s, status=SessionStatus.INACTIVE)
            return True


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._s = store

    def create_record(self, *, session_id: str, student_id: str, status: AttendanceStatus) -> bool:
        with self._s.lock:
            key = (session_id, student_id)
            if key in self._s.records:
                return False
            self._s.records[key] = AttendanceRecord(session_id=session_id, student_id=student_id, status=status)
            self._s.record_writes += 1
            return True

    def backfill_absent(self, *, session_id: str, department: str) -> int:
        with self._s.lock:
            inserted = 0
            for st in self._s.students.values():
                if st.department == department and self.create_record(
                    session_id=session_id, student_id=st.student_id, status=AttendanceStatus.ABSENT
                ):
                    inserted += 1
            return inserted

    def get_report_rows(self, *, department: str, start_ms: int, end_ms: int):
        rows = []
        for (session_id, student_id), rec in self._s.records.items():
            session = self._s.sessions.get(session_id)
            student = self._s.students.get(student_id)
            if not session or not student:
                continue
            if session.department != department or not (start_ms <= session.start_time <= end_ms):
                continue
            rows.append(
                AttendanceReportRow(
                    name=student.name,
                    roll_no=student.roll_no,
                    status=rec.status,
                    session_id=session_id,
                    start_time=session.start_time,
                )
            )
        rows.sort(key=lambda r: (r.start_time, r.roll_no))
        return rows


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def repos(store):
    return {
        "students_repo": InMemoryStudents(store),
        "teachers_repo": InMemoryTeachers(store),
        "sessions_repo": InMemorySessions(store),
        "attendance_repo": InMemoryAttendance(store),
    }


@pytest.fixture
def container(repos):
    return assemble_container(**repos, auth_mode=AuthMode.ENFORCED)


@pytest.fixture
def open_container(repos):
    return assemble_container(**repos, auth_mode=AuthMode.OPEN)


@pytest.fixture
def teacher_id(store) -> str:
    teacher = Teacher(
        teacher_id=str(uuid.uuid4()),
        username="mrs.rao",
        credential=HashedCredentialVerifier().hash("s3cret!"),
    )
    store.teachers[teacher.teacher_id] = teacher
    return teacher.teacher_id


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 10, 9, 0, 0)


@pytest.fixture
def now_ms(fixed_now) -> int:
    return int(fixed_now.timestamp() * 1000)


@pytest.fixture
def enroll(container):
    """Register a student and return its id."""

    def _enroll(name: str, roll_no: str, department: str = "CS") -> str:
        return container.student_service.register(name=name, roll_no=roll_no, department=department)

    return _enroll
