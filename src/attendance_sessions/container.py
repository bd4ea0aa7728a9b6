from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import MarkingService
from .core.enums import AuthMode, CredentialScheme
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionLifecycleService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .teachers.credentials import CredentialVerifier, build_verifier
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.policy import AuthorizationPolicy
from .teachers.repository import TeacherRepository
from .teachers.service import AuthService, TeacherService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    teachers_repo: TeacherRepository
    sessions_repo: SessionRepository
    attendance_repo: AttendanceRepository

    policy: AuthorizationPolicy
    verifier: CredentialVerifier

    student_service: StudentService
    auth_service: AuthService
    teacher_service: TeacherService
    lifecycle_service: SessionLifecycleService
    marking_service: MarkingService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def assemble_container(
    *,
    students_repo: StudentRepository,
    teachers_repo: TeacherRepository,
    sessions_repo: SessionRepository,
    attendance_repo: AttendanceRepository,
    auth_mode: Union[str, AuthMode] = AuthMode.ENFORCED,
    credential_scheme: Union[str, CredentialScheme] = CredentialScheme.HASHED,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any set of repositories (MySQL in production, in-memory in tests)."""

    policy = AuthorizationPolicy(auth_mode, teachers_repo)
    verifier = build_verifier(credential_scheme)

    return Container(
        students_repo=students_repo,
        teachers_repo=teachers_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        policy=policy,
        verifier=verifier,
        student_service=StudentService(students_repo, policy),
        auth_service=AuthService(teachers_repo, verifier),
        teacher_service=TeacherService(teachers_repo, verifier),
        lifecycle_service=SessionLifecycleService(sessions_repo, attendance_repo, policy),
        marking_service=MarkingService(attendance_repo, students_repo, sessions_repo),
        report_service=ReportService(attendance_repo, policy),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    auth_mode: Union[str, AuthMode] = AuthMode.ENFORCED,
    credential_scheme: Union[str, CredentialScheme] = CredentialScheme.HASHED,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble_container(
        students_repo=MySQLStudentRepository(conn),
        teachers_repo=MySQLTeacherRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        auth_mode=auth_mode,
        credential_scheme=credential_scheme,
        conn=conn,
    )
