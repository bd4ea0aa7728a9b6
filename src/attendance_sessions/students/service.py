from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import ConflictError, NotFoundError
from ..teachers.policy import AuthorizationPolicy
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: register students; list/delete them (teacher actions)."""

    def __init__(self, students: StudentRepository, policy: AuthorizationPolicy):
        self._students = students
        self._policy = policy

    def register(self, *, name: str, roll_no: str, department: str) -> str:
        student = Student(
            student_id=str(uuid.uuid4()),
            name=require_non_empty(name, "name"),
            roll_no=require_non_empty(roll_no, "roll_no"),
            department=require_non_empty(department, "department"),
        )

        if not self._students.create_student(student):
            raise ConflictError("Roll number already exists")

        logger.info("Registered student %s (roll_no=%s, department=%s)", student.student_id, student.roll_no, student.department)
        return student.student_id

    def list_students(self, *, teacher_id: Optional[str] = None) -> Sequence[Student]:
        self._policy.authorize(teacher_id)
        return self._students.list_all()

    def delete_student(self, student_id: str, *, teacher_id: Optional[str] = None) -> None:
        """Delete the student row only; attendance records stay and drop out of reports."""

        self._policy.authorize(teacher_id)
        student_id = require_non_empty(student_id, "student_id")

        if not self._students.delete_by_id(student_id):
            raise NotFoundError("Student not found")
        logger.info("Deleted student %s", student_id)
