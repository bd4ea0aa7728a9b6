from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Student
from .repository import StudentRepository


def _to_student(row: dict) -> Student:
    return Student(
        student_id=row["student_id"],
        name=row["name"],
        roll_no=row["roll_no"],
        department=row["department"],
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, roll_no, department
                FROM students
                WHERE student_id=%s
                """,
                (student_id,),
            )
            row = fetchone(cur)
            return _to_student(row) if row else None

    def create_student(self, student: Student) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO students(student_id, name, roll_no, department)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (student.student_id, student.name, student.roll_no, student.department),
                )
        except IntegrityError as exc:
            if is_duplicate_key(exc):
                return False
            raise
        return True

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, roll_no, department
                FROM students
                ORDER BY department ASC, roll_no ASC
                """
            )
            return [_to_student(r) for r in fetchall(cur)]

    def delete_by_id(self, student_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (student_id,))
            return cur.rowcount > 0
