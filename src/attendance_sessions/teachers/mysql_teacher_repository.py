from __future__ import annotations

from typing import Optional

from mysql.connector.errors import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import Teacher
from .repository import TeacherRepository


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT teacher_id, username, credential FROM teachers WHERE {column}=%s",
                (value,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Teacher(
                teacher_id=row["teacher_id"],
                username=row["username"],
                credential=row["credential"],
            )

    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        return self._get_one("teacher_id", teacher_id)

    def get_by_username(self, username: str) -> Optional[Teacher]:
        return self._get_one("username", username)

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS c FROM teachers")
            row = fetchone(cur)
            return int(row["c"]) if row else 0

    def create_teacher(self, teacher: Teacher) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO teachers(teacher_id, username, credential) VALUES(%s,%s,%s)",
                    (teacher.teacher_id, teacher.username, teacher.credential),
                )
        except IntegrityError as exc:
            if is_duplicate_key(exc):
                return False
            raise
        return True
