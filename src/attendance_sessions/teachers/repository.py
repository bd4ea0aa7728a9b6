from __future__ import annotations

from typing import Optional, Protocol

from .model import Teacher


class TeacherRepository(Protocol):
    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Teacher]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def create_teacher(self, teacher: Teacher) -> bool:
        """Insert the row; False when `username` is already taken."""

        raise NotImplementedError
