from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Session


class SessionRepository(Protocol):
    def get_by_id(self, session_id: str) -> Optional[Session]:
        raise NotImplementedError

    def find_active(self, department: str) -> Optional[Session]:
        """The ACTIVE session of the department, whether or not its window has elapsed."""

        raise NotImplementedError

    def find_open(self, department: str, now_ms: int) -> Optional[Session]:
        """The ACTIVE session of the department with end_time > now_ms."""

        raise NotImplementedError

    def list_expired(self, now_ms: int) -> Sequence[Session]:
        """ACTIVE sessions with end_time <= now_ms."""

        raise NotImplementedError

    def create_session(self, session: Session) -> bool:
        """Insert an ACTIVE session; False when the department already has one."""

        raise NotImplementedError

    def close_session(self, session_id: str) -> bool:
        """ACTIVE -> INACTIVE. False when the session was not ACTIVE."""

        raise NotImplementedError
