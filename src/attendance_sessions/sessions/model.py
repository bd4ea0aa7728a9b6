from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import SessionStatus


@dataclass(frozen=True)
class Session:
    """Thực thể miền (domain): Phiên điểm danh theo khoa.

    `start_time`/`end_time` are epoch milliseconds. The window is open while
    status is ACTIVE and now < end_time.
    """

    session_id: str
    department: str
    start_time: int
    end_time: int
    status: SessionStatus

    def is_open_at(self, now_ms: int) -> bool:
        return self.status == SessionStatus.ACTIVE and self.end_time > now_ms

    def is_expired_at(self, now_ms: int) -> bool:
        return self.status == SessionStatus.ACTIVE and self.end_time <= now_ms
