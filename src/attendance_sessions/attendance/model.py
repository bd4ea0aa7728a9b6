from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi điểm danh.

    Identity is the (session_id, student_id) pair; a record is never overwritten.
    """

    session_id: str
    student_id: str
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model phục vụ báo cáo/xuất file (tối ưu cho truy vấn)."""

    name: str
    roll_no: str
    status: AttendanceStatus
    session_id: str
    start_time: int

    def to_dict(self) -> dict:
        return {"name": self.name, "roll_no": self.roll_no, "status": self.status.value}
