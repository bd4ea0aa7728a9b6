from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Sinh viên.

    Immutable after registration; the only mutation is deletion.
    """

    student_id: str
    name: str
    roll_no: str
    department: str

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "roll_no": self.roll_no,
            "department": self.department,
        }
