from __future__ import annotations

from enum import Enum


class SessionStatus(str, Enum):
    """Vòng đời phiên điểm danh: ACTIVE -> INACTIVE (kết thúc, không mở lại)."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh lưu trong CSDL."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class AuthMode(str, Enum):
    """Chế độ phân quyền cho các thao tác của giáo viên."""

    ENFORCED = "enforced"
    OPEN = "open"


class CredentialScheme(str, Enum):
    HASHED = "hashed"
    PLAINTEXT = "plaintext"
