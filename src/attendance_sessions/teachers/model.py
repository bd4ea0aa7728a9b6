from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Teacher:
    """Thực thể miền (domain): Giáo viên.

    `credential` is whatever the configured CredentialVerifier stores (a hash or the cleartext).
    """

    teacher_id: str
    username: str
    credential: str
