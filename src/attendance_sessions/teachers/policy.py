from __future__ import annotations

import logging
from typing import Optional, Union

from ..core.enums import AuthMode
from ..core.exceptions import AuthorizationError
from .model import Teacher
from .repository import TeacherRepository

logger = logging.getLogger(__name__)


class AuthorizationPolicy:
    """Decides whether a caller may perform a teacher action.

    ENFORCED: `teacher_id` must name an existing teacher.
    OPEN: any caller is accepted; a supplied id is still resolved when possible.
    """

    def __init__(self, mode: Union[str, AuthMode], teachers: TeacherRepository):
        self.mode = AuthMode(str(getattr(mode, "value", mode)).lower())
        self._teachers = teachers

    @property
    def enforced(self) -> bool:
        return self.mode == AuthMode.ENFORCED

    def authorize(self, teacher_id: Optional[str]) -> Optional[Teacher]:
        teacher = self._teachers.get_by_id(str(teacher_id)) if teacher_id else None

        if self.enforced and teacher is None:
            if teacher_id:
                logger.warning("Rejected teacher action for unknown teacher_id=%s", teacher_id)
            raise AuthorizationError("Unauthorized")
        return teacher
