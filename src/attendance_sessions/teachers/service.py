from __future__ import annotations

import logging
import uuid

from ..common.validators import require_non_empty, require_secret
from ..core.exceptions import AuthenticationError, ValidationError
from .credentials import CredentialVerifier
from .model import Teacher
from .repository import TeacherRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate teacher (login)."""

    def __init__(self, teachers: TeacherRepository, verifier: CredentialVerifier):
        self._teachers = teachers
        self._verifier = verifier

    def login(self, username: str, password: str) -> str:
        try:
            username = require_non_empty(username, "username")
            password = require_secret(password, "password")
        except ValidationError:
            raise AuthenticationError("Invalid credentials") from None

        teacher = self._teachers.get_by_username(username)
        if not teacher or not self._verifier.verify(teacher.credential, password):
            logger.info("Failed login for username=%s", username)
            raise AuthenticationError("Invalid credentials")

        return teacher.teacher_id


class TeacherService:
    """Use case: seed the default teacher account."""

    def __init__(self, teachers: TeacherRepository, verifier: CredentialVerifier):
        self._teachers = teachers
        self._verifier = verifier

    def ensure_default_teacher(self, username: str, password: str) -> bool:
        """Create the seed teacher if the table is empty. Returns True if a row was written."""

        if self._teachers.count() > 0:
            return False

        teacher = Teacher(
            teacher_id=str(uuid.uuid4()),
            username=require_non_empty(username, "username"),
            credential=self._verifier.hash(require_secret(password, "password")),
        )
        # Another process may seed between count() and insert; the unique username settles it.
        created = self._teachers.create_teacher(teacher)
        if created:
            logger.info("Seeded default teacher '%s'", teacher.username)
        return created
