from __future__ import annotations

import hmac
from typing import Protocol, Union

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import CredentialScheme


class CredentialVerifier(Protocol):
    """How teacher credentials are stored and compared."""

    def hash(self, password: str) -> str:
        raise NotImplementedError

    def verify(self, stored: str, candidate: str) -> bool:
        raise NotImplementedError


class HashedCredentialVerifier:
    def hash(self, password: str) -> str:
        return generate_password_hash(password)

    def verify(self, stored: str, candidate: str) -> bool:
        try:
            return check_password_hash(stored, candidate)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            return False


class PlaintextCredentialVerifier:
    """Cleartext storage, kept for deployments that seeded teachers by hand."""

    def hash(self, password: str) -> str:
        return password

    def verify(self, stored: str, candidate: str) -> bool:
        return hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))


def build_verifier(scheme: Union[str, CredentialScheme]) -> CredentialVerifier:
    scheme = CredentialScheme(str(getattr(scheme, "value", scheme)).lower())
    if scheme == CredentialScheme.PLAINTEXT:
        return PlaintextCredentialVerifier()
    return HashedCredentialVerifier()
