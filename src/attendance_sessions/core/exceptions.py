class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class ConflictError(DomainError):
    """Raised when a uniqueness constraint rejects a write."""


class AlreadyMarkedError(ConflictError):
    """Raised when a record already exists for the (session, student) pair."""


class NotActiveError(DomainError):
    """Raised when no open session exists for the student's department."""


class NotFoundError(DomainError):
    """Raised when the addressed entity does not exist."""


class AuthorizationError(DomainError):
    """Raised when the caller is not a known teacher."""


class AuthenticationError(AuthorizationError):
    """Raised when login credentials are invalid."""
