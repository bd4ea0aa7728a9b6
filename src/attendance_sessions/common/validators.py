from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    # JSON numbers are accepted for identifier-like fields such as roll_no (`101`).
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)

    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip()


def require_secret(value: Any, field_name: str) -> str:
    """Reject a missing or blank secret, but hand it back exactly as given."""

    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value


def require_positive_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; `true` in a JSON body is not a duration.
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")

    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field_name} must be a whole number")
        value = int(value)

    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number") from None

    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number
