from __future__ import annotations

from typing import Optional

from ..core.constants import NAME_MAX_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if value is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_name(value: str, field_name: str) -> str:
    """Names of courses, events and locations: 1-200 characters."""
    require_non_empty(value, field_name)
    return require_max_length(value, field_name, NAME_MAX_LENGTH)


def require_email(value: Optional[str], field_name: str = "Email") -> Optional[str]:
    if value is None:
        return None
    head, sep, tail = value.partition("@")
    if not sep or not head or not tail:
        raise ValidationError(f"{field_name} is not a valid address")
    return value


def require_int_id(value, field_name: str) -> int:
    try:
        ident = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}")
    if ident <= 0:
        raise ValidationError(f"Invalid {field_name}")
    return ident
