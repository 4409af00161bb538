from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_instant


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be a whole number")
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number


def require_iso_date(value: str, field_name: str) -> str:
    """Validate an ISO day/instant string and return it stripped."""
    value = require_non_empty(value, field_name)
    try:
        parse_iso_instant(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO-8601 date")
    return value


def require_choice(value, enum_cls, field_name: str):
    """Coerce ``value`` into a member of ``enum_cls``."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
