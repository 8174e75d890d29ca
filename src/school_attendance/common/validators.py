from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError


def _as_text(value, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip()


def require_non_empty(value: Optional[str], field_name: str) -> str:
    text = "" if value is None else _as_text(value, field_name)
    if not text:
        raise ValidationError(f"{field_name} is required")
    return text


def optional_text(value: Optional[str], field_name: str = "Value") -> str:
    return "" if value is None else _as_text(value, field_name)


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_positive_int(value, field_name: str, *, maximum: Optional[int] = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number") from None
    if number < 1:
        raise ValidationError(f"{field_name} must be at least 1")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} must be at most {maximum}")
    return number


def require_iso_date(value, field_name: str) -> str:
    """Validate a YYYY-MM-DD string (or date) and return it in canonical form."""

    if hasattr(value, "strftime"):
        return value.strftime("%Y-%m-%d")
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").strftime("%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD form") from None
