from __future__ import annotations

from datetime import date

from ..core.exceptions import InvalidDateRangeError, ValidationError


def require_positive(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a positive integer") from None
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number


def require_date_range(start: date, end: date) -> tuple[date, date]:
    if end < start:
        raise InvalidDateRangeError(start, end)
    return start, end
