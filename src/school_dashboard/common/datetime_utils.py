from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from ..core.constants import DAY_KEY_FORMAT, MONTH_KEY_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, or the day part of an ISO instant.

    Raises ``ValueError`` for anything that is not ISO-8601.
    """
    return parse_iso_instant(value).date()


def parse_iso_instant(value: str) -> datetime:
    """Parse an ISO-8601 day or instant into a naive local ``datetime``.

    A trailing ``Z`` is accepted. Any offset is dropped without conversion:
    the wall-clock value as written is the value compared.
    """
    if not isinstance(value, str):
        raise ValueError(f"expected ISO string, got {type(value).__name__}")
    v = value.strip()
    if len(v) < 10 or v[4] != "-" or v[7] != "-":
        raise ValueError(f"not an ISO-8601 date: {value!r}")
    if v.endswith(("Z", "z")):
        v = v[:-1] + "+00:00"
    parsed = datetime.fromisoformat(v)
    if parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None)
    return parsed


def as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, datetime.min.time())


def as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"expected date or datetime, got {type(value).__name__}")


def day_key(value: date | datetime) -> str:
    return as_date(value).strftime(DAY_KEY_FORMAT)


def month_key(value: date | datetime) -> str:
    return as_date(value).strftime(MONTH_KEY_FORMAT)


def parse_month_key(value: str) -> date:
    """``YYYY-MM`` -> first day of that month."""
    return datetime.strptime(value, MONTH_KEY_FORMAT).date()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_of_month(value: date | datetime) -> date:
    d = as_date(value)
    return d.replace(day=1)


def add_months(value: date | datetime, delta: int) -> date:
    """Shift to the first day of the month ``delta`` months away."""
    d = as_date(value)
    index = d.year * 12 + (d.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def last_of_month(value: date | datetime) -> date:
    d = as_date(value)
    return d.replace(day=days_in_month(d.year, d.month))


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if end is earlier)."""
    return (as_date(end) - as_date(start)).days


def sunday_index(value: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def date_range(start: date, end: date):
    """Yield each day from ``start`` to ``end`` inclusive."""
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)
