"""Group dated items onto calendar days and months.

Every cross-entity day match (grid annotation, attendance-per-day lookups,
"today" computations) goes through the ``YYYY-MM-DD`` day key built here.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from ..common.datetime_utils import as_date, day_key, month_key, parse_iso_instant
from ..core.exceptions import MalformedDateError
from ..core.issues import IssueCollector

T = TypeVar("T")

DateAccessor = Callable[[T], str]


def item_date(item) -> str:
    """Default accessor: the item's ``date`` field."""
    return item.date


def _item_id(item):
    for attr in ("event_id", "record_id", "payment_id", "student_id"):
        if hasattr(item, attr):
            return getattr(item, attr)
    return repr(item)


def parse_item_date(
    item: T,
    *,
    key: DateAccessor = item_date,
    issues: Optional[IssueCollector] = None,
) -> Optional[datetime]:
    """Parse the item's date, reporting ``MalformedDateError`` on failure."""
    raw = key(item)
    try:
        return parse_iso_instant(raw)
    except ValueError:
        if issues is not None:
            issues.report(MalformedDateError(_item_id(item), raw))
        return None


def sort_chronologically(
    items: Iterable[T],
    *,
    key: DateAccessor = item_date,
    issues: Optional[IssueCollector] = None,
) -> list[tuple[datetime, T]]:
    """(timestamp, item) pairs in ascending order, malformed items dropped.

    The sort is stable, so same-instant items keep their input order.
    """
    dated = []
    for item in items:
        when = parse_item_date(item, key=key, issues=issues)
        if when is not None:
            dated.append((when, item))
    dated.sort(key=lambda pair: pair[0])
    return dated


def _bucket(items, bucket_key, *, key, issues) -> dict[str, list]:
    buckets: dict[str, list] = {}
    for when, item in sort_chronologically(items, key=key, issues=issues):
        buckets.setdefault(bucket_key(when), []).append(item)
    return dict(sorted(buckets.items()))


def bucket_by_day(
    items: Iterable[T],
    *,
    key: DateAccessor = item_date,
    issues: Optional[IssueCollector] = None,
) -> dict[str, list[T]]:
    """``{"YYYY-MM-DD": [items...]}`` with keys and bucket contents ascending."""
    return _bucket(items, day_key, key=key, issues=issues)


def bucket_by_month(
    items: Iterable[T],
    *,
    key: DateAccessor = item_date,
    issues: Optional[IssueCollector] = None,
) -> dict[str, list[T]]:
    """``{"YYYY-MM": [items...]}`` with keys and bucket contents ascending."""
    return _bucket(items, month_key, key=key, issues=issues)


def items_on_date(
    items: Iterable[T],
    on: date | datetime,
    *,
    key: DateAccessor = item_date,
    issues: Optional[IssueCollector] = None,
) -> list[T]:
    target = day_key(on)
    return [item for when, item in sort_chronologically(items, key=key, issues=issues) if day_key(when) == target]


def items_in_range(
    items: Iterable[T],
    start: date | datetime,
    end: date | datetime,
    *,
    key: DateAccessor = item_date,
    issues: Optional[IssueCollector] = None,
) -> list[T]:
    """Items whose day falls in ``[start, end]``, both ends inclusive."""
    first, last = as_date(start), as_date(end)
    return [
        item
        for when, item in sort_chronologically(items, key=key, issues=issues)
        if first <= when.date() <= last
    ]


def flatten(buckets: dict[str, Sequence[T]]) -> list[T]:
    out: list[T] = []
    for bucket_items in buckets.values():
        out.extend(bucket_items)
    return out
