from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..calendar.bucketer import sort_chronologically
from ..common.datetime_utils import as_date, days_between
from ..core.enums import EventType
from ..core.issues import IssueCollector
from ..events.model import AcademicEvent


def upcoming_events(
    events: Iterable[AcademicEvent],
    from_date: date | datetime,
    horizon_days: Optional[int] = None,
    *,
    limit: Optional[int] = None,
    issues: Optional[IssueCollector] = None,
) -> list[AcademicEvent]:
    """Events on or after ``from_date`` (day granularity), soonest first.

    With ``horizon_days`` the window is ``[from_date, from_date + horizon_days]``,
    both ends inclusive.
    """
    if horizon_days is not None and horizon_days < 0:
        raise ValueError("horizon_days must be >= 0")
    start = as_date(from_date)
    out = []
    for when, e in sort_chronologically(events, issues=issues):
        offset = days_between(start, when)
        if offset < 0:
            continue
        if horizon_days is not None and offset > horizon_days:
            break
        out.append(e)
        if limit is not None and len(out) >= limit:
            break
    return out


def upcoming_event_count(
    events: Iterable[AcademicEvent],
    horizon_days: int,
    from_date: date | datetime,
    *,
    issues: Optional[IssueCollector] = None,
) -> int:
    return len(upcoming_events(events, from_date, horizon_days, issues=issues))


def count_by_type(events: Iterable[AcademicEvent]) -> dict[str, int]:
    counts = {t.value: 0 for t in EventType}
    for e in events:
        counts[e.type.value] = counts.get(e.type.value, 0) + 1
    return counts
