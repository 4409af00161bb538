from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import (
    add_months,
    as_date,
    day_key,
    days_in_month,
    first_of_month,
    last_of_month,
    sunday_index,
    today_local,
)
from ..core.constants import DAYS_PER_WEEK, DEFAULT_CELL_EVENT_CAP, GRID_CELLS
from ..core.issues import IssueCollector
from ..events.model import AcademicEvent
from .bucketer import bucket_by_day


@dataclass(frozen=True)
class CalendarCell:
    """One day of the month grid.

    ``events`` holds every event on the day; ``display_events`` is the capped
    slice a cell has room for.
    """

    day: int
    date: date
    is_current_month: bool
    is_today: bool
    is_selected: bool
    events: tuple[AcademicEvent, ...] = ()
    event_cap: int = field(default=DEFAULT_CELL_EVENT_CAP, repr=False)

    @property
    def key(self) -> str:
        return day_key(self.date)

    @property
    def event_count(self) -> int:
        return len(self.events)

    @property
    def display_events(self) -> tuple[AcademicEvent, ...]:
        return self.events[: self.event_cap]

    @property
    def hidden_event_count(self) -> int:
        return max(self.event_count - self.event_cap, 0)


def month_bounds(reference: date | datetime) -> tuple[date, date]:
    return first_of_month(reference), last_of_month(reference)


def shift_month(reference: date | datetime, delta: int) -> date:
    """Previous/next month navigation; always lands on day 1."""
    return add_months(reference, delta)


def build_grid(
    reference_month: date | datetime,
    selected_date: Optional[date | datetime] = None,
    *,
    events: Iterable[AcademicEvent] = (),
    today: Optional[date] = None,
    event_cap: int = DEFAULT_CELL_EVENT_CAP,
    issues: Optional[IssueCollector] = None,
) -> list[CalendarCell]:
    """Six Sunday-aligned weeks covering ``reference_month``.

    Leading days come from the previous month, trailing days from the next,
    so the result is always exactly 42 consecutive days. Only ``is_today``
    depends on the clock, and ``today`` can be passed in. Months whose grid
    would leave the representable date range raise ``ValueError``.
    """
    if not isinstance(reference_month, date):
        raise TypeError(f"reference_month must be a date, got {type(reference_month).__name__}")
    if selected_date is not None and not isinstance(selected_date, date):
        raise TypeError(f"selected_date must be a date, got {type(selected_date).__name__}")

    first = first_of_month(reference_month)
    n_days = days_in_month(first.year, first.month)
    leading = sunday_index(first)
    try:
        start = first - timedelta(days=leading)
        days = [start + timedelta(days=offset) for offset in range(GRID_CELLS)]
    except OverflowError:
        raise ValueError(f"no full calendar grid for {first:%Y-%m}: outside the supported date range")

    today_d = as_date(today) if today is not None else today_local()
    selected = as_date(selected_date) if selected_date is not None else None
    by_day = bucket_by_day(events, issues=issues)

    cells: list[CalendarCell] = []
    for offset, d in enumerate(days):
        in_month = leading <= offset < leading + n_days
        cells.append(
            CalendarCell(
                day=d.day,
                date=d,
                is_current_month=in_month,
                is_today=d == today_d,
                is_selected=selected is not None and d == selected,
                events=tuple(by_day.get(day_key(d), ())),
                event_cap=event_cap,
            )
        )
    return cells


def weeks(cells: list[CalendarCell]) -> list[list[CalendarCell]]:
    """Split the flat grid into rows of seven."""
    return [cells[i : i + DAYS_PER_WEEK] for i in range(0, len(cells), DAYS_PER_WEEK)]
