"""Role-shaped view models. Screens render these; they hold no logic."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..calendar.grid import CalendarCell
from ..core.constants import WEEKDAY_LABELS
from ..core.enums import Role
from ..core.exceptions import DataIssue
from ..events.model import AcademicEvent
from ..payments.model import Payment
from ..statistics.attendance_stats import (
    AttendanceSummary,
    ClassAttendanceSummary,
    ReportTotals,
    StudentAttendanceReport,
)
from ..statistics.payment_stats import PaymentSummary
from ..students.model import Student


@dataclass(frozen=True)
class CalendarView:
    month: date
    selected: Optional[date]
    cells: tuple[CalendarCell, ...]
    weekday_labels: tuple[str, ...] = WEEKDAY_LABELS


@dataclass(frozen=True)
class ClassReport:
    class_id: str
    rows: tuple[StudentAttendanceReport, ...]
    totals: ReportTotals


@dataclass(frozen=True)
class DashboardViewModel:
    role: Role | str
    viewer_id: str
    generated_at: datetime
    calendar: CalendarView
    events: tuple[AcademicEvent, ...] = ()
    issues: tuple[DataIssue, ...] = ()
    is_empty: bool = False

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)


@dataclass(frozen=True)
class ParentDashboard(DashboardViewModel):
    child: Optional[Student] = None
    weekly_attendance: AttendanceSummary = AttendanceSummary()
    monthly_attendance: AttendanceSummary = AttendanceSummary()
    next_events: tuple[AcademicEvent, ...] = ()
    upcoming_event_count: int = 0
    payment_summary: PaymentSummary = PaymentSummary()
    payments: tuple[Payment, ...] = ()
    payments_due_soon: tuple[Payment, ...] = ()


@dataclass(frozen=True)
class TeacherDashboard(DashboardViewModel):
    class_ids: tuple[str, ...] = ()
    classes_today: tuple[ClassAttendanceSummary, ...] = ()
    class_reports: tuple[ClassReport, ...] = ()
    next_events: tuple[AcademicEvent, ...] = ()
    upcoming_event_count: int = 0


@dataclass(frozen=True)
class OwnerDashboard(DashboardViewModel):
    total_students: int = 0
    average_attendance: int = 0
    attendance_totals: ReportTotals = ReportTotals()
    classes_today: tuple[ClassAttendanceSummary, ...] = ()
    payment_summary: PaymentSummary = PaymentSummary()
    payments_due_count: int = 0
    recent_payments: tuple[Payment, ...] = ()
    upcoming_event_count: int = 0
