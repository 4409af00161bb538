from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..calendar.grid import build_grid, month_bounds
from ..common.datetime_utils import add_months, as_date, first_of_month
from ..core import constants
from ..core.enums import Role
from ..core.exceptions import MissingAssociationError
from ..core.issues import IssueCollector
from ..core.logger import get_logger
from ..events.model import AcademicEvent
from ..statistics.attendance_stats import (
    attendance_summary,
    average_attendance,
    class_attendance_summary,
    classes_attendance_on,
    report_totals,
    student_attendance_report,
)
from ..statistics.event_stats import upcoming_event_count, upcoming_events
from ..statistics.payment_stats import due_within_days, payment_summary, recent_payments
from ..store.repository import EntityStore
from ..users.model import Viewer
from ..visibility.factory import resolve_role
from ..visibility.filter import RoleVisibilityFilter
from .view_models import (
    CalendarView,
    ClassReport,
    DashboardViewModel,
    OwnerDashboard,
    ParentDashboard,
    TeacherDashboard,
)

log = get_logger(__name__)


@dataclass(frozen=True)
class DashboardSettings:
    upcoming_horizon_days: int = constants.DEFAULT_UPCOMING_HORIZON_DAYS
    due_soon_days: int = constants.DEFAULT_DUE_SOON_DAYS
    attendance_window_days: int = constants.DEFAULT_ATTENDANCE_WINDOW_DAYS
    term_months: int = constants.DEFAULT_TERM_MONTHS
    cell_event_cap: int = constants.DEFAULT_CELL_EVENT_CAP
    recent_payments_limit: int = constants.DEFAULT_RECENT_PAYMENTS_LIMIT
    next_events_limit: int = constants.DEFAULT_NEXT_EVENTS_LIMIT


@dataclass(frozen=True)
class _Scope:
    """Role-filtered collections; everything downstream reads only these."""

    students: list
    attendance: list
    events: list
    payments: list


class DashboardComposer:
    """Use case: build the dashboard a viewer sees.

    Order is fixed: visibility filter first, then calendar/bucketing, then
    statistics. Aggregating before filtering would leak other students into
    percentages and totals.
    """

    def __init__(self, settings: DashboardSettings | None = None):
        self._settings = settings or DashboardSettings()

    @property
    def settings(self) -> DashboardSettings:
        return self._settings

    def compose(
        self,
        viewer: Viewer,
        store: EntityStore,
        now: datetime,
        *,
        month: Optional[date] = None,
        selected: Optional[date] = None,
    ) -> DashboardViewModel:
        if not isinstance(now, datetime):
            raise TypeError(f"now must be a datetime, got {type(now).__name__}")

        issues = IssueCollector()
        policy = RoleVisibilityFilter(store.students).policy_for(viewer, issues)
        role = resolve_role(viewer)
        base = dict(viewer_id=viewer.viewer_id, generated_at=now)
        reference = first_of_month(month or now)

        if role is None:
            return DashboardViewModel(
                role=viewer.role,
                calendar=self._calendar(reference, selected, (), now),
                issues=tuple(issues),
                is_empty=True,
                **base,
            )

        missing = self._missing_association(viewer, role, store)
        if missing:
            issues.report(MissingAssociationError(viewer.viewer_id, missing))
            empty_cls = {Role.PARENT: ParentDashboard, Role.TEACHER: TeacherDashboard}[role]
            return empty_cls(
                role=role,
                calendar=self._calendar(reference, selected, (), now),
                issues=tuple(issues),
                is_empty=True,
                **base,
            )

        scope = _Scope(
            students=policy.filter_students(store.students),
            attendance=policy.filter_attendance(store.attendance),
            events=policy.filter_events(store.events),
            payments=policy.filter_payments(store.payments),
        )
        calendar = self._calendar(reference, selected, scope.events, now, issues)
        base.update(calendar=calendar)

        if role == Role.PARENT:
            vm = self._parent(viewer, scope, now, reference, base, issues)
        elif role == Role.TEACHER:
            vm = self._teacher(viewer, scope, now, base, issues)
        else:
            vm = self._owner(scope, now, base, issues)

        log.info("dashboard composed for %s (%s), %d issue(s)", viewer.viewer_id, role.value, len(issues.issues))
        return vm

    def compose_calendar(
        self,
        viewer: Viewer,
        store: EntityStore,
        now: datetime,
        *,
        month: Optional[date] = None,
        selected: Optional[date] = None,
    ) -> tuple[CalendarView, tuple]:
        """Month grid of the viewer's visible events, plus collected issues."""
        issues = IssueCollector()
        policy = RoleVisibilityFilter(store.students).policy_for(viewer, issues)
        events = policy.filter_events(store.events)
        view = self._calendar(first_of_month(month or now), selected, events, now, issues)
        return view, tuple(issues)

    # --- shared pieces ---------------------------------------------------

    def _calendar(
        self,
        reference: date,
        selected: Optional[date],
        events: Sequence[AcademicEvent],
        now: datetime,
        issues: Optional[IssueCollector] = None,
    ) -> CalendarView:
        cells = build_grid(
            reference,
            selected,
            events=events,
            today=now.date(),
            event_cap=self._settings.cell_event_cap,
            issues=issues,
        )
        return CalendarView(month=reference, selected=as_date(selected) if selected else None, cells=tuple(cells))

    @staticmethod
    def _missing_association(viewer: Viewer, role: Role, store: EntityStore) -> Optional[str]:
        if role == Role.PARENT:
            if not viewer.child_id:
                return "parent has no child linked"
            if store.get_student(viewer.child_id) is None:
                return f"linked child {viewer.child_id} not found"
        if role == Role.TEACHER and not viewer.owned_class_ids:
            return "teacher has no classes"
        return None

    def _window_start(self, today: date) -> date:
        return today - timedelta(days=max(self._settings.attendance_window_days - 1, 0))

    # --- per role --------------------------------------------------------

    def _parent(self, viewer, scope: _Scope, now, reference, base, issues) -> ParentDashboard:
        s = self._settings
        today = now.date()
        month_start, month_end = month_bounds(reference)
        return ParentDashboard(
            role=Role.PARENT,
            events=tuple(upcoming_events(scope.events, today, issues=issues)),
            child=scope.students[0] if scope.students else None,
            weekly_attendance=attendance_summary(
                scope.attendance, viewer.child_id, self._window_start(today), today, issues=issues
            ),
            monthly_attendance=attendance_summary(
                scope.attendance, viewer.child_id, month_start, month_end, issues=issues
            ),
            next_events=tuple(upcoming_events(scope.events, today, limit=s.next_events_limit, issues=issues)),
            upcoming_event_count=upcoming_event_count(scope.events, s.upcoming_horizon_days, today, issues=issues),
            payment_summary=payment_summary(scope.payments),
            payments=tuple(recent_payments(scope.payments, len(scope.payments), issues=issues)),
            payments_due_soon=tuple(due_within_days(scope.payments, s.due_soon_days, today, issues=issues)),
            issues=tuple(issues),
            **base,
        )

    def _teacher(self, viewer, scope: _Scope, now, base, issues) -> TeacherDashboard:
        s = self._settings
        today = now.date()
        class_ids = tuple(sorted(viewer.owned_class_ids))
        reports = []
        for cid in class_ids:
            members = [st for st in scope.students if st.class_id == cid]
            rows = student_attendance_report(scope.attendance, members, self._window_start(today), today, issues=issues)
            reports.append(ClassReport(class_id=cid, rows=tuple(rows), totals=report_totals(rows)))

        return TeacherDashboard(
            role=Role.TEACHER,
            events=tuple(upcoming_events(scope.events, today, issues=issues)),
            class_ids=class_ids,
            classes_today=tuple(
                class_attendance_summary(scope.attendance, scope.students, cid, today, issues=issues)
                for cid in class_ids
            ),
            class_reports=tuple(reports),
            next_events=tuple(upcoming_events(scope.events, today, limit=s.next_events_limit, issues=issues)),
            upcoming_event_count=upcoming_event_count(scope.events, s.upcoming_horizon_days, today, issues=issues),
            issues=tuple(issues),
            **base,
        )

    def _owner(self, scope: _Scope, now, base, issues) -> OwnerDashboard:
        s = self._settings
        today = now.date()
        term_start = add_months(today, -s.term_months)
        summary = payment_summary(scope.payments)
        return OwnerDashboard(
            role=Role.SCHOOL_OWNER,
            events=tuple(upcoming_events(scope.events, today, issues=issues)),
            total_students=len(scope.students),
            average_attendance=average_attendance(scope.attendance, term_start, today, issues=issues),
            attendance_totals=report_totals(
                student_attendance_report(scope.attendance, scope.students, term_start, today, issues=issues)
            ),
            classes_today=tuple(classes_attendance_on(scope.attendance, scope.students, today, issues=issues)),
            payment_summary=summary,
            payments_due_count=summary.due_count + summary.overdue_count,
            recent_payments=tuple(recent_payments(scope.payments, s.recent_payments_limit, issues=issues)),
            upcoming_event_count=upcoming_event_count(scope.events, s.upcoming_horizon_days, today, issues=issues),
            issues=tuple(issues),
            **base,
        )
