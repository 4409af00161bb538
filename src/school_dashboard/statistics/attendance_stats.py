"""Attendance statistics over already role-filtered records.

At most one record per (student, day) is expected. When the data breaks that,
the first record met in input order wins; nothing is merged or averaged.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from fractions import Fraction
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..calendar.bucketer import items_in_range, items_on_date, parse_item_date
from ..common.datetime_utils import as_date, day_key
from ..core.enums import AttendanceBand, AttendanceStatus
from ..core.issues import IssueCollector
from ..core.logger import get_logger
from ..students.model import Student
from .percent import attendance_band, mean_of_percentages, mean_percentage, percentage

log = get_logger(__name__)


@dataclass(frozen=True)
class AttendanceSummary:
    present: int = 0
    absent: int = 0
    late: int = 0
    total: int = 0
    percentage: int = 0

    @property
    def band(self) -> AttendanceBand:
        return attendance_band(self.percentage)


@dataclass(frozen=True)
class StudentAttendanceRow:
    student: Student
    status: AttendanceStatus
    record: Optional[AttendanceRecord] = None


@dataclass(frozen=True)
class ClassAttendanceSummary:
    """One class on one day. ``total`` is the class size."""

    class_id: str
    on_date: date
    rows: tuple[StudentAttendanceRow, ...]
    present: int
    absent: int
    late: int
    not_marked: int
    total: int
    percentage: int


@dataclass(frozen=True)
class StudentAttendanceReport:
    student: Student
    summary: AttendanceSummary


@dataclass(frozen=True)
class ReportTotals:
    students: int = 0
    average_percentage: int = 0
    present: int = 0
    absent: int = 0
    late: int = 0
    excellent_count: int = 0
    poor_count: int = 0


def first_per_day(
    records: Iterable[AttendanceRecord], *, issues: Optional[IssueCollector] = None
) -> list[AttendanceRecord]:
    """Drop later duplicates of the same (student, day).

    Days are compared on the parsed ``YYYY-MM-DD`` key, so the same day
    written two ways still counts once. Unparseable records are dropped.
    """
    seen: set[tuple[str, str]] = set()
    out = []
    for r in records:
        when = parse_item_date(r, issues=issues)
        if when is None:
            continue
        k = (r.student_id, day_key(when))
        if k in seen:
            log.debug("duplicate attendance for %s on %s ignored (%s)", r.student_id, k[1], r.record_id)
            continue
        seen.add(k)
        out.append(r)
    return out


def summarize(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    """Count statuses; holiday and no-record marks stay out of the total."""
    present = absent = late = 0
    for r in records:
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.ABSENT:
            absent += 1
        elif r.status == AttendanceStatus.LATE:
            late += 1
    total = present + absent + late
    return AttendanceSummary(
        present=present,
        absent=absent,
        late=late,
        total=total,
        percentage=percentage(present, total),
    )


def attendance_summary(
    records: Iterable[AttendanceRecord],
    student_id: Optional[str],
    start: date | datetime,
    end: date | datetime,
    *,
    issues: Optional[IssueCollector] = None,
) -> AttendanceSummary:
    """Summary for one student over ``[start, end]`` (``None`` = every student)."""
    in_range = items_in_range(records, start, end, issues=issues)
    if student_id is not None:
        in_range = [r for r in in_range if r.student_id == student_id]
    return summarize(first_per_day(in_range))


def class_attendance_summary(
    records: Iterable[AttendanceRecord],
    students: Iterable[Student],
    class_id: str,
    on_date: date | datetime,
    *,
    issues: Optional[IssueCollector] = None,
) -> ClassAttendanceSummary:
    day = as_date(on_date)
    by_student: dict[str, AttendanceRecord] = {}
    for r in first_per_day(items_on_date(records, day, issues=issues)):
        by_student.setdefault(r.student_id, r)

    rows = []
    for s in students:
        if s.class_id != class_id:
            continue
        rec = by_student.get(s.student_id)
        rows.append(StudentAttendanceRow(student=s, status=rec.status if rec else AttendanceStatus.NO_RECORD, record=rec))

    present = sum(1 for r in rows if r.status == AttendanceStatus.PRESENT)
    absent = sum(1 for r in rows if r.status == AttendanceStatus.ABSENT)
    late = sum(1 for r in rows if r.status == AttendanceStatus.LATE)
    return ClassAttendanceSummary(
        class_id=class_id,
        on_date=day,
        rows=tuple(rows),
        present=present,
        absent=absent,
        late=late,
        not_marked=sum(1 for r in rows if r.record is None),
        total=len(rows),
        percentage=percentage(present, len(rows)),
    )


def classes_attendance_on(
    records: Sequence[AttendanceRecord],
    students: Sequence[Student],
    on_date: date | datetime,
    *,
    issues: Optional[IssueCollector] = None,
) -> list[ClassAttendanceSummary]:
    """Per-class summaries for every class that has students, ordered by class id."""
    class_ids = sorted({s.class_id for s in students})
    # Parse the day's records once; malformed dates are reported here only.
    todays = items_on_date(records, on_date, issues=issues)
    return [class_attendance_summary(todays, students, cid, on_date) for cid in class_ids]


def student_attendance_report(
    records: Iterable[AttendanceRecord],
    students: Iterable[Student],
    start: date | datetime,
    end: date | datetime,
    *,
    issues: Optional[IssueCollector] = None,
) -> list[StudentAttendanceReport]:
    in_range = first_per_day(items_in_range(records, start, end, issues=issues))
    by_student: dict[str, list[AttendanceRecord]] = {}
    for r in in_range:
        by_student.setdefault(r.student_id, []).append(r)
    return [StudentAttendanceReport(student=s, summary=summarize(by_student.get(s.student_id, ()))) for s in students]


def report_totals(rows: Sequence[StudentAttendanceReport]) -> ReportTotals:
    return ReportTotals(
        students=len(rows),
        average_percentage=mean_of_percentages(r.summary.percentage for r in rows),
        present=sum(r.summary.present for r in rows),
        absent=sum(r.summary.absent for r in rows),
        late=sum(r.summary.late for r in rows),
        excellent_count=sum(1 for r in rows if r.summary.band == AttendanceBand.EXCELLENT),
        poor_count=sum(1 for r in rows if r.summary.band == AttendanceBand.POOR),
    )


def average_attendance(
    records: Iterable[AttendanceRecord],
    start: date | datetime,
    end: date | datetime,
    *,
    issues: Optional[IssueCollector] = None,
) -> int:
    """Mean of per-student present ratios; students without marks are skipped."""
    counts: dict[str, list[int]] = {}
    for r in first_per_day(items_in_range(records, start, end, issues=issues)):
        if not r.status.counts_towards_total:
            continue
        c = counts.setdefault(r.student_id, [0, 0])
        c[1] += 1
        if r.status == AttendanceStatus.PRESENT:
            c[0] += 1
    return mean_percentage(Fraction(p, t) for p, t in counts.values())
