from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.issues import IssueCollector
from ..events.model import AcademicEvent
from ..payments.model import Payment
from ..students.model import Student
from ..users.model import Viewer
from .factory import VisibilityPolicyFactory
from .policies.base import VisibilityPolicy


class RoleVisibilityFilter:
    """Single place where role decides visibility.

    Holds the student roster so student-keyed items can be joined to their
    class for teacher viewers.
    """

    def __init__(self, students: Sequence[Student], *, factory: VisibilityPolicyFactory | None = None):
        self._students_by_id = {s.student_id: s for s in students}
        self._factory = factory or VisibilityPolicyFactory()

    def policy_for(self, viewer: Viewer, issues: Optional[IssueCollector] = None) -> VisibilityPolicy:
        return self._factory.for_viewer(viewer, self._students_by_id, issues)

    def filter_events(
        self, events: Iterable[AcademicEvent], viewer: Viewer, issues: Optional[IssueCollector] = None
    ) -> list[AcademicEvent]:
        return self.policy_for(viewer, issues).filter_events(events)

    def filter_attendance(
        self, records: Iterable[AttendanceRecord], viewer: Viewer, issues: Optional[IssueCollector] = None
    ) -> list[AttendanceRecord]:
        return self.policy_for(viewer, issues).filter_attendance(records)

    def filter_payments(
        self, payments: Iterable[Payment], viewer: Viewer, issues: Optional[IssueCollector] = None
    ) -> list[Payment]:
        return self.policy_for(viewer, issues).filter_payments(payments)

    def filter_students(
        self, students: Iterable[Student], viewer: Viewer, issues: Optional[IssueCollector] = None
    ) -> list[Student]:
        return self.policy_for(viewer, issues).filter_students(students)
