from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...attendance.model import AttendanceRecord
from ...events.model import AcademicEvent
from ...payments.model import Payment
from ...students.model import Student


class VisibilityPolicy(ABC):
    """Strategy Pattern: decide what one viewer may see.

    Output of every ``filter_*`` method is a subset of its input in input
    order, and filtering twice gives the same result as filtering once.
    """

    @abstractmethod
    def sees_student(self, student_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def sees_event(self, event: AcademicEvent) -> bool:
        raise NotImplementedError

    def filter_events(self, events: Iterable[AcademicEvent]) -> list[AcademicEvent]:
        return [e for e in events if self.sees_event(e)]

    def filter_attendance(self, records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
        return [r for r in records if self.sees_student(r.student_id)]

    def filter_payments(self, payments: Iterable[Payment]) -> list[Payment]:
        return [p for p in payments if self.sees_student(p.student_id)]

    def filter_students(self, students: Iterable[Student]) -> list[Student]:
        return [s for s in students if self.sees_student(s.student_id)]
