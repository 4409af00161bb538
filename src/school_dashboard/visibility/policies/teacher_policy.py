from __future__ import annotations

from typing import AbstractSet, Mapping

from ...events.model import AcademicEvent, ClassAudience, StudentAudience
from ...students.model import Student
from .base import VisibilityPolicy


class TeacherPolicy(VisibilityPolicy):
    """Items of owned classes plus whole-school events.

    Student-keyed items (attendance, payments, single-student events) are
    joined to the student to resolve class membership.
    """

    def __init__(self, owned_class_ids: AbstractSet[str], students_by_id: Mapping[str, Student]):
        self.owned_class_ids = frozenset(owned_class_ids)
        self._students_by_id = students_by_id

    def sees_class(self, class_id: str) -> bool:
        return class_id in self.owned_class_ids

    def sees_student(self, student_id: str) -> bool:
        student = self._students_by_id.get(student_id)
        return student is not None and self.sees_class(student.class_id)

    def sees_event(self, event: AcademicEvent) -> bool:
        audience = event.audience
        if isinstance(audience, ClassAudience):
            return self.sees_class(audience.class_id)
        if isinstance(audience, StudentAudience):
            return self.sees_student(audience.student_id)
        return True
