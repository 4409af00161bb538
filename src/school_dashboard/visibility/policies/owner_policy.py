from __future__ import annotations

from ...events.model import AcademicEvent
from .base import VisibilityPolicy


class SchoolOwnerPolicy(VisibilityPolicy):
    """School owner sees everything."""

    def sees_student(self, student_id: str) -> bool:
        return True

    def sees_event(self, event: AcademicEvent) -> bool:
        return True


class DenyAllPolicy(VisibilityPolicy):
    """Unrecognized role: fail closed."""

    def sees_student(self, student_id: str) -> bool:
        return False

    def sees_event(self, event: AcademicEvent) -> bool:
        return False
