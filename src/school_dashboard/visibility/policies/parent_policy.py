from __future__ import annotations

from typing import Optional

from ...events.model import AcademicEvent, StudentAudience
from .base import VisibilityPolicy


class ParentPolicy(VisibilityPolicy):
    """Own child's items plus whole-school events."""

    def __init__(self, child_id: Optional[str]):
        self.child_id = child_id

    def sees_student(self, student_id: str) -> bool:
        return self.child_id is not None and student_id == self.child_id

    def sees_event(self, event: AcademicEvent) -> bool:
        if event.is_whole_school:
            return True
        return isinstance(event.audience, StudentAudience) and self.sees_student(event.audience.student_id)
