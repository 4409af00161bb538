from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..core.enums import AudienceKind, EventType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class StudentAudience:
    student_id: str
    kind: AudienceKind = field(default=AudienceKind.STUDENT, init=False)


@dataclass(frozen=True)
class ClassAudience:
    class_id: str
    kind: AudienceKind = field(default=AudienceKind.CLASS, init=False)


@dataclass(frozen=True)
class SchoolAudience:
    kind: AudienceKind = field(default=AudienceKind.SCHOOL, init=False)


Audience = Union[StudentAudience, ClassAudience, SchoolAudience]

WHOLE_SCHOOL = SchoolAudience()


def audience_from_fields(student_id: Optional[str] = None, class_id: Optional[str] = None) -> Audience:
    """Build the audience from the raw optional fields (student wins over class)."""
    if student_id:
        return StudentAudience(student_id)
    if class_id:
        return ClassAudience(class_id)
    return WHOLE_SCHOOL


@dataclass(frozen=True)
class AcademicEvent:
    """Domain entity: an academic event, task or holiday.

    ``date`` is the ISO instant string as loaded (``2024-03-15T09:00:00.000Z``
    or a bare day).
    """

    event_id: str
    title: str
    date: str
    type: EventType
    audience: Audience = WHOLE_SCHOOL
    notes: str = ""
    created_by: Optional[str] = None

    @property
    def student_id(self) -> Optional[str]:
        return self.audience.student_id if isinstance(self.audience, StudentAudience) else None

    @property
    def class_id(self) -> Optional[str]:
        return self.audience.class_id if isinstance(self.audience, ClassAudience) else None

    @property
    def is_whole_school(self) -> bool:
        return isinstance(self.audience, SchoolAudience)


def audience_from_kind(kind: str, target_id: Optional[str] = None) -> Audience:
    """Build the audience from an explicit kind (``school``/``class``/``student``)."""
    try:
        k = AudienceKind(kind or AudienceKind.SCHOOL.value)
    except ValueError:
        raise ValidationError("Audience must be school, class or student")
    if k == AudienceKind.SCHOOL:
        return WHOLE_SCHOOL
    if not target_id:
        raise ValidationError(f"Audience {k.value} needs an id")
    if k == AudienceKind.CLASS:
        return ClassAudience(str(target_id))
    return StudentAudience(str(target_id))
