from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Viewer role used for visibility scoping."""

    PARENT = "parent"
    TEACHER = "teacher"
    SCHOOL_OWNER = "schoolOwner"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the static data."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HOLIDAY = "holiday"
    NO_RECORD = "no-record"

    @property
    def counts_towards_total(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE)


class EventType(str, Enum):
    EVENT = "event"
    TASK = "task"
    HOLIDAY = "holiday"


class PaymentStatus(str, Enum):
    """Payment lifecycle. Only ``PAID`` stops a payment from counting as owed."""

    DUE = "due"
    PAID = "paid"
    OVERDUE = "overdue"


class AudienceKind(str, Enum):
    STUDENT = "student"
    CLASS = "class"
    SCHOOL = "school"


class AttendanceBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
