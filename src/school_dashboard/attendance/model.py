from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for a student on a calendar day.

    ``date`` is kept as the ISO ``YYYY-MM-DD`` string it was loaded with and is
    parsed where it is used, so a malformed value can be reported per record.
    """

    record_id: str
    student_id: str
    date: str
    status: AttendanceStatus
