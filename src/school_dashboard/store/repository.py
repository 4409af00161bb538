from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..attendance.model import AttendanceRecord
from ..events.model import AcademicEvent
from ..payments.model import Payment
from ..students.model import Student
from ..users.model import User


class EntityStore(Protocol):
    """Read interface over the raw entity collections.

    Note (DIP): the composer and controllers depend on this interface, not on
    the in-memory implementation.
    """

    @property
    def students(self) -> Sequence[Student]:
        raise NotImplementedError

    @property
    def attendance(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    @property
    def events(self) -> Sequence[AcademicEvent]:
        raise NotImplementedError

    @property
    def payments(self) -> Sequence[Payment]:
        raise NotImplementedError

    @property
    def users(self) -> Sequence[User]:
        raise NotImplementedError

    def get_student(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def get_user(self, user_id: str) -> Optional[User]:
        raise NotImplementedError
