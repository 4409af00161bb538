from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import today_local
from ..common.validators import require_choice, require_iso_date, require_non_empty, require_positive_int
from ..core.enums import EventType, PaymentStatus
from ..core.exceptions import ValidationError
from ..core.logger import get_logger
from ..events.model import AcademicEvent, Audience
from ..payments.model import Payment
from ..students.model import Student
from ..users.model import User

log = get_logger(__name__)


class InMemoryEntityStore:
    """Entity collections loaded once from static data.

    Mutations (users, events, payment status) are synchronous, last-write-wins
    and live only as long as the process.
    """

    def __init__(
        self,
        *,
        students: Iterable[Student] = (),
        attendance: Iterable[AttendanceRecord] = (),
        events: Iterable[AcademicEvent] = (),
        payments: Iterable[Payment] = (),
        users: Iterable[User] = (),
    ):
        self._students = list(students)
        self._attendance = list(attendance)
        self._events = list(events)
        self._payments = list(payments)
        self._users = list(users)
        self._students_by_id = {s.student_id: s for s in self._students}

    @property
    def students(self) -> Sequence[Student]:
        return tuple(self._students)

    @property
    def attendance(self) -> Sequence[AttendanceRecord]:
        return tuple(self._attendance)

    @property
    def events(self) -> Sequence[AcademicEvent]:
        return tuple(self._events)

    @property
    def payments(self) -> Sequence[Payment]:
        return tuple(self._payments)

    @property
    def users(self) -> Sequence[User]:
        return tuple(self._users)

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students_by_id.get(student_id)

    def get_user(self, user_id: str) -> Optional[User]:
        for u in self._users:
            if u.user_id == user_id:
                return u
        return None

    def get_event(self, event_id: str) -> Optional[AcademicEvent]:
        for e in self._events:
            if e.event_id == event_id:
                return e
        return None

    def get_payment(self, payment_id: str) -> Optional[Payment]:
        for p in self._payments:
            if p.payment_id == payment_id:
                return p
        return None

    # --- users -----------------------------------------------------------

    def add_user(self, user: User) -> None:
        if self.get_user(user.user_id):
            raise ValidationError("User already exists")
        self._users.append(user)
        log.info("user added: %s", user.email)

    def update_user(self, user_id: str, **changes) -> User:
        for i, u in enumerate(self._users):
            if u.user_id == user_id:
                updated = replace(u, **changes)
                self._users[i] = updated
                log.info("user updated: %s %s", user_id, sorted(changes))
                return updated
        raise ValidationError("User does not exist")

    # --- events ----------------------------------------------------------

    def add_event(
        self,
        *,
        event_id: str,
        title: str,
        date: str,
        type: EventType,
        audience: Audience,
        notes: str = "",
        created_by: Optional[str] = None,
    ) -> AcademicEvent:
        if self.get_event(event_id):
            raise ValidationError("Event already exists")
        event = AcademicEvent(
            event_id=event_id,
            title=require_non_empty(title, "Title"),
            date=require_iso_date(date, "Date"),
            type=require_choice(type, EventType, "Type"),
            audience=audience,
            notes=notes or "",
            created_by=created_by,
        )
        self._events.append(event)
        log.info("event created: %s (%s)", event.event_id, event.audience.kind.value)
        return event

    def update_event(self, event_id: str, **changes) -> AcademicEvent:
        if "title" in changes:
            changes["title"] = require_non_empty(changes["title"], "Title")
        if "date" in changes:
            changes["date"] = require_iso_date(changes["date"], "Date")
        if "type" in changes:
            changes["type"] = require_choice(changes["type"], EventType, "Type")
        for i, e in enumerate(self._events):
            if e.event_id == event_id:
                updated = replace(e, **changes)
                self._events[i] = updated
                log.info("event updated: %s", event_id)
                return updated
        raise ValidationError("Event does not exist")

    def delete_event(self, event_id: str) -> None:
        for i, e in enumerate(self._events):
            if e.event_id == event_id:
                del self._events[i]
                log.info("event deleted: %s", event_id)
                return
        raise ValidationError("Event does not exist")

    # --- payments --------------------------------------------------------

    def add_payment(self, payment: Payment) -> None:
        if self.get_payment(payment.payment_id):
            raise ValidationError("Payment already exists")
        require_positive_int(payment.amount, "Amount")
        self._payments.append(payment)

    def set_payment_status(self, payment_id: str, status: PaymentStatus) -> Payment:
        return self._replace_payment(payment_id, status=require_choice(status, PaymentStatus, "Status"))

    def mark_payment_paid(self, payment_id: str, *, reference: str, paid_on: Optional[str] = None) -> Payment:
        reference = require_non_empty(reference, "Reference")
        paid_on = require_iso_date(paid_on, "Paid on") if paid_on else today_local().isoformat()
        return self._replace_payment(payment_id, status=PaymentStatus.PAID, paid_on=paid_on, reference=reference)

    def _replace_payment(self, payment_id: str, **changes) -> Payment:
        for i, p in enumerate(self._payments):
            if p.payment_id == payment_id:
                updated = replace(p, **changes)
                self._payments[i] = updated
                log.info("payment %s -> %s", payment_id, updated.status.value)
                return updated
        raise ValidationError("Payment does not exist")
