from __future__ import annotations

from datetime import datetime

import pytest

from school_dashboard.attendance.model import AttendanceRecord
from school_dashboard.core.enums import AttendanceStatus, EventType, PaymentStatus, Role
from school_dashboard.events.model import AcademicEvent, ClassAudience, StudentAudience, WHOLE_SCHOOL
from school_dashboard.payments.model import Payment
from school_dashboard.store.memory_store import InMemoryEntityStore
from school_dashboard.students.model import Student
from school_dashboard.users.model import User, Viewer


@pytest.fixture
def fixed_now() -> datetime:
    # Friday
    return datetime(2024, 3, 15, 9, 0, 0)


def make_attendance(record_id, student_id, day, status) -> AttendanceRecord:
    return AttendanceRecord(record_id=record_id, student_id=student_id, date=day, status=AttendanceStatus(status))


def make_event(event_id, when, audience=WHOLE_SCHOOL, type_=EventType.EVENT, title=None) -> AcademicEvent:
    return AcademicEvent(event_id=event_id, title=title or event_id, date=when, type=type_, audience=audience)


def make_payment(payment_id, student_id, amount, due, status) -> Payment:
    return Payment(payment_id=payment_id, student_id=student_id, amount=amount, due_date=due, status=PaymentStatus(status))


@pytest.fixture
def students() -> list[Student]:
    return [
        Student(student_id="s_1", name="Aarav", class_id="class_1", parent_id="p_1", grade="1A"),
        Student(student_id="s_2", name="Diya", class_id="class_1", parent_id="p_3", grade="1A"),
        Student(student_id="s_3", name="Meera", class_id="class_2", parent_id="p_2", grade="2B"),
        Student(student_id="s_4", name="Sara", class_id="class_3", parent_id="p_4", grade="3C"),
    ]


@pytest.fixture
def attendance() -> list[AttendanceRecord]:
    return [
        make_attendance("a_1", "s_1", "2024-03-11", "present"),
        make_attendance("a_2", "s_1", "2024-03-12", "present"),
        make_attendance("a_3", "s_1", "2024-03-13", "absent"),
        make_attendance("a_4", "s_1", "2024-03-14", "late"),
        make_attendance("a_5", "s_1", "2024-03-15", "present"),
        make_attendance("a_6", "s_2", "2024-03-15", "absent"),
        # duplicate for (s_2, 2024-03-15): the first one wins
        make_attendance("a_7", "s_2", "2024-03-15", "present"),
        make_attendance("a_8", "s_3", "2024-03-15", "present"),
        make_attendance("a_9", "s_4", "2024-03-15", "late"),
    ]


@pytest.fixture
def events() -> list[AcademicEvent]:
    return [
        make_event("e_school", "2024-03-20T09:00:00.000Z"),
        make_event("e_class1", "2024-03-18T14:00:00.000Z", ClassAudience("class_1"), EventType.TASK),
        make_event("e_s1", "2024-03-22T16:00:00.000Z", StudentAudience("s_1")),
        make_event("e_class2", "2024-03-19T10:00:00.000Z", ClassAudience("class_2"), EventType.TASK),
        make_event("e_s3", "2024-03-21T10:00:00.000Z", StudentAudience("s_3")),
        make_event("e_past", "2024-03-01T09:00:00.000Z"),
        make_event("e_far", "2024-05-01T09:00:00.000Z", type_=EventType.HOLIDAY),
    ]


@pytest.fixture
def payments() -> list[Payment]:
    return [
        make_payment("pay_1", "s_1", 2000, "2024-03-20", "due"),
        make_payment("pay_2", "s_1", 3000, "2024-03-01", "overdue"),
        make_payment("pay_3", "s_1", 1500, "2024-02-10", "paid"),
        make_payment("pay_4", "s_3", 1200, "2024-03-16", "due"),
        make_payment("pay_5", "s_4", 800, "2024-03-30", "due"),
    ]


@pytest.fixture
def users() -> list[User]:
    return [
        User(user_id="p_1", full_name="Priya", email="parent@demo.com", role="parent", child_id="s_1"),
        User(user_id="p_9", full_name="No Child", email="nochild@demo.com", role="parent"),
        User(user_id="t_1", full_name="Neha", email="teacher@demo.com", role="teacher", class_ids=("class_1",)),
        User(user_id="t_9", full_name="No Class", email="noclass@demo.com", role="teacher"),
        User(user_id="admin_1", full_name="Anita", email="admin@demo.com", role="schoolOwner"),
        User(user_id="x_1", full_name="Guest", email="guest@demo.com", role="janitor"),
    ]


@pytest.fixture
def store(students, attendance, events, payments, users) -> InMemoryEntityStore:
    return InMemoryEntityStore(
        students=students,
        attendance=attendance,
        events=events,
        payments=payments,
        users=users,
    )


@pytest.fixture
def parent_viewer() -> Viewer:
    return Viewer(viewer_id="p_1", role=Role.PARENT, child_id="s_1")


@pytest.fixture
def teacher_viewer() -> Viewer:
    return Viewer(viewer_id="t_1", role=Role.TEACHER, owned_class_ids=frozenset({"class_1"}))


@pytest.fixture
def owner_viewer() -> Viewer:
    return Viewer(viewer_id="admin_1", role=Role.SCHOOL_OWNER)
