"""Build an in-memory store from the static JSON data files.

Field names follow the JSON data contract (``classId``, ``studentId``,
``dueDate``...). Dates are kept as the strings found in the files; they are
validated where they are used.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterable, TypeVar

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, EventType, PaymentStatus
from ..core.logger import get_logger
from ..events.model import AcademicEvent, audience_from_fields
from ..payments.model import Payment
from ..students.model import Student
from ..users.model import User
from .memory_store import InMemoryEntityStore

log = get_logger(__name__)

T = TypeVar("T")

# Older data sets call an unpaid fee "pending".
_PAYMENT_ALIASES = {"pending": PaymentStatus.DUE}


def _read_rows(path: Path) -> list[dict]:
    if not path.exists():
        log.info("data file missing, using empty collection: %s", path.name)
        return []
    with path.open(encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        raise ValueError(f"{path.name}: expected a JSON array")
    return rows


def _convert(rows: Iterable[dict], convert: Callable[[dict], T], label: str) -> list[T]:
    out: list[T] = []
    for row in rows:
        try:
            out.append(convert(row))
        except (KeyError, TypeError, ValueError) as e:
            log.warning("skipping %s row %r: %s", label, row.get("id") if isinstance(row, dict) else row, e)
    return out


def _enum_or(enum_cls, value: Any, fallback, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        log.warning("unknown %s %r, using %s", label, value, fallback.value)
        return fallback


def student_from_row(row: dict) -> Student:
    return Student(
        student_id=str(row["id"]),
        name=str(row["name"]),
        class_id=str(row["classId"]),
        parent_id=str(row.get("parentId") or ""),
        grade=str(row.get("grade") or ""),
    )


def attendance_from_row(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(row["id"]),
        student_id=str(row["studentId"]),
        date=row["date"],
        status=_enum_or(AttendanceStatus, row.get("status"), AttendanceStatus.NO_RECORD, "attendance status"),
    )


def event_from_row(row: dict) -> AcademicEvent:
    return AcademicEvent(
        event_id=str(row["id"]),
        title=str(row["title"]),
        date=row["date"],
        type=_enum_or(EventType, row.get("type"), EventType.EVENT, "event type"),
        audience=audience_from_fields(row.get("studentId"), row.get("classId")),
        notes=str(row.get("notes") or row.get("description") or ""),
        created_by=row.get("createdBy"),
    )


def payment_from_row(row: dict) -> Payment:
    raw_status = row.get("status")
    status = _PAYMENT_ALIASES.get(raw_status) or _enum_or(PaymentStatus, raw_status, PaymentStatus.DUE, "payment status")
    amount = int(row["amount"])
    if amount <= 0:
        raise ValueError(f"non-positive amount {amount}")
    return Payment(
        payment_id=str(row["id"]),
        student_id=str(row["studentId"]),
        amount=amount,
        due_date=row["dueDate"],
        status=status,
        paid_on=row.get("paidOn"),
        reference=row.get("reference"),
        description=str(row.get("description") or ""),
    )


def user_from_row(row: dict) -> User:
    return User(
        user_id=str(row["id"]),
        full_name=str(row.get("fullName") or ""),
        email=str(row.get("email") or ""),
        role=str(row.get("role") or ""),
        child_id=row.get("childId"),
        class_ids=tuple(str(c) for c in row.get("classIds") or ()),
        created_at=row.get("createdAt"),
    )


def load_store(data_dir: str | Path) -> InMemoryEntityStore:
    base = Path(data_dir)
    store = InMemoryEntityStore(
        students=_convert(_read_rows(base / "students.json"), student_from_row, "student"),
        attendance=_convert(_read_rows(base / "attendance.json"), attendance_from_row, "attendance"),
        events=_convert(_read_rows(base / "events.json"), event_from_row, "event"),
        payments=_convert(_read_rows(base / "payments.json"), payment_from_row, "payment"),
        users=_convert(_read_rows(base / "users.json"), user_from_row, "user"),
    )
    log.info(
        "static data loaded: %d students, %d attendance, %d events, %d payments, %d users",
        len(store.students),
        len(store.attendance),
        len(store.events),
        len(store.payments),
        len(store.users),
    )
    return store
