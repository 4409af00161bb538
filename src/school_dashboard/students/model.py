from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student. Immutable after load."""

    student_id: str
    name: str
    class_id: str
    parent_id: str
    grade: str = ""
