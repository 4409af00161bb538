from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class Payment:
    """Domain entity: a fee owed for a student.

    ``amount`` is a positive whole number; ``due_date`` and ``paid_on`` are ISO
    day strings.
    """

    payment_id: str
    student_id: str
    amount: int
    due_date: str
    status: PaymentStatus
    paid_on: Optional[str] = None
    reference: Optional[str] = None
    description: str = ""

    @property
    def is_outstanding(self) -> bool:
        return self.status != PaymentStatus.PAID
