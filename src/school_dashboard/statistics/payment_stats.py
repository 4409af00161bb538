from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from ..calendar.bucketer import sort_chronologically
from ..common.datetime_utils import days_between
from ..core.constants import DEFAULT_RECENT_PAYMENTS_LIMIT
from ..core.enums import PaymentStatus
from ..core.issues import IssueCollector
from ..payments.model import Payment


@dataclass(frozen=True)
class PaymentSummary:
    """Totals over a payment list. Paid payments never add to the due amount."""

    total_due_amount: int = 0
    due_count: int = 0
    overdue_count: int = 0
    paid_count: int = 0
    paid_amount: int = 0
    total_count: int = 0


def _due_date(p: Payment) -> str:
    return p.due_date


def payment_summary(payments: Iterable[Payment]) -> PaymentSummary:
    due_amount = paid_amount = 0
    due = overdue = paid = total = 0
    for p in payments:
        total += 1
        if p.status == PaymentStatus.DUE:
            due += 1
            due_amount += p.amount
        elif p.status == PaymentStatus.OVERDUE:
            overdue += 1
            due_amount += p.amount
        elif p.status == PaymentStatus.PAID:
            paid += 1
            paid_amount += p.amount
    return PaymentSummary(
        total_due_amount=due_amount,
        due_count=due,
        overdue_count=overdue,
        paid_count=paid,
        paid_amount=paid_amount,
        total_count=total,
    )


def due_within_days(
    payments: Iterable[Payment],
    days: int,
    from_date: date | datetime,
    *,
    issues: Optional[IssueCollector] = None,
) -> list[Payment]:
    """Unpaid payments due between ``from_date`` and ``days`` later, inclusive.

    Already-late payments (negative offset) are not "due soon"; they show up
    in ``overdue_count`` instead.
    """
    if days < 0:
        raise ValueError("days must be >= 0")
    out = []
    for when, p in sort_chronologically(payments, key=_due_date, issues=issues):
        if not p.is_outstanding:
            continue
        if 0 <= days_between(from_date, when) <= days:
            out.append(p)
    return out


def recent_payments(
    payments: Iterable[Payment],
    limit: int = DEFAULT_RECENT_PAYMENTS_LIMIT,
    *,
    issues: Optional[IssueCollector] = None,
) -> list[Payment]:
    """Latest due date first."""
    ordered = sort_chronologically(payments, key=_due_date, issues=issues)
    ordered.reverse()
    return [p for _, p in ordered[:limit]]
