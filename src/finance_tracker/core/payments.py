"""Recurring payment records and the rollover state machine.

A payment is either Active (``is_active=True``) or Ended. ``rollover`` moves
the due date forward by exactly one period from the current due date; when
that step passes ``end_date`` the payment ends, keeping the computed date.
Ended payments are terminal: the guard rejects any further rollover.
"""

import math
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal

from .errors import InvalidDateRangeError, NotFoundError
from .frequency import Frequency, advance

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class RecurringPayment:
    id: int
    user_id: int
    name: str
    amount: Decimal
    frequency: Frequency
    category_id: int
    account_id: int
    next_due_date: datetime
    end_date: datetime | None = None
    description: str | None = None
    is_active: bool = True
    tags: frozenset[str] = field(default_factory=frozenset)
    deleted: bool = False
    deleted_at: datetime | None = None

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("amount must be non-negative")
        object.__setattr__(self, "frequency", Frequency(self.frequency))


def ensure_can_rollover(payment: RecurringPayment) -> None:
    """Guard for ``rollover``: only active, non-deleted payments advance."""
    if payment.deleted or not payment.is_active:
        raise NotFoundError("Regular payment not found")


def rollover(payment: RecurringPayment) -> RecurringPayment:
    """Advance ``payment`` one period, ending it if it runs past ``end_date``.

    No catch-up: a payment that is several periods overdue still moves by a
    single step per call.
    """
    ensure_can_rollover(payment)

    next_due = advance(payment.next_due_date, payment.frequency)

    if payment.end_date is not None and next_due > payment.end_date:
        return replace(payment, next_due_date=next_due, is_active=False)

    return replace(payment, next_due_date=next_due)


def days_until_due(payment: RecurringPayment, now: datetime) -> int:
    """Whole days until the due date, rounded up; negative once overdue."""
    delta = payment.next_due_date - now
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def is_due_within(payment: RecurringPayment, now: datetime, days: int) -> bool:
    return 0 <= days_until_due(payment, now) <= days


def is_overdue(payment: RecurringPayment, now: datetime) -> bool:
    return days_until_due(payment, now) < 0


def validate_schedule(next_due_date: datetime, end_date: datetime | None, now: datetime) -> None:
    """Check due/end dates on create or update.

    Rollover does not go through here, so a rolled-over payment may end up
    with a due date in the past or beyond its end date.
    """
    if next_due_date <= now:
        raise InvalidDateRangeError("Next due date must be in the future")

    if end_date is not None and next_due_date >= end_date:
        raise InvalidDateRangeError("Next due date must be before end date")
