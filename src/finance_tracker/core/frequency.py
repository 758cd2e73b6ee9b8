"""Frequency enum and calendar arithmetic for recurring schedules."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from dateutil.relativedelta import relativedelta


class Frequency(str, Enum):
    """How often a payment recurs (also used as a budget period)."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


# relativedelta clamps the day to the end of the target month,
# so Jan 31 + 1 month lands on the last day of February.
_STEPS: dict[Frequency, relativedelta] = {
    Frequency.WEEKLY: relativedelta(days=7),
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.QUARTERLY: relativedelta(months=3),
    Frequency.YEARLY: relativedelta(years=1),
}

# Average number of weeks in a month
WEEKS_PER_MONTH = Decimal("4.33")


def advance(when: datetime, frequency: Frequency | str) -> datetime:
    """Return the next occurrence one frequency step after ``when``."""
    return when + _STEPS[Frequency(frequency)]


def to_monthly_equivalent(amount: Decimal | int | float, frequency: Frequency | str) -> Decimal:
    """Normalize a per-period amount to an approximate per-month amount."""
    amount = Decimal(str(amount))
    frequency = Frequency(frequency)

    if frequency is Frequency.WEEKLY:
        return amount * WEEKS_PER_MONTH
    if frequency is Frequency.QUARTERLY:
        return amount / 3
    if frequency is Frequency.YEARLY:
        return amount / 12
    return amount
