"""Budget records and date-range validation.

Budgets for one (user, category) pair must not overlap. Intervals are
closed, so a budget ending on the day another starts is a conflict.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .errors import InvalidDateRangeError, OverlapError
from .frequency import Frequency


@dataclass(frozen=True)
class Budget:
    id: int
    user_id: int
    category_id: int
    name: str
    amount: Decimal
    period: Frequency
    start_date: datetime
    end_date: datetime
    description: str | None = None
    is_active: bool = True
    deleted: bool = False
    deleted_at: datetime | None = None

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("amount must be non-negative")
        object.__setattr__(self, "period", Frequency(self.period))


@dataclass(frozen=True)
class BudgetWindow:
    """A proposed date range for a budget being created or updated."""

    user_id: int
    category_id: int
    start_date: datetime
    end_date: datetime
    exclude_id: int | None = None


def validate_range(start_date: datetime, end_date: datetime) -> None:
    if start_date >= end_date:
        raise InvalidDateRangeError("Start date must be before end date")


def _competes(candidate: BudgetWindow, budget: Budget) -> bool:
    return (
        budget.user_id == candidate.user_id
        and budget.category_id == candidate.category_id
        and not budget.deleted
        and budget.id != candidate.exclude_id
    )


def has_overlap(candidate: BudgetWindow, existing: Iterable[Budget]) -> bool:
    """True if any competing budget shares at least one instant with ``candidate``."""
    return any(
        b.start_date <= candidate.end_date and b.end_date >= candidate.start_date
        for b in existing
        if _competes(candidate, b)
    )


def ensure_no_overlap(candidate: BudgetWindow, existing: Iterable[Budget]) -> None:
    if has_overlap(candidate, existing):
        raise OverlapError("Budget already exists for this category in the specified date range")


def is_current(budget: Budget, now: datetime) -> bool:
    return budget.start_date <= now <= budget.end_date
