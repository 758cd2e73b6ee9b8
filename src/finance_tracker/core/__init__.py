"""Pure domain logic: scheduling, validation and statistics."""

from .budgets import Budget, BudgetWindow, ensure_no_overlap, has_overlap, is_current, validate_range
from .clock import as_utc, utcnow
from .errors import (
    FinanceError,
    InvalidDateRangeError,
    NotFoundError,
    OverlapError,
    ReferenceInactiveError,
)
from .frequency import Frequency, advance, to_monthly_equivalent
from .payments import (
    RecurringPayment,
    days_until_due,
    ensure_can_rollover,
    is_due_within,
    is_overdue,
    rollover,
    validate_schedule,
)
from .references import Reference, ensure_active_reference

__all__ = [
    # Errors
    "FinanceError",
    "NotFoundError",
    "InvalidDateRangeError",
    "ReferenceInactiveError",
    "OverlapError",
    # Time
    "as_utc",
    "utcnow",
    # Frequency
    "Frequency",
    "advance",
    "to_monthly_equivalent",
    # Payments
    "RecurringPayment",
    "days_until_due",
    "ensure_can_rollover",
    "is_due_within",
    "is_overdue",
    "rollover",
    "validate_schedule",
    # Budgets
    "Budget",
    "BudgetWindow",
    "ensure_no_overlap",
    "has_overlap",
    "is_current",
    "validate_range",
    # References
    "Reference",
    "ensure_active_reference",
]
