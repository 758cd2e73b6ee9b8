"""Reducers that fold records into summary statistics.

Inputs are already filtered to one user's live records. Every reducer makes
a single pass and returns empty/zero results for empty input.
"""

from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Protocol, TypeVar

from .budgets import Budget
from .frequency import to_monthly_equivalent
from .payments import RecurringPayment, is_due_within, is_overdue

DEFAULT_COLOR = "#3B82F6"
UNKNOWN = "Unknown"

K = TypeVar("K", bound=Hashable)


class HasAmount(Protocol):
    amount: Decimal


T = TypeVar("T", bound=HasAmount)


@dataclass(frozen=True)
class CategoryLabel:
    name: str
    color: str = DEFAULT_COLOR


def group_sum_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, Decimal]:
    totals: dict[K, Decimal] = defaultdict(Decimal)
    for item in items:
        totals[key(item)] += item.amount
    return dict(totals)


def group_count_by(items: Iterable[Any], key: Callable[[Any], K]) -> dict[K, int]:
    counts: dict[K, int] = defaultdict(int)
    for item in items:
        counts[key(item)] += 1
    return dict(counts)


def partition_by_due_window(
    payments: Iterable[RecurringPayment], now: datetime, days: int
) -> tuple[list[RecurringPayment], list[RecurringPayment]]:
    """Split payments into (due within ``days``, overdue)."""
    due_soon: list[RecurringPayment] = []
    overdue: list[RecurringPayment] = []
    for payment in payments:
        if is_due_within(payment, now, days):
            due_soon.append(payment)
        elif is_overdue(payment, now):
            overdue.append(payment)
    return due_soon, overdue


def total_monthly_amount(payments: Iterable[RecurringPayment]) -> Decimal:
    return sum(
        (to_monthly_equivalent(p.amount, p.frequency) for p in payments),
        Decimal("0"),
    )


def payment_stats(
    payments: Iterable[RecurringPayment],
    now: datetime,
    categories: Mapping[int, CategoryLabel],
    accounts: Mapping[int, str],
    due_soon_days: int = 7,
) -> dict[str, Any]:
    payments = list(payments)

    def category_name(p: RecurringPayment) -> str:
        label = categories.get(p.category_id)
        return label.name if label else UNKNOWN

    due_soon, overdue = partition_by_due_window(payments, now, due_soon_days)

    return {
        "total_payments": len(payments),
        "active_payments": sum(1 for p in payments if p.is_active),
        "total_monthly_amount": total_monthly_amount(payments),
        "frequency_stats": group_count_by(payments, lambda p: p.frequency.value),
        "category_stats": group_sum_by(payments, category_name),
        "upcoming_payments": len(due_soon),
        "overdue_payments": len(overdue),
        "payments": [
            {
                "id": p.id,
                "name": p.name,
                "amount": p.amount,
                "frequency": p.frequency.value,
                "next_due_date": p.next_due_date,
                "category": category_name(p),
                "color": categories[p.category_id].color
                if p.category_id in categories
                else DEFAULT_COLOR,
                "account": accounts.get(p.account_id, UNKNOWN),
            }
            for p in payments
        ],
    }


def budget_stats(
    budgets: Iterable[Budget], categories: Mapping[int, CategoryLabel]
) -> dict[str, Any]:
    budgets = list(budgets)

    def category_name(b: Budget) -> str:
        label = categories.get(b.category_id)
        return label.name if label else UNKNOWN

    return {
        "total_budgets": len(budgets),
        "active_budgets": sum(1 for b in budgets if b.is_active),
        "total_budget_amount": sum((b.amount for b in budgets), Decimal("0")),
        "period_stats": group_count_by(budgets, lambda b: b.period.value),
        "category_stats": group_sum_by(budgets, category_name),
        "budgets": [
            {
                "id": b.id,
                "name": b.name,
                "amount": b.amount,
                "period": b.period.value,
                "category": category_name(b),
                "color": categories[b.category_id].color
                if b.category_id in categories
                else DEFAULT_COLOR,
            }
            for b in budgets
        ],
    }


def category_stats(active_flags: Iterable[bool]) -> dict[str, int]:
    """Count categories; ``active_flags`` holds each category's ``is_active``."""
    total = 0
    active = 0
    for is_active in active_flags:
        total += 1
        active += int(is_active)
    return {"total_categories": total, "active_categories": active}


def balance_summary(balances: Iterable[Decimal]) -> dict[str, Any]:
    """Net worth and debt across account balances."""
    total_debt = Decimal("0")
    net_worth = Decimal("0")
    count = 0
    for balance in balances:
        count += 1
        net_worth += balance
        if balance < 0:
            total_debt += balance
    return {"total_debt": total_debt, "net_worth": net_worth, "total_accounts": count}
