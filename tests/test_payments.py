from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from finance_tracker.core import (
    Frequency,
    InvalidDateRangeError,
    NotFoundError,
    RecurringPayment,
    days_until_due,
    is_due_within,
    is_overdue,
    rollover,
    validate_schedule,
)

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_payment(**overrides) -> RecurringPayment:
    values = dict(
        id=1,
        user_id=1,
        name="Rent",
        amount=Decimal("1200"),
        frequency=Frequency.MONTHLY,
        category_id=1,
        account_id=1,
        next_due_date=datetime(2026, 1, 31, tzinfo=timezone.utc),
    )
    values.update(overrides)
    return RecurringPayment(**values)


class TestRollover:
    def test_advances_one_period_from_current_due_date(self):
        payment = make_payment()

        rolled = rollover(payment)

        assert rolled.next_due_date == datetime(2026, 2, 28, tzinfo=timezone.utc)
        assert rolled.is_active
        # Input record is untouched
        assert payment.next_due_date == datetime(2026, 1, 31, tzinfo=timezone.utc)

    def test_overdue_payment_moves_a_single_step(self):
        payment = make_payment(next_due_date=datetime(2025, 6, 1, tzinfo=timezone.utc))

        rolled = rollover(payment)

        assert rolled.next_due_date == datetime(2025, 7, 1, tzinfo=timezone.utc)
        assert rolled.next_due_date < NOW

    def test_ends_payment_when_step_passes_end_date(self):
        payment = make_payment(
            frequency=Frequency.WEEKLY,
            next_due_date=datetime(2026, 3, 1, tzinfo=timezone.utc),
            end_date=datetime(2026, 3, 5, tzinfo=timezone.utc),
        )

        rolled = rollover(payment)

        assert not rolled.is_active
        assert rolled.next_due_date == datetime(2026, 3, 8, tzinfo=timezone.utc)

    def test_landing_exactly_on_end_date_keeps_payment_active(self):
        payment = make_payment(
            frequency=Frequency.WEEKLY,
            next_due_date=datetime(2026, 3, 1, tzinfo=timezone.utc),
            end_date=datetime(2026, 3, 8, tzinfo=timezone.utc),
        )

        rolled = rollover(payment)

        assert rolled.is_active
        assert rolled.next_due_date == payment.end_date

    def test_ended_payment_cannot_roll_again(self):
        ended = rollover(
            make_payment(
                frequency=Frequency.YEARLY,
                end_date=datetime(2026, 6, 1, tzinfo=timezone.utc),
            )
        )
        assert not ended.is_active

        with pytest.raises(NotFoundError):
            rollover(ended)

    def test_deleted_payment_cannot_roll(self):
        payment = make_payment(deleted=True, deleted_at=NOW)

        with pytest.raises(NotFoundError, match="Regular payment not found"):
            rollover(payment)

    def test_keeps_every_other_field(self):
        payment = make_payment(tags=frozenset({"home"}), description="Flat")

        rolled = rollover(payment)

        assert replace(rolled, next_due_date=payment.next_due_date) == payment


class TestDueWindows:
    def test_days_until_due_rounds_up(self):
        payment = make_payment(next_due_date=NOW + timedelta(hours=1))
        assert days_until_due(payment, NOW) == 1

    def test_due_now_counts_as_due_within(self):
        payment = make_payment(next_due_date=NOW)
        assert days_until_due(payment, NOW) == 0
        assert is_due_within(payment, NOW, 7)
        assert not is_overdue(payment, NOW)

    def test_seven_day_window_is_inclusive(self):
        assert is_due_within(make_payment(next_due_date=NOW + timedelta(days=7)), NOW, 7)
        assert not is_due_within(make_payment(next_due_date=NOW + timedelta(days=7, hours=1)), NOW, 7)

    def test_past_due_is_overdue_not_due_soon(self):
        payment = make_payment(next_due_date=NOW - timedelta(days=2))
        assert is_overdue(payment, NOW)
        assert not is_due_within(payment, NOW, 7)


class TestValidateSchedule:
    def test_accepts_future_due_date_before_end(self):
        validate_schedule(NOW + timedelta(days=1), NOW + timedelta(days=30), NOW)

    def test_accepts_open_ended_schedule(self):
        validate_schedule(NOW + timedelta(days=1), None, NOW)

    @pytest.mark.parametrize("offset", [timedelta(0), timedelta(days=-1)])
    def test_rejects_due_date_not_in_future(self, offset):
        with pytest.raises(InvalidDateRangeError, match="Next due date must be in the future"):
            validate_schedule(NOW + offset, None, NOW)

    def test_rejects_due_date_on_or_after_end(self):
        due = NOW + timedelta(days=10)
        with pytest.raises(InvalidDateRangeError, match="Next due date must be before end date"):
            validate_schedule(due, due, NOW)

    def test_future_rule_is_checked_before_ordering(self):
        with pytest.raises(InvalidDateRangeError, match="Next due date must be in the future"):
            validate_schedule(NOW - timedelta(days=3), NOW - timedelta(days=5), NOW)


def test_negative_amount_is_rejected():
    with pytest.raises(ValueError):
        make_payment(amount=Decimal("-1"))
