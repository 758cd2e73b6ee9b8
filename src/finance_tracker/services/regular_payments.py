"""Regular payment operations, including rollover of the due date."""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import Any

from ..config import settings
from ..core import NotFoundError, rollover, validate_schedule
from ..core.stats import CategoryLabel, payment_stats
from ..db.models import RegularPayment
from ..db.repositories import (
    AccountRepository,
    CategoryRepository,
    Page,
    RegularPaymentRepository,
    as_payment,
)
from ..schemas.regular_payments import RegularPaymentCreate, RegularPaymentFilters, RegularPaymentUpdate
from .base import BaseService, changes_from, values_from

logger = logging.getLogger(__name__)


class RegularPaymentService(BaseService):
    """Regular payments belonging to one user."""

    @property
    def repo(self) -> RegularPaymentRepository:
        return RegularPaymentRepository(self.session)

    async def create(self, user_id: int, data: RegularPaymentCreate, now: datetime) -> RegularPayment:
        values = values_from(data)

        await self.ensure_category(user_id, values["category_id"])
        await self.ensure_account(user_id, values["account_id"])
        validate_schedule(values["next_due_date"], values["end_date"], now)

        payment = await self.repo.create(user_id, **values)
        logger.info(f"Created {payment.frequency} regular payment {payment.id} for user {user_id}")
        return payment

    async def paginate(self, user_id: int, filters: RegularPaymentFilters) -> Page[RegularPayment]:
        conditions = []
        if filters.is_active is not None:
            conditions.append(RegularPayment.is_active == filters.is_active)
        if filters.category_id is not None:
            conditions.append(RegularPayment.category_id == filters.category_id)
        if filters.account_id is not None:
            conditions.append(RegularPayment.account_id == filters.account_id)
        if filters.frequency is not None:
            conditions.append(RegularPayment.frequency == filters.frequency.value)
        if filters.search:
            conditions.append(self.repo.search_condition(filters.search))

        return await self.repo.get_page(
            user_id,
            conditions,
            page=filters.page,
            limit=filters.limit,
            sort_by=filters.sort_by,
            sort_order=filters.sort_order,
        )

    async def get(self, user_id: int, payment_id: int) -> RegularPayment:
        payment = await self.repo.get(payment_id, user_id)
        if payment is None:
            raise NotFoundError("Regular payment not found")
        return payment

    async def update(
        self, user_id: int, payment_id: int, data: RegularPaymentUpdate, now: datetime
    ) -> RegularPayment:
        """Merge the changes into the stored payment and validate the result.

        The merged schedule is checked on every update, so an overdue payment
        must be given a new due date before anything else can change.
        """
        payment = await self.get(user_id, payment_id)
        changes = changes_from(data, nullable=("description", "end_date"))
        current = as_payment(payment)

        if changes.get("category_id", current.category_id) != current.category_id:
            await self.ensure_category(user_id, changes["category_id"])
        if changes.get("account_id", current.account_id) != current.account_id:
            await self.ensure_account(user_id, changes["account_id"])

        validate_schedule(
            changes.get("next_due_date", current.next_due_date),
            changes.get("end_date", current.end_date),
            now,
        )

        return await self.repo.update(payment, changes)

    async def delete(self, user_id: int, payment_id: int, now: datetime) -> None:
        payment = await self.get(user_id, payment_id)
        await self.repo.soft_delete(payment, now)
        logger.info(f"Deleted regular payment {payment_id} for user {user_id}")

    async def roll_over(self, user_id: int, payment_id: int) -> RegularPayment:
        """Advance the due date by one period, ending the payment past its end date."""
        payment = await self.get(user_id, payment_id)
        advanced = rollover(as_payment(payment))

        payment = await self.repo.update(
            payment,
            {"next_due_date": advanced.next_due_date, "is_active": advanced.is_active},
        )
        if advanced.is_active:
            logger.info(f"Regular payment {payment_id} now due {advanced.next_due_date.isoformat()}")
        else:
            logger.info(f"Regular payment {payment_id} passed its end date and was deactivated")
        return payment

    async def upcoming(self, user_id: int, now: datetime, days: int) -> Sequence[RegularPayment]:
        """Active payments due within ``days`` of ``now`` (overdue ones included), soonest first."""
        return await self.repo.get_due_before(user_id, now + timedelta(days=days))

    async def stats(self, user_id: int, now: datetime) -> dict[str, Any]:
        """Figures over active payments; ended ones are left out."""
        payments = await self.repo.get_all(user_id, RegularPayment.is_active == True)  # noqa: E712
        categories = await CategoryRepository(self.session).get_all(user_id)
        accounts = await AccountRepository(self.session).get_all(user_id)

        return payment_stats(
            (as_payment(p) for p in payments),
            now,
            {c.id: CategoryLabel(c.name, c.color) for c in categories},
            {a.id: a.name for a in accounts},
            due_soon_days=settings.due_soon_days,
        )
