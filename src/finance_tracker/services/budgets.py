"""Budget operations.

Every write goes through the same three checks, in order: the category must
be active, the range must be ordered, and no other live budget of the user
for that category may share any instant with it.
"""

import logging
from datetime import datetime
from typing import Any

from ..core import BudgetWindow, NotFoundError, ensure_no_overlap, is_current, validate_range
from ..core.stats import CategoryLabel, budget_stats
from ..db.models import Budget
from ..db.repositories import BudgetRepository, CategoryRepository, Page, as_budget
from ..schemas.budgets import BudgetCreate, BudgetFilters, BudgetUpdate
from .base import BaseService, changes_from, values_from

logger = logging.getLogger(__name__)


class BudgetService(BaseService):
    """Budgets belonging to one user."""

    @property
    def repo(self) -> BudgetRepository:
        return BudgetRepository(self.session)

    async def _validate(self, window: BudgetWindow) -> None:
        await self.ensure_category(window.user_id, window.category_id)
        validate_range(window.start_date, window.end_date)

        existing = await self.repo.get_for_category(window.user_id, window.category_id)
        ensure_no_overlap(window, [as_budget(b) for b in existing])

    async def create(self, user_id: int, data: BudgetCreate) -> Budget:
        values = values_from(data)
        await self._validate(
            BudgetWindow(
                user_id=user_id,
                category_id=values["category_id"],
                start_date=values["start_date"],
                end_date=values["end_date"],
            )
        )

        budget = await self.repo.create(user_id, **values)
        logger.info(f"Created budget {budget.id} for category {budget.category_id}")
        return budget

    async def paginate(self, user_id: int, filters: BudgetFilters) -> Page[Budget]:
        conditions = []
        if filters.is_active is not None:
            conditions.append(Budget.is_active == filters.is_active)
        if filters.category_id is not None:
            conditions.append(Budget.category_id == filters.category_id)
        if filters.period is not None:
            conditions.append(Budget.period == filters.period.value)
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

    async def get(self, user_id: int, budget_id: int) -> Budget:
        budget = await self.repo.get(budget_id, user_id)
        if budget is None:
            raise NotFoundError("Budget not found")
        return budget

    async def update(self, user_id: int, budget_id: int, data: BudgetUpdate) -> Budget:
        """Merge the changes into the stored budget and validate the result."""
        budget = await self.get(user_id, budget_id)
        changes = changes_from(data, nullable=("description",))

        merged = as_budget(budget)
        await self._validate(
            BudgetWindow(
                user_id=user_id,
                category_id=changes.get("category_id", merged.category_id),
                start_date=changes.get("start_date", merged.start_date),
                end_date=changes.get("end_date", merged.end_date),
                exclude_id=budget.id,
            )
        )

        return await self.repo.update(budget, changes)

    async def delete(self, user_id: int, budget_id: int, now: datetime) -> None:
        budget = await self.get(user_id, budget_id)
        await self.repo.soft_delete(budget, now)
        logger.info(f"Deleted budget {budget_id} for user {user_id}")

    async def current(self, user_id: int, now: datetime) -> list[Budget]:
        """Active budgets whose range contains ``now``."""
        budgets = await self.repo.get_active(user_id)
        return [b for b in budgets if is_current(as_budget(b), now)]

    async def stats(self, user_id: int) -> dict[str, Any]:
        """Figures over active budgets only."""
        budgets = await self.repo.get_active(user_id)
        categories = await CategoryRepository(self.session).get_all(user_id)
        labels = {c.id: CategoryLabel(c.name, c.color) for c in categories}
        return budget_stats((as_budget(b) for b in budgets), labels)
