"""Account operations."""

import logging
from datetime import datetime
from typing import Any

from ..core import NotFoundError
from ..core.stats import balance_summary
from ..db.models import Account
from ..db.repositories import AccountRepository, Page
from ..schemas.accounts import AccountCreate, AccountFilters, AccountUpdate
from .base import BaseService, changes_from, values_from

logger = logging.getLogger(__name__)


class AccountService(BaseService):
    """Accounts belonging to one user."""

    @property
    def repo(self) -> AccountRepository:
        return AccountRepository(self.session)

    async def create(self, user_id: int, data: AccountCreate) -> Account:
        account = await self.repo.create(user_id, **values_from(data))
        logger.info(f"Created account {account.id} for user {user_id}")
        return account

    async def paginate(self, user_id: int, filters: AccountFilters) -> Page[Account]:
        conditions = []
        if filters.type is not None:
            conditions.append(Account.type == filters.type.value)
        if filters.is_active is not None:
            conditions.append(Account.is_active == filters.is_active)
        if filters.min_balance is not None:
            conditions.append(Account.balance >= filters.min_balance)
        if filters.max_balance is not None:
            conditions.append(Account.balance <= filters.max_balance)

        return await self.repo.get_page(
            user_id,
            conditions,
            page=filters.page,
            limit=filters.limit,
            sort_by=filters.sort_by,
            sort_order=filters.sort_order,
        )

    async def get(self, user_id: int, account_id: int) -> Account:
        account = await self.repo.get(account_id, user_id)
        if account is None:
            raise NotFoundError("Account not found")
        return account

    async def update(self, user_id: int, account_id: int, data: AccountUpdate) -> Account:
        account = await self.get(user_id, account_id)
        changes = changes_from(data, nullable=("description", "account_number"))
        return await self.repo.update(account, changes)

    async def delete(self, user_id: int, account_id: int, now: datetime) -> None:
        account = await self.get(user_id, account_id)
        await self.repo.soft_delete(account, now)
        logger.info(f"Deleted account {account_id} for user {user_id}")

    async def summary(self, user_id: int) -> dict[str, Any]:
        """Balance summary over the user's active accounts."""
        accounts = await self.repo.get_all(user_id, Account.is_active == True)  # noqa: E712
        return balance_summary(a.balance for a in accounts)
