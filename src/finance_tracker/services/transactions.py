"""Transaction operations."""

import logging
from datetime import datetime

from ..core import NotFoundError, as_utc
from ..db.models import Transaction
from ..db.repositories import Page, TransactionRepository
from ..schemas.transactions import TransactionCreate, TransactionFilters, TransactionUpdate
from .base import BaseService, changes_from, values_from

logger = logging.getLogger(__name__)


class TransactionService(BaseService):
    """Transactions belonging to one user.

    Category and account must be active when a transaction is created or
    moved to them; balances are not adjusted.
    """

    @property
    def repo(self) -> TransactionRepository:
        return TransactionRepository(self.session)

    async def create(self, user_id: int, data: TransactionCreate, now: datetime) -> Transaction:
        await self.ensure_category(user_id, data.category_id)
        await self.ensure_account(user_id, data.account_id)

        values = values_from(data)
        values["date"] = values["date"] or now

        transaction = await self.repo.create(user_id, **values)
        logger.info(f"Created {transaction.type} transaction {transaction.id} for user {user_id}")
        return transaction

    async def paginate(self, user_id: int, filters: TransactionFilters) -> Page[Transaction]:
        conditions = []
        if filters.type is not None:
            conditions.append(Transaction.type == filters.type.value)
        if filters.category_id is not None:
            conditions.append(Transaction.category_id == filters.category_id)
        if filters.account_id is not None:
            conditions.append(Transaction.account_id == filters.account_id)
        if filters.start_date is not None:
            conditions.append(Transaction.date >= as_utc(filters.start_date))
        if filters.end_date is not None:
            conditions.append(Transaction.date <= as_utc(filters.end_date))
        if filters.min_amount is not None:
            conditions.append(Transaction.amount >= filters.min_amount)
        if filters.max_amount is not None:
            conditions.append(Transaction.amount <= filters.max_amount)

        return await self.repo.get_page(
            user_id,
            conditions,
            page=filters.page,
            limit=filters.limit,
            sort_by=filters.sort_by,
            sort_order=filters.sort_order,
        )

    async def get(self, user_id: int, transaction_id: int) -> Transaction:
        transaction = await self.repo.get(transaction_id, user_id)
        if transaction is None:
            raise NotFoundError("Transaction not found")
        return transaction

    async def update(self, user_id: int, transaction_id: int, data: TransactionUpdate) -> Transaction:
        transaction = await self.get(user_id, transaction_id)
        changes = changes_from(data)

        if changes.get("category_id", transaction.category_id) != transaction.category_id:
            await self.ensure_category(user_id, changes["category_id"])
        if changes.get("account_id", transaction.account_id) != transaction.account_id:
            await self.ensure_account(user_id, changes["account_id"])

        return await self.repo.update(transaction, changes)

    async def delete(self, user_id: int, transaction_id: int, now: datetime) -> None:
        transaction = await self.get(user_id, transaction_id)
        await self.repo.soft_delete(transaction, now)
        logger.info(f"Deleted transaction {transaction_id} for user {user_id}")
