"""Repository layer for database operations.

All user-owned tables go through ``OwnedRepository``, which applies the
ownership and soft-delete predicate in one place so the rest of the code only
ever sees a user's live rows.
"""

import math
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core import Budget as BudgetRecord
from ..core import RecurringPayment, Reference, as_utc
from .models import (
    Account,
    Base,
    Budget,
    Category,
    RegularPayment,
    Transaction,
    User,
)

M = TypeVar("M", bound=Base)


class BaseRepository:
    """Base repository with common operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _save(self, row: M) -> M:
        """Flush pending changes and reload server-side defaults."""
        await self.session.flush()
        await self.session.refresh(row)
        return row


class Page(Generic[M]):
    """One page of rows plus the numbers needed for pagination metadata."""

    def __init__(self, items: Sequence[M], total_count: int, page: int, limit: int):
        self.items = items
        self.total_count = total_count
        self.page = page
        self.limit = limit

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit) if self.limit else 0


class OwnedRepository(BaseRepository, Generic[M]):
    """Repository for rows that belong to a user and are soft deleted."""

    model: type[M]
    # Columns searched by the free-text ``search`` filter
    search_columns: tuple[str, ...] = ()

    def live(self, user_id: int) -> Select:
        """The active-record predicate: owned by ``user_id`` and not deleted."""
        return select(self.model).where(
            self.model.user_id == user_id,
            self.model.deleted == False,  # noqa: E712
        )

    async def get(self, record_id: int, user_id: int) -> M | None:
        """Get a live row by ID."""
        result = await self.session.execute(
            self.live(user_id).where(self.model.id == record_id)
        )
        return result.scalar_one_or_none()

    async def get_including_deleted(self, record_id: int, user_id: int) -> M | None:
        """Get a row by ID even if soft deleted (used for reference checks)."""
        result = await self.session.execute(
            select(self.model).where(
                self.model.id == record_id,
                self.model.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_all(self, user_id: int, *conditions: ColumnElement[bool]) -> Sequence[M]:
        """Get all live rows matching ``conditions``."""
        result = await self.session.execute(self.live(user_id).where(*conditions))
        return result.scalars().all()

    async def get_page(
        self,
        user_id: int,
        conditions: Sequence[ColumnElement[bool]],
        *,
        page: int,
        limit: int,
        sort_by: str,
        sort_order: str,
    ) -> Page[M]:
        """Get one sorted page of live rows and the total match count."""
        query = self.live(user_id).where(*conditions)

        count_result = await self.session.execute(
            select(func.count()).select_from(query.subquery())
        )
        total_count = count_result.scalar_one()

        column = getattr(self.model, sort_by)
        query = query.order_by(column.asc() if sort_order == "asc" else column.desc())
        query = query.offset((page - 1) * limit).limit(limit)

        result = await self.session.execute(query)
        return Page(result.scalars().all(), total_count, page, limit)

    def search_condition(self, term: str) -> ColumnElement[bool]:
        pattern = f"%{term}%"
        return or_(*(getattr(self.model, c).ilike(pattern) for c in self.search_columns))

    async def create(self, user_id: int, **values: Any) -> M:
        """Insert a new row owned by ``user_id``."""
        row = self.model(user_id=user_id, **values)
        self.session.add(row)
        return await self._save(row)

    async def update(self, row: M, values: dict[str, Any]) -> M:
        """Apply ``values`` to ``row``."""
        for key, value in values.items():
            setattr(row, key, value)
        return await self._save(row)

    async def soft_delete(self, row: M, now: datetime) -> None:
        """Flag ``row`` as deleted; it disappears from every live query."""
        row.deleted = True
        row.deleted_at = now
        await self.session.flush()


class UserRepository(BaseRepository):
    """Repository for users."""

    async def get_by_email(self, email: str) -> User | None:
        """Get a live user by email (case-insensitive)."""
        result = await self.session.execute(
            select(User).where(
                func.lower(User.email) == email.lower(),
                User.deleted == False,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: int) -> User | None:
        """Get a live user by ID."""
        result = await self.session.execute(
            select(User).where(User.id == user_id, User.deleted == False)  # noqa: E712
        )
        return result.scalar_one_or_none()

    async def create(self, first_name: str, last_name: str | None, email: str, password_hash: str) -> User:
        """Create a new user."""
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
        )
        self.session.add(user)
        return await self._save(user)


class AccountRepository(OwnedRepository[Account]):
    """Repository for accounts."""

    model = Account


class CategoryRepository(OwnedRepository[Category]):
    """Repository for categories."""

    model = Category
    search_columns = ("name", "description")

    async def find_by_name(self, user_id: int, name: str, exclude_id: int | None = None) -> Category | None:
        """Find a live category whose name matches ``name`` ignoring case."""
        query = self.live(user_id).where(func.lower(Category.name) == name.lower())
        if exclude_id is not None:
            query = query.where(Category.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()


class TransactionRepository(OwnedRepository[Transaction]):
    """Repository for transactions."""

    model = Transaction


class BudgetRepository(OwnedRepository[Budget]):
    """Repository for budgets."""

    model = Budget
    search_columns = ("name", "description")

    async def get_for_category(self, user_id: int, category_id: int) -> Sequence[Budget]:
        """Get live budgets that compete for the same category."""
        return await self.get_all(user_id, Budget.category_id == category_id)

    async def get_active(self, user_id: int) -> Sequence[Budget]:
        """Get active budgets, earliest start first."""
        result = await self.session.execute(
            self.live(user_id)
            .where(Budget.is_active == True)  # noqa: E712
            .order_by(Budget.start_date.asc())
        )
        return result.scalars().all()


class RegularPaymentRepository(OwnedRepository[RegularPayment]):
    """Repository for regular payments."""

    model = RegularPayment
    search_columns = ("name", "description")

    async def get_due_before(self, user_id: int, until: datetime) -> Sequence[RegularPayment]:
        """Get active payments due on or before ``until``, soonest first."""
        result = await self.session.execute(
            self.live(user_id)
            .where(
                RegularPayment.is_active == True,  # noqa: E712
                RegularPayment.next_due_date <= until,
            )
            .order_by(RegularPayment.next_due_date.asc())
        )
        return result.scalars().all()


# Conversions from rows to the core's value records


def as_reference(row: Account | Category | None) -> Reference | None:
    if row is None:
        return None
    return Reference(id=row.id, user_id=row.user_id, is_active=row.is_active, deleted=row.deleted)


def as_payment(row: RegularPayment) -> RecurringPayment:
    return RecurringPayment(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        description=row.description,
        amount=row.amount,
        frequency=row.frequency,
        category_id=row.category_id,
        account_id=row.account_id,
        next_due_date=as_utc(row.next_due_date),
        end_date=as_utc(row.end_date),
        is_active=row.is_active,
        tags=frozenset(row.tags or ()),
        deleted=row.deleted,
        deleted_at=as_utc(row.deleted_at),
    )


def as_budget(row: Budget) -> BudgetRecord:
    return BudgetRecord(
        id=row.id,
        user_id=row.user_id,
        category_id=row.category_id,
        name=row.name,
        description=row.description,
        amount=row.amount,
        period=row.period,
        start_date=as_utc(row.start_date),
        end_date=as_utc(row.end_date),
        is_active=row.is_active,
        deleted=row.deleted,
        deleted_at=as_utc(row.deleted_at),
    )
