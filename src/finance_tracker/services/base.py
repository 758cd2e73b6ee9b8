"""Helpers shared by the resource services."""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from ..core import Reference, as_utc, ensure_active_reference
from ..db.repositories import AccountRepository, CategoryRepository, as_reference

DATETIME_FIELDS = ("date", "start_date", "end_date", "next_due_date")


def _column_value(key: str, value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if key in DATETIME_FIELDS:
        return as_utc(value)
    return value


def values_from(create: BaseModel) -> dict[str, Any]:
    """Column values for a new row built from a create schema."""
    return {key: _column_value(key, value) for key, value in create.model_dump().items()}


def changes_from(update: BaseModel, nullable: Iterable[str] = ()) -> dict[str, Any]:
    """Fields the client actually sent, ready to apply to a row.

    An explicit ``null`` clears a field only when it is listed in
    ``nullable``; for every other field it is ignored.
    """
    nullable = set(nullable)
    changes = {}
    for key, value in update.model_dump(exclude_unset=True).items():
        if value is None and key not in nullable:
            continue
        changes[key] = _column_value(key, value)
    return changes


class BaseService:
    """Base class for services working on one user's data."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def ensure_category(self, user_id: int, category_id: int) -> Reference:
        """Raise unless ``category_id`` is one of the user's active categories."""
        row = await CategoryRepository(self.session).get_including_deleted(category_id, user_id)
        return ensure_active_reference(as_reference(row), "Category", user_id)

    async def ensure_account(self, user_id: int, account_id: int) -> Reference:
        """Raise unless ``account_id`` is one of the user's active accounts."""
        row = await AccountRepository(self.session).get_including_deleted(account_id, user_id)
        return ensure_active_reference(as_reference(row), "Account", user_id)
