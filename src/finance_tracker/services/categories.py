"""Category operations."""

import logging
from datetime import datetime

from ..core import NotFoundError
from ..core.stats import category_stats
from ..db.models import Category
from ..db.repositories import CategoryRepository, Page
from ..exceptions import ConflictError
from ..schemas.categories import CategoryCreate, CategoryFilters, CategoryUpdate
from .base import BaseService, changes_from, values_from

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Category with this name already exists"


class CategoryService(BaseService):
    """Categories belonging to one user. Names are unique per user, ignoring case."""

    @property
    def repo(self) -> CategoryRepository:
        return CategoryRepository(self.session)

    async def create(self, user_id: int, data: CategoryCreate) -> Category:
        if await self.repo.find_by_name(user_id, data.name):
            raise ConflictError(DUPLICATE_NAME)

        category = await self.repo.create(user_id, **values_from(data))
        logger.info(f"Created category {category.id} for user {user_id}")
        return category

    async def paginate(self, user_id: int, filters: CategoryFilters) -> Page[Category]:
        conditions = []
        if filters.is_active is not None:
            conditions.append(Category.is_active == filters.is_active)
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

    async def get(self, user_id: int, category_id: int) -> Category:
        category = await self.repo.get(category_id, user_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    async def update(self, user_id: int, category_id: int, data: CategoryUpdate) -> Category:
        category = await self.get(user_id, category_id)
        changes = changes_from(data, nullable=("description",))

        if "name" in changes and await self.repo.find_by_name(user_id, changes["name"], exclude_id=category_id):
            raise ConflictError(DUPLICATE_NAME)

        return await self.repo.update(category, changes)

    async def delete(self, user_id: int, category_id: int, now: datetime) -> None:
        category = await self.get(user_id, category_id)
        await self.repo.soft_delete(category, now)
        logger.info(f"Deleted category {category_id} for user {user_id}")

    async def stats(self, user_id: int) -> dict[str, int]:
        categories = await self.repo.get_all(user_id)
        return category_stats(c.is_active for c in categories)
