"""Category endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import CurrentUser
from ..db.engine import get_db
from ..dependencies import Now
from ..schemas.categories import (
    Category,
    CategoryCreate,
    CategoryFilters,
    CategoryList,
    CategoryStats,
    CategoryUpdate,
)
from ..schemas.common import MessageResponse, Pagination
from ..services import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryCreate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Category:
    """Create a category. Names must be unique (ignoring case)."""
    category = await CategoryService(session).create(user.id, request)
    return Category.model_validate(category)


@router.get("", response_model=CategoryList)
async def list_categories(
    filters: Annotated[CategoryFilters, Query()],
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> CategoryList:
    """List categories."""
    page = await CategoryService(session).paginate(user.id, filters)
    return CategoryList(
        categories=[Category.model_validate(c) for c in page.items],
        pagination=Pagination.of(page),
    )


@router.get("/stats", response_model=CategoryStats)
async def get_category_stats(
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> CategoryStats:
    return CategoryStats(**await CategoryService(session).stats(user.id))


@router.get("/{category_id}", response_model=Category)
async def get_category(
    category_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Category:
    """Get a specific category by ID."""
    category = await CategoryService(session).get(user.id, category_id)
    return Category.model_validate(category)


@router.patch("/{category_id}", response_model=Category)
async def update_category(
    category_id: int,
    request: CategoryUpdate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Category:
    """Update a category."""
    category = await CategoryService(session).update(user.id, category_id, request)
    return Category.model_validate(category)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> MessageResponse:
    """Soft delete a category."""
    await CategoryService(session).delete(user.id, category_id, now)
    return MessageResponse(message="Category deleted successfully")
