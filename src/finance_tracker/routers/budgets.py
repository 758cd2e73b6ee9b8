"""Budget endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import CurrentUser
from ..db.engine import get_db
from ..dependencies import Now
from ..schemas.budgets import (
    Budget,
    BudgetCreate,
    BudgetFilters,
    BudgetList,
    BudgetStats,
    BudgetUpdate,
)
from ..schemas.common import MessageResponse, Pagination
from ..services import BudgetService

router = APIRouter(prefix="/budgets", tags=["Budgets"])


@router.post("", response_model=Budget, status_code=status.HTTP_201_CREATED)
async def create_budget(
    request: BudgetCreate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Budget:
    """Create a budget.

    Rejected with 409 if another budget for the same category overlaps the
    range (touching endpoints count as overlapping).
    """
    budget = await BudgetService(session).create(user.id, request)
    return Budget.model_validate(budget)


@router.get("", response_model=BudgetList)
async def list_budgets(
    filters: Annotated[BudgetFilters, Query()],
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> BudgetList:
    """List budgets."""
    page = await BudgetService(session).paginate(user.id, filters)
    return BudgetList(
        budgets=[Budget.model_validate(b) for b in page.items],
        pagination=Pagination.of(page),
    )


@router.get("/stats", response_model=BudgetStats)
async def get_budget_stats(
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> BudgetStats:
    """Budget totals by period and category."""
    return BudgetStats(**await BudgetService(session).stats(user.id))


@router.get("/current", response_model=list[Budget])
async def get_current_budgets(
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> list[Budget]:
    """Active budgets whose range contains the current time."""
    budgets = await BudgetService(session).current(user.id, now)
    return [Budget.model_validate(b) for b in budgets]


@router.get("/{budget_id}", response_model=Budget)
async def get_budget(
    budget_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Budget:
    """Get a specific budget by ID."""
    budget = await BudgetService(session).get(user.id, budget_id)
    return Budget.model_validate(budget)


@router.patch("/{budget_id}", response_model=Budget)
async def update_budget(
    budget_id: int,
    request: BudgetUpdate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Budget:
    """Update a budget; the merged result is re-validated."""
    budget = await BudgetService(session).update(user.id, budget_id, request)
    return Budget.model_validate(budget)


@router.delete("/{budget_id}", response_model=MessageResponse)
async def delete_budget(
    budget_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> MessageResponse:
    """Soft delete a budget."""
    await BudgetService(session).delete(user.id, budget_id, now)
    return MessageResponse(message="Budget deleted successfully")
