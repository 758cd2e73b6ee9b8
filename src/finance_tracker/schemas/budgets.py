"""Budget-related schemas."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core import Frequency
from .common import Pagination, PaginationParams, SortOrder, UTCDateTime

BudgetSortField = Literal["name", "amount", "period", "start_date", "end_date", "created_at", "updated_at"]


class BudgetCreate(BaseModel):
    """Schema for creating a budget."""

    category_id: int = Field(description="Category the budget limits")
    name: str = Field(min_length=1, max_length=100, description="Budget name")
    description: str | None = Field(default=None, max_length=500, description="Free-form description")
    amount: Decimal = Field(ge=0, description="Spending limit")
    period: Frequency = Field(default=Frequency.MONTHLY, description="Budget period")
    start_date: UTCDateTime = Field(description="First instant covered")
    end_date: UTCDateTime = Field(description="Last instant covered")
    is_active: bool = Field(default=True, description="Whether the budget is in use")


class BudgetUpdate(BaseModel):
    """Schema for updating a budget.

    Omitted fields keep their stored values; the merged budget is validated
    as a whole.
    """

    category_id: int | None = Field(default=None, description="Category the budget limits")
    name: str | None = Field(default=None, min_length=1, max_length=100, description="Budget name")
    description: str | None = Field(default=None, max_length=500, description="Free-form description")
    amount: Decimal | None = Field(default=None, ge=0, description="Spending limit")
    period: Frequency | None = Field(default=None, description="Budget period")
    start_date: UTCDateTime | None = Field(default=None, description="First instant covered")
    end_date: UTCDateTime | None = Field(default=None, description="Last instant covered")
    is_active: bool | None = Field(default=None, description="Whether the budget is in use")


class Budget(BaseModel):
    """Full budget representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Budget ID")
    category_id: int = Field(description="Category the budget limits")
    name: str = Field(description="Budget name")
    description: str | None = Field(default=None, description="Free-form description")
    amount: Decimal = Field(description="Spending limit")
    period: Frequency = Field(description="Budget period")
    start_date: UTCDateTime = Field(description="First instant covered")
    end_date: UTCDateTime = Field(description="Last instant covered")
    is_active: bool = Field(description="Whether the budget is in use")
    created_at: UTCDateTime | None = Field(default=None, description="Creation timestamp")
    updated_at: UTCDateTime | None = Field(default=None, description="Last update timestamp")


class BudgetList(BaseModel):
    """One page of budgets."""

    budgets: list[Budget] = Field(description="Budgets on this page")
    pagination: Pagination


class BudgetFilters(PaginationParams):
    """Query parameters for listing budgets."""

    is_active: bool | None = Field(default=None, description="Filter by active flag")
    category_id: int | None = Field(default=None, description="Only this category")
    period: Frequency | None = Field(default=None, description="Only this period")
    search: str | None = Field(default=None, max_length=100, description="Match name or description")
    sort_by: BudgetSortField = Field(default="created_at", description="Field to sort by")
    sort_order: SortOrder = Field(default="desc", description="Sort direction")


class BudgetSummary(BaseModel):
    """Per-budget line of the stats response."""

    id: int
    name: str
    amount: Decimal
    period: Frequency
    category: str
    color: str


class BudgetStats(BaseModel):
    """Aggregated budget figures."""

    total_budgets: int = Field(description="Number of budgets")
    active_budgets: int = Field(description="Number of active budgets")
    total_budget_amount: Decimal = Field(description="Sum of all budget amounts")
    period_stats: dict[str, int] = Field(description="Budget count per period")
    category_stats: dict[str, Decimal] = Field(description="Budget amount per category name")
    budgets: list[BudgetSummary] = Field(description="One line per budget")
