"""Category-related schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.stats import DEFAULT_COLOR
from .common import Pagination, PaginationParams, SortOrder, UTCDateTime

CategorySortField = Literal["name", "created_at", "updated_at"]

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    name: str = Field(min_length=1, max_length=100, description="Category name, unique per user")
    description: str | None = Field(default=None, max_length=500, description="Free-form description")
    color: str = Field(default=DEFAULT_COLOR, pattern=HEX_COLOR, description="Hex color, e.g. #FF5733")
    icon: str = Field(default="category", max_length=50, description="Icon name")
    is_active: bool = Field(default=True, description="Whether the category is in use")


class CategoryUpdate(BaseModel):
    """Schema for updating a category."""

    name: str | None = Field(default=None, min_length=1, max_length=100, description="Category name")
    description: str | None = Field(default=None, max_length=500, description="Free-form description")
    color: str | None = Field(default=None, pattern=HEX_COLOR, description="Hex color")
    icon: str | None = Field(default=None, max_length=50, description="Icon name")
    is_active: bool | None = Field(default=None, description="Whether the category is in use")


class Category(BaseModel):
    """Full category representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Category ID")
    name: str = Field(description="Category name")
    description: str | None = Field(default=None, description="Free-form description")
    color: str = Field(description="Hex color")
    icon: str = Field(description="Icon name")
    is_active: bool = Field(description="Whether the category is in use")
    created_at: UTCDateTime | None = Field(default=None, description="Creation timestamp")
    updated_at: UTCDateTime | None = Field(default=None, description="Last update timestamp")


class CategoryList(BaseModel):
    """One page of categories."""

    categories: list[Category] = Field(description="Categories on this page")
    pagination: Pagination


class CategoryStats(BaseModel):
    """Category counts."""

    total_categories: int = Field(description="Number of categories")
    active_categories: int = Field(description="Number of active categories")


class CategoryFilters(PaginationParams):
    """Query parameters for listing categories."""

    is_active: bool | None = Field(default=None, description="Filter by active flag")
    search: str | None = Field(default=None, max_length=100, description="Match name or description")
    sort_by: CategorySortField = Field(default="created_at", description="Field to sort by")
    sort_order: SortOrder = Field(default="desc", description="Sort direction")
