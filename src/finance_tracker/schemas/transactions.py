"""Transaction-related schemas."""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from .common import Pagination, PaginationParams, SortOrder, TransactionType, UTCDateTime

TransactionSortField = Literal["date", "amount", "created_at", "updated_at"]

Tag = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]


class TransactionCreate(BaseModel):
    """Schema for creating a transaction."""

    type: TransactionType = Field(description="Transaction type")
    amount: Decimal = Field(ge=0, description="Transaction amount")
    description: str = Field(min_length=1, max_length=500, description="What the money was for")
    date: UTCDateTime | None = Field(default=None, description="When it happened (defaults to now)")
    category_id: int = Field(description="Category ID")
    account_id: int = Field(description="Account ID")
    tags: list[Tag] = Field(default_factory=list, max_length=10, description="Free-form labels")


class TransactionUpdate(BaseModel):
    """Schema for updating a transaction."""

    type: TransactionType | None = Field(default=None, description="Transaction type")
    amount: Decimal | None = Field(default=None, ge=0, description="Transaction amount")
    description: str | None = Field(default=None, min_length=1, max_length=500, description="Description")
    date: UTCDateTime | None = Field(default=None, description="When it happened")
    category_id: int | None = Field(default=None, description="Category ID")
    account_id: int | None = Field(default=None, description="Account ID")
    tags: list[Tag] | None = Field(default=None, max_length=10, description="Free-form labels")


class Transaction(BaseModel):
    """Full transaction representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Transaction ID")
    type: str = Field(description="Transaction type")
    amount: Decimal = Field(description="Transaction amount")
    description: str = Field(description="What the money was for")
    date: UTCDateTime = Field(description="When it happened")
    category_id: int = Field(description="Category ID")
    account_id: int = Field(description="Account ID")
    tags: list[str] = Field(default_factory=list, description="Free-form labels")
    created_at: UTCDateTime | None = Field(default=None, description="Creation timestamp")
    updated_at: UTCDateTime | None = Field(default=None, description="Last update timestamp")


class TransactionList(BaseModel):
    """One page of transactions."""

    transactions: list[Transaction] = Field(description="Transactions on this page")
    pagination: Pagination


class TransactionFilters(PaginationParams):
    """Query parameters for listing transactions."""

    type: TransactionType | None = Field(default=None, description="Only this transaction type")
    category_id: int | None = Field(default=None, description="Only this category")
    account_id: int | None = Field(default=None, description="Only this account")
    start_date: UTCDateTime | None = Field(default=None, description="On or after this date")
    end_date: UTCDateTime | None = Field(default=None, description="On or before this date")
    min_amount: Decimal | None = Field(default=None, ge=0, description="Minimum amount")
    max_amount: Decimal | None = Field(default=None, ge=0, description="Maximum amount")
    sort_by: TransactionSortField = Field(default="date", description="Field to sort by")
    sort_order: SortOrder = Field(default="desc", description="Sort direction")
