"""Account-related schemas."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .common import AccountType, Pagination, PaginationParams, SortOrder, UTCDateTime

AccountSortField = Literal["name", "type", "balance", "created_at", "updated_at"]


class AccountCreate(BaseModel):
    """Schema for creating an account."""

    name: str = Field(min_length=1, max_length=256, description="Account name")
    type: AccountType = Field(description="Type of account")
    balance: Decimal = Field(default=Decimal("0"), description="Current balance (negative for debt)")
    description: str | None = Field(default=None, max_length=500, description="Free-form description")
    account_number: str | None = Field(default=None, max_length=50, description="Bank account number")
    is_active: bool = Field(default=True, description="Whether the account is in use")


class AccountUpdate(BaseModel):
    """Schema for updating an account."""

    name: str | None = Field(default=None, min_length=1, max_length=256, description="Account name")
    type: AccountType | None = Field(default=None, description="Type of account")
    balance: Decimal | None = Field(default=None, description="Current balance")
    description: str | None = Field(default=None, max_length=500, description="Free-form description")
    account_number: str | None = Field(default=None, max_length=50, description="Bank account number")
    is_active: bool | None = Field(default=None, description="Whether the account is in use")


class Account(BaseModel):
    """Full account representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Account ID")
    name: str = Field(description="Account name")
    type: str = Field(description="Type of account")
    balance: Decimal = Field(description="Current balance")
    description: str | None = Field(default=None, description="Free-form description")
    account_number: str | None = Field(default=None, description="Bank account number")
    is_active: bool = Field(description="Whether the account is in use")
    created_at: UTCDateTime | None = Field(default=None, description="Creation timestamp")
    updated_at: UTCDateTime | None = Field(default=None, description="Last update timestamp")


class AccountList(BaseModel):
    """One page of accounts."""

    accounts: list[Account] = Field(description="Accounts on this page")
    pagination: Pagination


class BalanceSummary(BaseModel):
    """Balance totals across active accounts."""

    total_debt: Decimal = Field(description="Sum of negative balances")
    net_worth: Decimal = Field(description="Sum of all balances")
    total_accounts: int = Field(description="Number of active accounts")


class AccountFilters(PaginationParams):
    """Query parameters for listing accounts."""

    type: AccountType | None = Field(default=None, description="Only accounts of this type")
    is_active: bool | None = Field(default=None, description="Filter by active flag")
    min_balance: Decimal | None = Field(default=None, description="Minimum balance")
    max_balance: Decimal | None = Field(default=None, description="Maximum balance")
    sort_by: AccountSortField = Field(default="created_at", description="Field to sort by")
    sort_order: SortOrder = Field(default="desc", description="Sort direction")
