"""Regular (recurring) payment schemas."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core import Frequency
from .common import Pagination, PaginationParams, SortOrder, UTCDateTime
from .transactions import Tag

RegularPaymentSortField = Literal[
    "name", "amount", "frequency", "next_due_date", "end_date", "created_at", "updated_at"
]


class RegularPaymentCreate(BaseModel):
    """Schema for creating a regular payment."""

    name: str = Field(min_length=1, max_length=100, description="Payment name")
    description: str | None = Field(default=None, max_length=500, description="Free-form description")
    amount: Decimal = Field(ge=0, description="Amount paid each period")
    frequency: Frequency = Field(default=Frequency.MONTHLY, description="How often the payment recurs")
    category_id: int = Field(description="Category ID")
    account_id: int = Field(description="Account the payment is drawn from")
    next_due_date: UTCDateTime = Field(description="Next time the payment is due; must be in the future")
    end_date: UTCDateTime | None = Field(default=None, description="Last date the payment may fall on")
    is_active: bool = Field(default=True, description="Whether the payment is still running")
    tags: list[Tag] = Field(default_factory=list, max_length=10, description="Free-form labels")


class RegularPaymentUpdate(BaseModel):
    """Schema for updating a regular payment.

    Omitted fields keep their stored values. ``end_date`` may be sent as
    ``null`` to remove the end date.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100, description="Payment name")
    description: str | None = Field(default=None, max_length=500, description="Free-form description")
    amount: Decimal | None = Field(default=None, ge=0, description="Amount paid each period")
    frequency: Frequency | None = Field(default=None, description="How often the payment recurs")
    category_id: int | None = Field(default=None, description="Category ID")
    account_id: int | None = Field(default=None, description="Account ID")
    next_due_date: UTCDateTime | None = Field(default=None, description="Next time the payment is due")
    end_date: UTCDateTime | None = Field(default=None, description="Last date the payment may fall on")
    is_active: bool | None = Field(default=None, description="Whether the payment is still running")
    tags: list[Tag] | None = Field(default=None, max_length=10, description="Free-form labels")


class RegularPayment(BaseModel):
    """Full regular payment representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Regular payment ID")
    name: str = Field(description="Payment name")
    description: str | None = Field(default=None, description="Free-form description")
    amount: Decimal = Field(description="Amount paid each period")
    frequency: Frequency = Field(description="How often the payment recurs")
    category_id: int = Field(description="Category ID")
    account_id: int = Field(description="Account ID")
    next_due_date: UTCDateTime = Field(description="Next time the payment is due")
    end_date: UTCDateTime | None = Field(default=None, description="Last date the payment may fall on")
    is_active: bool = Field(description="Whether the payment is still running")
    tags: list[str] = Field(default_factory=list, description="Free-form labels")
    created_at: UTCDateTime | None = Field(default=None, description="Creation timestamp")
    updated_at: UTCDateTime | None = Field(default=None, description="Last update timestamp")


class RegularPaymentList(BaseModel):
    """One page of regular payments."""

    regular_payments: list[RegularPayment] = Field(description="Regular payments on this page")
    pagination: Pagination


class RegularPaymentFilters(PaginationParams):
    """Query parameters for listing regular payments."""

    is_active: bool | None = Field(default=None, description="Filter by active flag")
    category_id: int | None = Field(default=None, description="Only this category")
    account_id: int | None = Field(default=None, description="Only this account")
    frequency: Frequency | None = Field(default=None, description="Only this frequency")
    search: str | None = Field(default=None, max_length=100, description="Match name or description")
    sort_by: RegularPaymentSortField = Field(default="next_due_date", description="Field to sort by")
    sort_order: SortOrder = Field(default="asc", description="Sort direction")


class UpcomingPayments(BaseModel):
    """Active payments due within a window."""

    regular_payments: list[RegularPayment] = Field(description="Payments, soonest first")
    days: int = Field(description="Window size in days")


class PaymentSummary(BaseModel):
    """Per-payment line of the stats response."""

    id: int
    name: str
    amount: Decimal
    frequency: Frequency
    next_due_date: UTCDateTime
    category: str
    color: str
    account: str


class RegularPaymentStats(BaseModel):
    """Aggregated regular payment figures."""

    total_payments: int = Field(description="Number of payments")
    active_payments: int = Field(description="Number of active payments")
    total_monthly_amount: Decimal = Field(description="Sum of monthly equivalents")
    frequency_stats: dict[str, int] = Field(description="Payment count per frequency")
    category_stats: dict[str, Decimal] = Field(description="Amount per category name")
    upcoming_payments: int = Field(description="Payments due within the due-soon window")
    overdue_payments: int = Field(description="Payments past their due date")
    payments: list[PaymentSummary] = Field(description="One line per payment")
