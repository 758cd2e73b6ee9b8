"""Shared enums and common schemas."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field

from ..config import settings
from ..core import as_utc

if TYPE_CHECKING:
    from ..db.repositories import Page

# Naive input is taken as UTC; everything leaves the API as aware UTC
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class AccountType(str, Enum):
    """Kinds of money account a user can track."""

    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT_CARD = "creditCard"
    CASH = "cash"
    OTHER = "other"


class TransactionType(str, Enum):
    """Direction of a transaction."""

    EXPENSE = "expense"
    INCOME = "income"
    TRANSFER = "transfer"
    ADJUSTMENT = "adjustment"


SortOrder = Literal["asc", "desc"]


class PaginationParams(BaseModel):
    """Common pagination parameters."""

    page: int = Field(default=1, ge=1, description="Page number, starting at 1")
    limit: int = Field(
        default=settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Maximum number of items per page",
    )


class Pagination(BaseModel):
    """Pagination metadata returned with every list."""

    current_page: int = Field(description="Page returned")
    total_pages: int = Field(description="Number of pages available")
    total_count: int = Field(description="Number of matching items")
    limit: int = Field(description="Page size used")

    @classmethod
    def of(cls, page: "Page") -> "Pagination":
        return cls(
            current_page=page.page,
            total_pages=page.total_pages,
            total_count=page.total_count,
            limit=page.limit,
        )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(description="Human-readable result")
