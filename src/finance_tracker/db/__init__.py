"""Database module for finance-tracker."""

from .engine import AsyncSessionLocal, engine, get_db
from .models import (
    Account,
    Base,
    Budget,
    Category,
    RegularPayment,
    Transaction,
    User,
)

__all__ = [
    "engine",
    "AsyncSessionLocal",
    "get_db",
    "Base",
    "User",
    "Account",
    "Category",
    "Transaction",
    "Budget",
    "RegularPayment",
]
