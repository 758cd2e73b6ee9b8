"""Resource services: load rows, apply domain rules, persist."""

from .accounts import AccountService
from .auth import AuthService
from .budgets import BudgetService
from .categories import CategoryService
from .regular_payments import RegularPaymentService
from .transactions import TransactionService

__all__ = [
    "AccountService",
    "AuthService",
    "BudgetService",
    "CategoryService",
    "RegularPaymentService",
    "TransactionService",
]
