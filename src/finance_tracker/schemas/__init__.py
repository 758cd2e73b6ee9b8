"""Pydantic schemas for the finance tracker API."""

from .accounts import Account, AccountCreate, AccountFilters, AccountList, AccountUpdate, BalanceSummary
from .auth import LoginRequest, LoginResponse, SignupRequest, User
from .budgets import Budget, BudgetCreate, BudgetFilters, BudgetList, BudgetStats, BudgetUpdate
from .categories import Category, CategoryCreate, CategoryFilters, CategoryList, CategoryStats, CategoryUpdate
from .common import AccountType, MessageResponse, Pagination, PaginationParams, TransactionType
from .regular_payments import (
    RegularPayment,
    RegularPaymentCreate,
    RegularPaymentFilters,
    RegularPaymentList,
    RegularPaymentStats,
    RegularPaymentUpdate,
    UpcomingPayments,
)
from .transactions import (
    Transaction,
    TransactionCreate,
    TransactionFilters,
    TransactionList,
    TransactionUpdate,
)

__all__ = [
    # Common
    "AccountType",
    "TransactionType",
    "Pagination",
    "PaginationParams",
    "MessageResponse",
    # Auth
    "SignupRequest",
    "LoginRequest",
    "LoginResponse",
    "User",
    # Accounts
    "Account",
    "AccountCreate",
    "AccountUpdate",
    "AccountFilters",
    "AccountList",
    "BalanceSummary",
    # Categories
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryFilters",
    "CategoryList",
    "CategoryStats",
    # Transactions
    "Transaction",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionFilters",
    "TransactionList",
    # Budgets
    "Budget",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetFilters",
    "BudgetList",
    "BudgetStats",
    # Regular payments
    "RegularPayment",
    "RegularPaymentCreate",
    "RegularPaymentUpdate",
    "RegularPaymentFilters",
    "RegularPaymentList",
    "RegularPaymentStats",
    "UpcomingPayments",
]
