"""API routers."""

from .accounts import router as accounts_router
from .auth import router as auth_router
from .budgets import router as budgets_router
from .categories import router as categories_router
from .regular_payments import router as regular_payments_router
from .transactions import router as transactions_router

__all__ = [
    "accounts_router",
    "auth_router",
    "budgets_router",
    "categories_router",
    "regular_payments_router",
    "transactions_router",
]
