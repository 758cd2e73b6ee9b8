"""Transaction endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import CurrentUser
from ..db.engine import get_db
from ..dependencies import Now
from ..schemas.common import MessageResponse, Pagination
from ..schemas.transactions import (
    Transaction,
    TransactionCreate,
    TransactionFilters,
    TransactionList,
    TransactionUpdate,
)
from ..services import TransactionService

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("", response_model=Transaction, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    request: TransactionCreate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> Transaction:
    """Record a transaction against an active category and account."""
    transaction = await TransactionService(session).create(user.id, request, now)
    return Transaction.model_validate(transaction)


@router.get("", response_model=TransactionList)
async def list_transactions(
    filters: Annotated[TransactionFilters, Query()],
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> TransactionList:
    """List transactions, newest first by default."""
    page = await TransactionService(session).paginate(user.id, filters)
    return TransactionList(
        transactions=[Transaction.model_validate(t) for t in page.items],
        pagination=Pagination.of(page),
    )


@router.get("/{transaction_id}", response_model=Transaction)
async def get_transaction(
    transaction_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Transaction:
    """Get a specific transaction by ID."""
    transaction = await TransactionService(session).get(user.id, transaction_id)
    return Transaction.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=Transaction)
async def update_transaction(
    transaction_id: int,
    request: TransactionUpdate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Transaction:
    """Update a transaction."""
    transaction = await TransactionService(session).update(user.id, transaction_id, request)
    return Transaction.model_validate(transaction)


@router.delete("/{transaction_id}", response_model=MessageResponse)
async def delete_transaction(
    transaction_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> MessageResponse:
    """Soft delete a transaction."""
    await TransactionService(session).delete(user.id, transaction_id, now)
    return MessageResponse(message="Transaction deleted successfully")
