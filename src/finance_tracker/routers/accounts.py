"""Account endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import CurrentUser
from ..db.engine import get_db
from ..dependencies import Now
from ..schemas.accounts import (
    Account,
    AccountCreate,
    AccountFilters,
    AccountList,
    AccountUpdate,
    BalanceSummary,
)
from ..schemas.common import MessageResponse, Pagination
from ..services import AccountService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=Account, status_code=status.HTTP_201_CREATED)
async def create_account(
    request: AccountCreate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Account:
    """Create an account."""
    account = await AccountService(session).create(user.id, request)
    return Account.model_validate(account)


@router.get("", response_model=AccountList)
async def list_accounts(
    filters: Annotated[AccountFilters, Query()],
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> AccountList:
    """List accounts with filtering, sorting and pagination."""
    page = await AccountService(session).paginate(user.id, filters)
    return AccountList(
        accounts=[Account.model_validate(a) for a in page.items],
        pagination=Pagination.of(page),
    )


@router.get("/summary", response_model=BalanceSummary)
async def get_balance_summary(
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> BalanceSummary:
    """Net worth and total debt across active accounts."""
    return BalanceSummary(**await AccountService(session).summary(user.id))


@router.get("/{account_id}", response_model=Account)
async def get_account(
    account_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Account:
    """Get a specific account by ID."""
    account = await AccountService(session).get(user.id, account_id)
    return Account.model_validate(account)


@router.patch("/{account_id}", response_model=Account)
async def update_account(
    account_id: int,
    request: AccountUpdate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> Account:
    """Update an account."""
    account = await AccountService(session).update(user.id, account_id, request)
    return Account.model_validate(account)


@router.delete("/{account_id}", response_model=MessageResponse)
async def delete_account(
    account_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> MessageResponse:
    """Soft delete an account."""
    await AccountService(session).delete(user.id, account_id, now)
    return MessageResponse(message="Account deleted successfully")
