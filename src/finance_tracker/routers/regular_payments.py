"""Regular payment endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import CurrentUser
from ..config import settings
from ..db.engine import get_db
from ..dependencies import Now
from ..schemas.common import MessageResponse, Pagination
from ..schemas.regular_payments import (
    RegularPayment,
    RegularPaymentCreate,
    RegularPaymentFilters,
    RegularPaymentList,
    RegularPaymentStats,
    RegularPaymentUpdate,
    UpcomingPayments,
)
from ..services import RegularPaymentService

router = APIRouter(prefix="/regular-payments", tags=["Regular Payments"])


@router.post("", response_model=RegularPayment, status_code=status.HTTP_201_CREATED)
async def create_regular_payment(
    request: RegularPaymentCreate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> RegularPayment:
    """Create a regular payment. The first due date must be in the future."""
    payment = await RegularPaymentService(session).create(user.id, request, now)
    return RegularPayment.model_validate(payment)


@router.get("", response_model=RegularPaymentList)
async def list_regular_payments(
    filters: Annotated[RegularPaymentFilters, Query()],
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> RegularPaymentList:
    """List regular payments, soonest due first by default."""
    page = await RegularPaymentService(session).paginate(user.id, filters)
    return RegularPaymentList(
        regular_payments=[RegularPayment.model_validate(p) for p in page.items],
        pagination=Pagination.of(page),
    )


@router.get("/stats", response_model=RegularPaymentStats)
async def get_regular_payment_stats(
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> RegularPaymentStats:
    """Monthly totals, frequency/category breakdowns and due counts."""
    return RegularPaymentStats(**await RegularPaymentService(session).stats(user.id, now))


@router.get("/upcoming", response_model=UpcomingPayments)
async def get_upcoming_payments(
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
    days: int = Query(default=settings.upcoming_days_default, ge=1, le=365, description="Window size in days"),
) -> UpcomingPayments:
    """Active payments due within the next ``days`` days, including overdue ones."""
    payments = await RegularPaymentService(session).upcoming(user.id, now, days)
    return UpcomingPayments(
        regular_payments=[RegularPayment.model_validate(p) for p in payments],
        days=days,
    )


@router.get("/{payment_id}", response_model=RegularPayment)
async def get_regular_payment(
    payment_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> RegularPayment:
    """Get a specific regular payment by ID."""
    payment = await RegularPaymentService(session).get(user.id, payment_id)
    return RegularPayment.model_validate(payment)


@router.patch("/{payment_id}/next-due-date", response_model=RegularPayment)
async def roll_over_regular_payment(
    payment_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> RegularPayment:
    """Mark the current occurrence as paid and move to the next one.

    The due date advances one period from its current value. If that passes
    the end date the payment is deactivated; an inactive payment answers 404.
    """
    payment = await RegularPaymentService(session).roll_over(user.id, payment_id)
    return RegularPayment.model_validate(payment)


@router.patch("/{payment_id}", response_model=RegularPayment)
async def update_regular_payment(
    payment_id: int,
    request: RegularPaymentUpdate,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> RegularPayment:
    """Update a regular payment; the merged schedule is re-validated."""
    payment = await RegularPaymentService(session).update(user.id, payment_id, request, now)
    return RegularPayment.model_validate(payment)


@router.delete("/{payment_id}", response_model=MessageResponse)
async def delete_regular_payment(
    payment_id: int,
    user: CurrentUser,
    session: Annotated[AsyncSession, Depends(get_db)],
    now: Now,
) -> MessageResponse:
    """Soft delete a regular payment."""
    await RegularPaymentService(session).delete(user.id, payment_id, now)
    return MessageResponse(message="Regular payment deleted successfully")
