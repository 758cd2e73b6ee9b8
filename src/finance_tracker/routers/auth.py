"""Signup, login and current-user endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import CurrentUser
from ..db.engine import get_db
from ..schemas.auth import LoginRequest, LoginResponse, SignupRequest, User
from ..services import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=User, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Register a new user."""
    user = await AuthService(session).signup(request)
    return User.model_validate(user)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> LoginResponse:
    """Exchange email and password for a bearer token."""
    user, token = await AuthService(session).login(request.email, request.password)
    return LoginResponse(user=User.model_validate(user), token=token)


@router.get("/me", response_model=User)
async def me(user: CurrentUser) -> User:
    """Get the authenticated user."""
    return User.model_validate(user)
