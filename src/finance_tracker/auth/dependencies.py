"""FastAPI dependencies for bearer token authentication."""

import logging
from typing import Annotated

import jwt
from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.engine import get_db
from ..db.models import User
from ..db.repositories import UserRepository
from ..exceptions import AuthenticationError
from .security import decode_access_token

logger = logging.getLogger(__name__)

# Bearer token security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Security(security)],
    session: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Resolve the bearer token to a live user.

    Every resource router depends on this; the resulting ``user.id`` scopes
    all queries.
    """
    if credentials is None:
        raise AuthenticationError("Token not found")

    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError as e:
        logger.info(f"Rejected access token: {e}")
        raise AuthenticationError("Invalid or expired token") from e

    user_id = payload.get("user_id")
    if not isinstance(user_id, int):
        raise AuthenticationError("Cannot decode token")

    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise AuthenticationError("User no longer exists")

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
