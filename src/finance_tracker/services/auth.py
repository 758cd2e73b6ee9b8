"""User signup and login."""

import logging

from ..auth.security import create_access_token, hash_password, verify_password
from ..db.models import User
from ..db.repositories import UserRepository
from ..exceptions import AuthenticationError, ConflictError
from ..schemas.auth import SignupRequest
from .base import BaseService

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    """Creates users and issues access tokens."""

    async def signup(self, data: SignupRequest) -> User:
        repo = UserRepository(self.session)
        email = data.email.lower()

        if await repo.get_by_email(email):
            raise ConflictError("User with this email already exists")

        user = await repo.create(
            first_name=data.first_name,
            last_name=data.last_name,
            email=email,
            password_hash=hash_password(data.password),
        )
        logger.info(f"Created user {user.id}")
        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and return the user with a fresh token.

        Unknown email and wrong password produce the same error.
        """
        user = await UserRepository(self.session).get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Rejected login attempt")
            raise AuthenticationError("Invalid email or password")

        token = create_access_token(user.id, user.email)
        logger.info(f"User {user.id} logged in")
        return user, token
