"""Password hashing and access token encoding."""

from datetime import datetime, timedelta

import bcrypt
import jwt

from ..config import settings
from ..core import utcnow


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against its bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def create_access_token(user_id: int, email: str, now: datetime | None = None) -> str:
    """Issue a signed token identifying the user.

    Token times follow the system clock, which is what PyJWT verifies
    ``exp`` and ``iat`` against.
    """
    now = now or utcnow()
    payload = {
        "sub": str(user_id),
        "user_id": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(hours=settings.jwt_expires_hours),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """Decode and verify a token.

    Raises:
        jwt.PyJWTError: if the token is malformed, tampered with or expired.
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
