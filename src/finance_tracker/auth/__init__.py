"""Authentication package for HTTP API."""

from .dependencies import CurrentUser, get_current_user
from .security import create_access_token, decode_access_token, hash_password, verify_password

__all__ = [
    "CurrentUser",
    "get_current_user",
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
]
