"""Authentication request/response schemas."""

import re

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .common import UTCDateTime

NAME_PATTERN = r"^[A-Za-z ]+$"


class SignupRequest(BaseModel):
    """Request body for the signup endpoint."""

    first_name: str = Field(min_length=1, max_length=255, pattern=NAME_PATTERN, description="First name")
    last_name: str | None = Field(default=None, max_length=255, pattern=NAME_PATTERN, description="Last name")
    email: EmailStr = Field(description="Login email")
    password: str = Field(min_length=8, max_length=25, description="Account password")

    @field_validator("password")
    @classmethod
    def password_complexity(cls, value: str) -> str:
        if not re.search(r"[a-z]", value):
            raise ValueError("Password must contain at least one lowercase letter")
        if not re.search(r"[A-Z]", value):
            raise ValueError("Password must contain at least one uppercase letter")
        if not re.search(r"\d", value):
            raise ValueError("Password must contain at least one number")
        if not re.search(r"[^A-Za-z0-9]", value):
            raise ValueError("Password must contain at least one special character")
        return value


class LoginRequest(BaseModel):
    """Request body for the login endpoint."""

    email: EmailStr = Field(description="Login email")
    password: str = Field(min_length=1, description="Account password")


class User(BaseModel):
    """Public user representation (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="User ID")
    first_name: str = Field(description="First name")
    last_name: str | None = Field(default=None, description="Last name")
    email: str = Field(description="Login email")
    created_at: UTCDateTime | None = Field(default=None, description="When the user signed up")


class LoginResponse(BaseModel):
    """Response from successful login."""

    user: User = Field(description="Authenticated user")
    token: str = Field(description="Bearer token for subsequent requests")
