from datetime import datetime, timedelta, timezone

import jwt
import pytest

from finance_tracker.auth.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from finance_tracker.config import settings

from .conftest import PASSWORD


def test_password_hash_round_trip():
    hashed = hash_password("Secret123!")

    assert hashed != "Secret123!"
    assert verify_password("Secret123!", hashed)
    assert not verify_password("secret123!", hashed)


def test_token_carries_user_and_expires():
    now = datetime.now(timezone.utc)
    payload = decode_access_token(create_access_token(7, "a@example.com", now))

    assert payload["user_id"] == 7
    assert payload["email"] == "a@example.com"
    assert payload["exp"] - payload["iat"] == settings.jwt_expires_hours * 3600


def test_expired_token_is_rejected():
    issued = datetime.now(timezone.utc) - timedelta(hours=settings.jwt_expires_hours + 1)

    with pytest.raises(jwt.ExpiredSignatureError):
        decode_access_token(create_access_token(7, "a@example.com", issued))


@pytest.mark.asyncio
async def test_signup_login_and_me(client):
    response = await client.post(
        "/auth/signup",
        json={"first_name": "Ada", "email": "Ada@Example.com", "password": PASSWORD},
    )
    assert response.status_code == 201
    user = response.json()
    assert user["email"] == "ada@example.com"
    assert "password_hash" not in user

    response = await client.post("/auth/login", json={"email": "ada@example.com", "password": PASSWORD})
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["id"] == user["id"]

    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert response.status_code == 200
    assert response.json()["first_name"] == "Ada"


@pytest.mark.asyncio
async def test_duplicate_email_conflicts(client, auth_headers):
    response = await client.post(
        "/auth/signup",
        json={"first_name": "Alice", "email": "ALICE@example.com", "password": PASSWORD},
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "User with this email already exists"


@pytest.mark.asyncio
async def test_weak_password_is_rejected(client):
    response = await client.post(
        "/auth/signup",
        json={"first_name": "Ada", "email": "ada@example.com", "password": "password"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, password",
    [("alice@example.com", "Wrong123!"), ("nobody@example.com", PASSWORD)],
)
async def test_bad_credentials(client, auth_headers, email, password):
    response = await client.post("/auth/login", json={"email": email, "password": password})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_resources_require_token(client):
    response = await client.get("/accounts")
    assert response.status_code == 401

    response = await client.get("/accounts", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
