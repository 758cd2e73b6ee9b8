import os

# Settings are read at import time, so these must be set first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from finance_tracker.db.engine import get_db
from finance_tracker.db.models import Base
from finance_tracker.dependencies import get_clock
from finance_tracker.main import app

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
PASSWORD = "Secret123!"


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, expire_on_commit=False, autoflush=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: NOW

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test/api") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def set_clock(client):
    """Move the request clock to another instant for the rest of the test."""

    def move(when: datetime) -> None:
        app.dependency_overrides[get_clock] = lambda: when

    return move


async def signup_and_login(client: AsyncClient, email: str) -> dict[str, str]:
    response = await client.post(
        "/auth/signup",
        json={"first_name": "Test", "last_name": "User", "email": email, "password": PASSWORD},
    )
    assert response.status_code == 201, response.text

    response = await client.post("/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest_asyncio.fixture
async def auth_headers(client):
    return await signup_and_login(client, "alice@example.com")


@pytest_asyncio.fixture
async def other_headers(client):
    return await signup_and_login(client, "bob@example.com")


@pytest_asyncio.fixture
async def category(client, auth_headers):
    response = await client.post(
        "/categories",
        json={"name": "Housing", "color": "#FF5733"},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest_asyncio.fixture
async def account(client, auth_headers):
    response = await client.post(
        "/accounts",
        json={"name": "Main checking", "type": "checking", "balance": "1500.00"},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
