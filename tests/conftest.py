"""
Shared fixtures: an in-memory SQLite database behind the real app.

Settings are read at import time, so the environment is prepared before
anything from skilltrade is imported.
"""
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import skilltrade.models  # noqa: F401
from skilltrade.core.database import Base, get_db
from skilltrade.main import app

PASSWORD = "Password123"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


class Member:
    """A registered user as seen by the tests."""

    def __init__(self, body: dict):
        self.body = body
        self.id = body["user"]["id"]
        self.email = body["user"]["email"]
        self.headers = {"Authorization": f"Bearer {body['access_token']}"}


@pytest.fixture
def register(client):
    async def _register(email, first_name="Test", last_name="User", password=PASSWORD):
        resp = await client.post(
            "/api/auth/register",
            json={
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "password": password,
                "confirm_password": password,
            },
        )
        assert resp.status_code == 201, resp.text
        return Member(resp.json())

    return _register


@pytest.fixture
def add_skill(client):
    async def _add_skill(member, name, type="offering", **extra):
        resp = await client.post(
            "/api/skills",
            json={"name": name, "type": type, **extra},
            headers=member.headers,
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _add_skill


@pytest.fixture
def swipe(client):
    async def _swipe(member, target, action="like"):
        resp = await client.post(
            "/api/matches",
            json={"target_user_id": target.id, "action": action},
            headers=member.headers,
        )
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _swipe


@pytest.fixture
def matched_pair(register, swipe):
    """Two members who liked each other."""

    async def _matched_pair(first="alice@skilltrade.io", second="bob@skilltrade.io"):
        alice = await register(first, first_name="Alice", last_name="Archer")
        bob = await register(second, first_name="Bob", last_name="Baker")
        await swipe(alice, bob)
        result = await swipe(bob, alice)
        assert result["is_match"] is True
        return alice, bob

    return _matched_pair
