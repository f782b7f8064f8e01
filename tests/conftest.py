"""Shared fixtures: an in-memory database and authenticated HTTP clients."""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from visapilot.core.security import create_access_token, get_password_hash
from visapilot.database import Database
from visapilot.features.auth.models import User
from visapilot.main import app


ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass-123"


@pytest.fixture
async def database():
    db = Database(AsyncMongoMockClient(), "visapilot_test")
    await db.connect()
    app.state.database = db
    yield db
    del app.state.database


@pytest.fixture
async def admin_user(database) -> User:
    user = User(
        email=ADMIN_EMAIL,
        name="Agency Admin",
        role="admin",
        password_hash=get_password_hash(ADMIN_PASSWORD),
    )
    await user.insert()
    return user


def session_headers(user: User) -> dict:
    token = create_access_token({"sub": str(user.id), "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def anon_client(database):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def client(admin_user):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=session_headers(admin_user),
    ) as client:
        yield client
