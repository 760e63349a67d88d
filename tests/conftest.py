# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read on first import, so the test environment must be set first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_TO_FILE"] = "false"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key-for-bloglist"
os.environ["CLIENT_RETRY_BASE_DELAY"] = "0"
os.environ["CLIENT_RETRY_MAX_DELAY"] = "0"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from bloglist.db import async_session_maker, close_db, init_db  # noqa: E402
from bloglist.main import app  # noqa: E402
from bloglist.managers import hash_password  # noqa: E402
from bloglist.managers.rate_limiter import limiter  # noqa: E402
from bloglist.managers.token_manager import create_access_token  # noqa: E402
from bloglist.models import BlogDB, UserDB  # noqa: E402

TEST_PASSWORD = "salsa"

INITIAL_BLOGS = [
    {"title": "Liisa Karjalassa", "author": "Pekka von Puurtimo", "url": "test.fi/1", "likes": 1},
    {"title": "Pekka ihmemaassa", "author": "Pekka Puurtimo", "url": "booky.com", "likes": 2},
]


@pytest.fixture
async def db() -> AsyncGenerator[None]:
    """Create the schema in a fresh in-memory database and drop it afterwards."""
    await init_db()
    yield
    app.dependency_overrides = {}
    await close_db()


@pytest.fixture
async def session(db: None) -> AsyncGenerator[AsyncSession]:
    """Open a session against the test database."""
    async with async_session_maker() as s:
        yield s


@pytest.fixture
async def client(db: None) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = True


@pytest.fixture
async def seeded_blogs(db: None) -> list[BlogDB]:
    """Store the two ownerless starting blogs."""
    async with async_session_maker() as s:
        blogs = [BlogDB(**data) for data in INITIAL_BLOGS]
        s.add_all(blogs)
        await s.commit()
    return blogs


async def _store_user(username: str, name: str) -> UserDB:
    async with async_session_maker() as s:
        user = UserDB(
            username=username,
            name=name,
            password_hash=await hash_password(TEST_PASSWORD),
        )
        s.add(user)
        await s.commit()
    return user


@pytest.fixture
async def test_user(db: None) -> UserDB:
    """Store a user whose password is `TEST_PASSWORD`."""
    return await _store_user("pedro123", "Pedro")


@pytest.fixture
async def other_user(db: None) -> UserDB:
    """Store a second user."""
    return await _store_user("mluukkai", "Matti Luukkainen")


@pytest.fixture
def auth_headers(test_user: UserDB) -> dict[str, str]:
    """Create auth headers with a valid access token for `test_user`."""
    token = create_access_token(user_id=test_user.id, username=test_user.username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(other_user: UserDB) -> dict[str, str]:
    """Create auth headers for `other_user`."""
    token = create_access_token(user_id=other_user.id, username=other_user.username)
    return {"Authorization": f"bearer {token}"}
