# tests/repositories/test_blog_repository.py
"""Tests for BlogRepository against an in-memory database."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.errors import (
    AuthorizationError,
    BlogNotFoundError,
    DatabaseConnectionError,
    ValidationError,
)
from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.schemas import BlogCreate, BlogUpdate


@pytest.fixture
def repo(session: AsyncSession) -> BlogRepository:
    return BlogRepository(session)


@pytest.fixture
async def owner(session: AsyncSession) -> UserDB:
    return await UserRepository(session).create("pedro123", "Pedro", "not-a-real-hash")


class TestCreate:
    """Tests for BlogRepository.create."""

    @pytest.mark.asyncio
    async def test_defaults_likes_to_zero(self, repo: BlogRepository, owner: UserDB) -> None:
        blog = await repo.create(BlogCreate(title="A", url="u1"), owner.id)

        assert blog.likes == 0
        assert blog.user_id == owner.id
        assert blog.user is not None
        assert blog.user.username == "pedro123"

    @pytest.mark.asyncio
    async def test_keeps_given_likes(self, repo: BlogRepository, owner: UserDB) -> None:
        blog = await repo.create(BlogCreate(title="A", url="u1", likes=7), owner.id)

        assert blog.likes == 7

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("title", "url"), [("", "u1"), ("A", "   ")])
    async def test_blank_fields_rejected_before_write(
        self,
        repo: BlogRepository,
        owner: UserDB,
        title: str,
        url: str,
    ) -> None:
        # model_construct skips schema validation to reach the repository check
        payload = BlogCreate.model_construct(title=title, url=url, author=None, likes=None)

        with pytest.raises(ValidationError):
            await repo.create(payload, owner.id)

        assert await repo.count() == 0


class TestReadAndUpdate:
    """Tests for BlogRepository.list_all, get and update."""

    @pytest.mark.asyncio
    async def test_list_all_returns_oldest_first(
        self,
        repo: BlogRepository,
        owner: UserDB,
    ) -> None:
        for title in ("first", "second", "third"):
            await repo.create(BlogCreate(title=title, url=f"{title}.fi"), owner.id)

        blogs = await repo.list_all()

        assert [blog.title for blog in blogs] == ["first", "second", "third"]
        assert await repo.count() == 3

    @pytest.mark.asyncio
    async def test_list_all_breaks_timestamp_ties_by_id(
        self,
        repo: BlogRepository,
        session: AsyncSession,
    ) -> None:
        created_at = datetime(2024, 1, 1, tzinfo=UTC)
        for n in (3, 1, 2):
            session.add(
                BlogDB(id=UUID(int=n), title=f"blog {n}", url=f"{n}.fi", created_at=created_at),
            )
        await session.flush()

        blogs = await repo.list_all()

        assert [blog.id for blog in blogs] == [UUID(int=1), UUID(int=2), UUID(int=3)]

    @pytest.mark.asyncio
    async def test_get_unknown_id_raises(self, repo: BlogRepository) -> None:
        with pytest.raises(BlogNotFoundError):
            await repo.get(uuid4())

    @pytest.mark.asyncio
    async def test_get_malformed_id_raises_not_found(self, repo: BlogRepository) -> None:
        with pytest.raises(BlogNotFoundError):
            await repo.get("5a3d5da59070081a82a3445")

    @pytest.mark.asyncio
    async def test_update_sets_likes(self, repo: BlogRepository, owner: UserDB) -> None:
        blog = await repo.create(BlogCreate(title="A", url="u1"), owner.id)

        updated = await repo.update(str(blog.id), BlogUpdate(likes=42))

        assert updated.likes == 42
        assert (await repo.get(blog.id)).likes == 42

    @pytest.mark.asyncio
    async def test_update_unknown_id_raises(self, repo: BlogRepository) -> None:
        with pytest.raises(BlogNotFoundError):
            await repo.update(uuid4(), BlogUpdate(likes=1))


class TestRemove:
    """Tests for BlogRepository.remove."""

    @pytest.mark.asyncio
    async def test_owner_removes_blog(self, repo: BlogRepository, owner: UserDB) -> None:
        blog = await repo.create(BlogCreate(title="A", url="u1"), owner.id)

        await repo.remove(blog.id, owner.id)

        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_other_caller_is_refused(self, repo: BlogRepository, owner: UserDB) -> None:
        blog = await repo.create(BlogCreate(title="A", url="u1"), owner.id)

        with pytest.raises(AuthorizationError):
            await repo.remove(blog.id, uuid4())

        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_ownerless_blog_is_refused(self, repo: BlogRepository, owner: UserDB) -> None:
        blog = await repo.create(BlogCreate(title="A", url="u1"), None)

        with pytest.raises(AuthorizationError):
            await repo.remove(blog.id, owner.id)

    @pytest.mark.asyncio
    async def test_unknown_id_raises(self, repo: BlogRepository, owner: UserDB) -> None:
        with pytest.raises(BlogNotFoundError):
            await repo.remove(uuid4(), owner.id)


@pytest.mark.asyncio
async def test_store_failure_is_translated() -> None:
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))

    with pytest.raises(DatabaseConnectionError):
        await BlogRepository(session).list_all()
