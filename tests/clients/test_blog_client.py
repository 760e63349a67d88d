# tests/clients/test_blog_client.py
"""Tests for the BlogClient SDK running against the app in-process."""

from collections.abc import AsyncGenerator
from copy import deepcopy

import pytest
from httpx import ASGITransport, ConnectError, MockTransport, Request, Response

from bloglist.clients import BlogClient, enrich_with_permissions
from bloglist.errors import BlogApiError
from bloglist.main import app
from bloglist.managers.rate_limiter import limiter
from bloglist.models import BlogDB, UserDB


@pytest.fixture
async def blog_client(db: None) -> AsyncGenerator[BlogClient]:
    limiter.enabled = False
    async with BlogClient("http://test", transport=ASGITransport(app=app)) as client:
        yield client
    limiter.enabled = True


@pytest.fixture
async def logged_in(blog_client: BlogClient, test_user: UserDB) -> BlogClient:
    user = await blog_client.login(test_user.username, "salsa")
    blog_client.set_token(user["token"])
    return blog_client


class TestBlogClient:
    """Tests for BlogClient calls."""

    @pytest.mark.asyncio
    async def test_get_all(self, blog_client: BlogClient, seeded_blogs: list[BlogDB]) -> None:
        blogs = await blog_client.get_all()

        assert len(blogs) == len(seeded_blogs)

    @pytest.mark.asyncio
    async def test_login_returns_user_fields(
        self,
        blog_client: BlogClient,
        test_user: UserDB,
    ) -> None:
        user = await blog_client.login(test_user.username, "salsa")

        assert user["username"] == test_user.username
        assert user["name"] == test_user.name
        assert user["token"]
        assert blog_client.token is None

    @pytest.mark.asyncio
    async def test_bad_login_raises(self, blog_client: BlogClient, test_user: UserDB) -> None:
        with pytest.raises(BlogApiError) as exc_info:
            await blog_client.login(test_user.username, "wrong")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_create_update_remove(self, logged_in: BlogClient) -> None:
        created = await logged_in.create({"title": "C", "url": "u3"})
        assert created["likes"] == 0

        created["likes"] += 1
        updated = await logged_in.update(created)
        assert updated["likes"] == 1
        assert updated["user"]["username"] == "pedro123"

        await logged_in.remove(created["id"])
        assert await logged_in.get_all() == []

    @pytest.mark.asyncio
    async def test_update_collapses_owner(self, logged_in: BlogClient) -> None:
        created = await logged_in.create({"title": "C", "url": "u3"})
        created["likes"] = 4

        updated = await logged_in.update(created)

        assert updated["likes"] == 4
        assert isinstance(created["user"], dict)

    @pytest.mark.asyncio
    async def test_create_without_token_raises(self, blog_client: BlogClient) -> None:
        with pytest.raises(BlogApiError) as exc_info:
            await blog_client.create({"title": "C", "url": "u3"})

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_create_user(self, blog_client: BlogClient) -> None:
        user = await blog_client.create_user("hellas", "Arto Hellas", "sekret")

        assert user["username"] == "hellas"
        assert user["blogs"] == []

    @pytest.mark.asyncio
    async def test_tokens_are_per_instance(self, logged_in: BlogClient) -> None:
        async with BlogClient("http://test", transport=ASGITransport(app=app)) as anonymous:
            with pytest.raises(BlogApiError) as exc_info:
                await anonymous.create({"title": "C", "url": "u3"})

        assert exc_info.value.status_code == 401
        assert logged_in.token is not None


class TestEnrichWithPermissions:
    """Tests for enrich_with_permissions."""

    blogs = [
        {"id": "1", "title": "Own", "user": {"id": "u1", "username": "pedro123", "name": "Pedro"}},
        {"id": "2", "title": "Other", "user": {"id": "u2", "username": "hellas", "name": "Arto"}},
        {"id": "3", "title": "Seed", "user": None},
    ]

    def test_marks_only_own_blogs(self) -> None:
        enriched = enrich_with_permissions(self.blogs, {"username": "pedro123"})

        assert [blog["canRemove"] for blog in enriched] == [True, False, False]

    def test_without_user_nothing_is_removable(self) -> None:
        enriched = enrich_with_permissions(self.blogs, None)

        assert not any(blog["canRemove"] for blog in enriched)

    def test_input_is_not_mutated(self) -> None:
        original = deepcopy(self.blogs)

        enriched = enrich_with_permissions(self.blogs, {"username": "pedro123"})

        assert self.blogs == original
        assert all(a is not b for a, b in zip(enriched, self.blogs, strict=True))


@pytest.mark.asyncio
async def test_non_json_error_uses_reason_phrase() -> None:
    def handler(request: Request) -> Response:
        return Response(502, text="<html>bad gateway</html>")

    async with BlogClient("http://test", transport=MockTransport(handler)) as client:
        with pytest.raises(BlogApiError) as exc_info:
            await client.get("anything")

    assert exc_info.value.status_code == 502
    assert exc_info.value.detail == "Bad Gateway"
    assert exc_info.value.payload is None


@pytest.mark.asyncio
async def test_get_all_retries_after_connection_failure() -> None:
    attempts: list[str] = []

    def handler(request: Request) -> Response:
        attempts.append(request.url.path)
        if len(attempts) == 1:
            mssg = "Connection refused"
            raise ConnectError(mssg, request=request)
        return Response(200, json=[{"id": "1", "title": "A", "url": "u1", "likes": 1}])

    async with BlogClient("http://test", transport=MockTransport(handler)) as client:
        blogs = await client.get_all()

    assert attempts == ["/api/blogs", "/api/blogs"]
    assert blogs[0]["title"] == "A"


@pytest.mark.asyncio
async def test_get_all_does_not_retry_error_responses() -> None:
    attempts: list[str] = []

    def handler(request: Request) -> Response:
        attempts.append(request.url.path)
        return Response(500, json={"detail": "The data store is currently unavailable."})

    async with BlogClient("http://test", transport=MockTransport(handler)) as client:
        with pytest.raises(BlogApiError) as exc_info:
            await client.get_all()

    assert exc_info.value.status_code == 500
    assert len(attempts) == 1
