# tests/routes/test_login.py
"""Tests for the login endpoint and the health check."""

import pytest
from fastapi import status
from httpx import AsyncClient

from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB


class TestLogin:
    """Tests for POST /api/login."""

    @pytest.mark.asyncio
    async def test_valid_credentials_return_token(
        self,
        client: AsyncClient,
        test_user: UserDB,
    ) -> None:
        response = await client.post(
            "/api/login",
            json={"username": test_user.username, "password": "salsa"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["username"] == test_user.username
        assert data["name"] == test_user.name

        token_data = decode_access_token(data["token"])
        assert token_data is not None
        assert token_data.user_id == test_user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "password"),
        [("pedro123", "wrong"), ("nobody", "salsa")],
    )
    async def test_invalid_credentials_return_401(
        self,
        client: AsyncClient,
        test_user: UserDB,
        username: str,
        password: str,
    ) -> None:
        response = await client.post(
            "/api/login",
            json={"username": username, "password": password},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Invalid username or password"}

    @pytest.mark.asyncio
    async def test_token_is_accepted_by_protected_routes(
        self,
        client: AsyncClient,
        test_user: UserDB,
    ) -> None:
        login = await client.post(
            "/api/login",
            json={"username": test_user.username, "password": "salsa"},
        )

        response = await client.post(
            "/api/blogs",
            json={"title": "With token", "url": "token.fi"},
            headers={"Authorization": f"BEARER {login.json()['token']}"},
        )

        assert response.status_code == status.HTTP_201_CREATED


class TestHealth:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_reports_database_connected(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "ok"
        assert data["database"] == "connected"
        assert response.headers["x-content-type-options"] == "nosniff"
