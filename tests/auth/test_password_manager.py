"""Tests for the Argon2 password hasher."""

import pytest

from bloglist.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher("low")


class TestPasswordHasher:
    """Test cases for PasswordHasher."""

    def test_hash_is_argon2_and_not_plaintext(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salsa")

        assert hashed.startswith("$argon2")
        assert "salsa" not in hashed

    def test_verify_accepts_correct_password(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("salsa", hasher.hash("salsa"))

    def test_verify_rejects_wrong_password(self, hasher: PasswordHasher) -> None:
        assert not hasher.verify("wrong", hasher.hash("salsa"))

    @pytest.mark.parametrize("stored", [None, "", "   "])
    def test_verify_without_hash_is_false(self, hasher: PasswordHasher, stored: str | None) -> None:
        assert not hasher.verify("salsa", stored)

    def test_verify_corrupted_hash_is_false(self, hasher: PasswordHasher) -> None:
        assert not hasher.verify("salsa", "definitely-not-a-hash")

    def test_empty_password_raises(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")


def test_default_hasher_is_singleton() -> None:
    assert get_password_hasher() is get_password_hasher()


@pytest.mark.asyncio
async def test_async_helpers_round_trip() -> None:
    hashed = await hash_password("salainen")

    assert await verify_password("salainen", hashed)
    assert not await verify_password("salsa", hashed)
