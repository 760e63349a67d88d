"""User repository for database operations."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from bloglist.errors.database import DuplicateEntryError
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """Repository for User database operations."""

    model = UserDB

    async def create(self, username: str, name: str, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            username: Unique username
            name: Display name
            password_hash: Already hashed password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username already exists
        """
        db_user = UserDB(username=username, name=name, password_hash=password_hash)
        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(detail=f"Username '{username}' already exists") from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.get_by_field("username", username)

    async def username_exists(self, username: str) -> bool:
        return await self._check_exists_by_field("username", username)

    async def get_with_blogs(self, user_id: UUID | str) -> UserDB | None:
        return await self.get_by_id(user_id, selectinload(UserDB.blogs))

    async def list_all(self) -> list[UserDB]:
        """
        Get all users with their blogs loaded.

        Returns:
            list[UserDB]: Users ordered by registration time
        """
        statement = (
            select(UserDB)
            .options(selectinload(UserDB.blogs))
            .order_by(UserDB.created_at, UserDB.username)
            .execution_options(populate_existing=True)
        )
        result = await self._execute(statement)
        return list(result.scalars().all())
