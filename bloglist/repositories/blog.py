"""Blog repository for database operations."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from bloglist.configs import file_logger
from bloglist.errors.auth import AuthorizationError
from bloglist.errors.database import BlogNotFoundError
from bloglist.errors.validation import ValidationError
from bloglist.models.blog import BlogDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate

logger = file_logger(getLogger(__name__))


def _missing_fields(payload: BlogCreate) -> list[str]:
    return [name for name in ("title", "url") if not (getattr(payload, name) or "").strip()]


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Every blog handed out by this repository has its `user` relationship
    loaded, so callers can serialize the owner without further queries.
    """

    model = BlogDB

    async def _get_populated(self, blog_id: UUID | str) -> BlogDB | None:
        # populate_existing refreshes blogs already in the identity map
        return await self.get_by_id(blog_id, selectinload(BlogDB.user))

    async def list_all(self) -> list[BlogDB]:
        """
        Get every stored blog, oldest first.

        Returns:
            list[BlogDB]: All blogs with their owners loaded

        Raises:
            DatabaseConnectionError: If the store cannot be queried
        """
        statement = (
            select(BlogDB)
            .options(selectinload(BlogDB.user))
            .order_by(BlogDB.created_at, BlogDB.id)
            .execution_options(populate_existing=True)
        )
        result = await self._execute(statement)
        return list(result.scalars().all())

    async def get(self, blog_id: UUID | str) -> BlogDB:
        """
        Get one blog by id.

        Args:
            blog_id: Blog UUID or its string form

        Returns:
            BlogDB: The blog with its owner loaded

        Raises:
            BlogNotFoundError: If no blog has this id
        """
        blog = await self._get_populated(blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id)
        return blog

    async def create(self, payload: BlogCreate, owner_id: UUID | None) -> BlogDB:
        """
        Create a new blog owned by `owner_id`.

        Args:
            payload: Validated creation payload
            owner_id: Id of the creating user

        Returns:
            BlogDB: Created blog with its owner loaded

        Raises:
            ValidationError: If title or url is blank; nothing is written
            DatabaseConnectionError: If the store rejects the write
        """
        if missing := _missing_fields(payload):
            raise ValidationError(
                detail=f"Missing required field(s): {', '.join(missing)}",
                errors=[
                    {"field": field, "message": "Field required", "type": "missing"}
                    for field in missing
                ],
            )

        db_blog = BlogDB(
            title=payload.title.strip(),
            url=payload.url.strip(),
            author=payload.author,
            likes=payload.likes if payload.likes is not None else 0,
            user_id=owner_id,
        )
        db_blog = await self._add_and_refresh(db_blog)
        logger.info(f"Blog {db_blog.id} created by {owner_id}")
        return await self.get(db_blog.id)

    async def update(self, blog_id: UUID | str, patch: BlogUpdate) -> BlogDB:
        """
        Apply a likes update to a blog.

        Args:
            blog_id: Blog UUID or its string form
            patch: Update payload; only `likes` is applied

        Returns:
            BlogDB: Updated blog with its owner loaded

        Raises:
            BlogNotFoundError: If no blog has this id
        """
        db_blog = await self.get(blog_id)
        db_blog.likes = patch.likes
        db_blog = await self._add_and_refresh(db_blog)
        return await self.get(db_blog.id)

    async def remove(self, blog_id: UUID | str, caller_id: UUID) -> None:
        """
        Delete a blog on behalf of its owner.

        Args:
            blog_id: Blog UUID or its string form
            caller_id: Id of the authenticated caller

        Raises:
            BlogNotFoundError: If no blog has this id
            AuthorizationError: If the caller does not own the blog
        """
        db_blog = await self.get_by_id(blog_id)
        if db_blog is None:
            raise BlogNotFoundError(blog_id)

        if db_blog.user_id is None or db_blog.user_id != caller_id:
            logger.warning(f"User {caller_id} attempted to delete blog {db_blog.id}")
            raise AuthorizationError("Only the creator can delete this blog")

        await self._delete(db_blog)
        logger.info(f"Blog {db_blog.id} deleted by {caller_id}")
