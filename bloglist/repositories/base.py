"""Base repository for database operations."""

from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.engine import Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption
from sqlalchemy.sql import Executable
from sqlmodel import SQLModel

from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)
from bloglist.utils.helpers import as_uuid

type FilterValue = str | int | float | bool | UUID | None


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common read and write helpers.

    Every statement goes through `_execute`, so driver and connection
    failures surface as `DatabaseConnectionError` instead of leaking
    SQLAlchemy exceptions to the routes.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def _execute(self, statement: Executable) -> Result[Any]:
        """
        Execute a statement, translating store failures.

        Raises:
            DatabaseConnectionError: If the store is unreachable or rejects the query
        """
        try:
            return await self.session.execute(statement)
        except (SQLAlchemyError, OSError) as e:
            raise DatabaseConnectionError from e

    async def get_by_id(
        self,
        record_id: UUID | str,
        *options: ORMOption,
    ) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID or its string form; malformed ids match nothing
            *options: Loader options such as `selectinload(...)`

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        parsed_id = as_uuid(record_id)
        if parsed_id is None:
            return None

        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == parsed_id)
        if options:
            statement = statement.options(*options).execution_options(populate_existing=True)
        result = await self._execute(statement)
        return result.scalar_one_or_none()

    async def get_by_field(
        self,
        field_name: str,
        value: FilterValue,
    ) -> ModelT | None:
        """
        Get a record by a specific field value.

        Args:
            field_name: Name of the field to search
            value: Value to search for

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        field = getattr(self.model, field_name)
        result = await self._execute(select(self.model).where(field == value))
        return result.scalar_one_or_none()

    async def count(self) -> int:
        """
        Count total records.

        Returns:
            int: Total number of records
        """
        result = await self._execute(select(func.count()).select_from(self.model))
        count = result.scalar()
        return count if count is not None else 0

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: If the store fails
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError from e
            raise DatabaseError(detail="Database integrity error") from e
        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            raise DatabaseConnectionError from e
        return record

    async def _delete(self, record: ModelT) -> None:
        """
        Delete a loaded record.

        Raises:
            DatabaseConnectionError: If the store fails
        """
        try:
            await self.session.delete(record)
            await self.session.flush()
        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            raise DatabaseConnectionError from e

    async def _check_exists_by_field(
        self,
        field_name: str,
        value: FilterValue,
    ) -> bool:
        """
        Check if a record exists with a specific field value.

        Args:
            field_name: Name of the field to check
            value: Value to check for

        Returns:
            bool: True if record exists, False otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(1).where(field == value).limit(1)
        result = await self._execute(statement)
        return result.scalar_one_or_none() is not None
