"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, Relationship, SQLModel, String

from bloglist.configs.settings import MAX_NAME_LENGTH, MAX_USERNAME_LENGTH

if TYPE_CHECKING:
    from bloglist.models.blog import BlogDB


class UserDB(SQLModel, table=True):
    """
    User database model.

    The `blogs` collection is not stored on the user row; it is resolved
    from `blogs.user_id` whenever it is explicitly loaded.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    # Required fields
    username: str = Field(
        sa_column=Column(String(MAX_USERNAME_LENGTH), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    name: str = Field(
        default="",
        sa_column=Column(String(MAX_NAME_LENGTH), nullable=False, server_default=""),
        description="Display name",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    blogs: list["BlogDB"] = Relationship(back_populates="user")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "pedro123",
                "name": "Pedro",
            },
        },
    )
