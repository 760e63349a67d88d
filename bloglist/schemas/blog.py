"""
Blog schemas for requests and responses.

Responses expose `id` and resolve the owner reference to a small public
view of the user, or `null` for blogs without an owner.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bloglist.configs.settings import (
    MAX_AUTHOR_LENGTH,
    MAX_LIKES,
    MAX_TITLE_LENGTH,
    MAX_URL_LENGTH,
)


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        mssg = "Field cannot be blank"
        raise ValueError(mssg)
    return value


class BlogOwner(BaseModel):
    """Owner information embedded in blog responses (without sensitive data)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str


class BlogCreate(BaseModel):
    """Blog creation payload."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Liisa Karjalassa",
                "author": "Pekka von Puurtimo",
                "url": "test.fi/1",
                "likes": 0,
            },
        },
    )

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, description="Blog title")
    url: str = Field(..., min_length=1, max_length=MAX_URL_LENGTH, description="Blog URL")
    author: str | None = Field(default=None, max_length=MAX_AUTHOR_LENGTH, description="Author")
    likes: int | None = Field(
        default=None,
        ge=0,
        le=MAX_LIKES,
        description="Initial likes (defaults to 0)",
    )

    @field_validator("title", "url", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only titles and urls."""
        return _strip_required(v)


class BlogUpdate(BaseModel):
    """
    Blog update payload.

    Only `likes` is applied; any other submitted field (such as the full
    blog echoed back by a client) is ignored.
    """

    model_config = ConfigDict(extra="ignore", json_schema_extra={"example": {"likes": 201}})

    likes: int = Field(..., ge=0, le=MAX_LIKES, description="New like count")


class BlogResponse(BaseModel):
    """Blog response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: BlogOwner | None = None


class UserBlog(BaseModel):
    """Blog summary embedded in user responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
