"""User schemas for registration and listing."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from bloglist.configs.settings import MAX_NAME_LENGTH, MAX_USERNAME_LENGTH
from bloglist.schemas.blog import UserBlog


class UserCreate(BaseModel):
    """User registration payload."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "pedro123", "name": "Pedro", "password": "salsa"},
        },
    )

    username: str = Field(..., min_length=1, max_length=MAX_USERNAME_LENGTH)
    name: str = Field(default="", max_length=MAX_NAME_LENGTH)
    password: SecretStr = Field(..., description="Plaintext password, never stored")

    @field_validator("username", mode="after")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Usernames may not contain whitespace."""
        if any(char.isspace() for char in v):
            mssg = "Username cannot contain whitespace"
            raise ValueError(mssg)
        return v


class UserResponse(BaseModel):
    """User response model (safe for API responses, without the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str
    blogs: list[UserBlog] = []
