"""Repository layer for database operations."""

from bloglist.repositories.base import BaseRepository
from bloglist.repositories.blog import BlogRepository
from bloglist.repositories.user import UserRepository

__all__ = ["BaseRepository", "BlogRepository", "UserRepository"]
