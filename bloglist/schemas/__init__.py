from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import BlogCreate, BlogOwner, BlogResponse, BlogUpdate, UserBlog
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import UserCreate, UserResponse

__all__ = [
    "BlogCreate",
    "BlogOwner",
    "BlogResponse",
    "BlogUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "TokenData",
    "UserBlog",
    "UserCreate",
    "UserResponse",
]
