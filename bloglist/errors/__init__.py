from bloglist.errors.auth import (
    AuthenticationError,
    AuthorizationError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler, log_and_sanitize_error
from bloglist.errors.client import BlogApiError
from bloglist.errors.database import (
    BlogNotFoundError,
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    ValidationError,
    WeakPasswordError,
    app_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "BaseAppError",
    "BlogApiError",
    "BlogNotFoundError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "ValidationError",
    "WeakPasswordError",
    "app_exception_handler",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "log_and_sanitize_error",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
