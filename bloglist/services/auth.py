"""Authentication service handling registration, login and token checks."""

from datetime import timedelta
from logging import getLogger

from bloglist.configs import file_logger, settings
from bloglist.errors.auth import InvalidCredentialsError, InvalidTokenError, MissingTokenError
from bloglist.errors.database import DuplicateEntryError
from bloglist.errors.validation import ValidationError, WeakPasswordError
from bloglist.managers.password_manager import hash_password, verify_password
from bloglist.managers.token_manager import create_access_token, decode_access_token
from bloglist.models import UserDB
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import LoginResponse

logger = file_logger(getLogger(__name__))


class AuthService:
    """Service for creating users and authenticating them."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def create_user(self, username: str, name: str, password: str) -> UserDB:
        """
        Register a new user.

        Args:
            username: Requested username, must be unique
            name: Display name
            password: Plaintext password; only its hash is stored

        Returns:
            UserDB: The created user with an empty blog list

        Raises:
            ValidationError: If the username is too short
            WeakPasswordError: If the password is too short
            DuplicateEntryError: If the username is taken
        """
        if len(username) < settings.MIN_USERNAME_LENGTH:
            raise ValidationError(
                detail=f"Username must be at least {settings.MIN_USERNAME_LENGTH} characters long",
                errors=[{"field": "username", "message": "Username too short", "type": "too_short"}],
            )
        if len(password) < settings.MIN_PASSWORD_LENGTH:
            raise WeakPasswordError(settings.MIN_PASSWORD_LENGTH)
        if await self.user_repo.username_exists(username):
            raise DuplicateEntryError(detail=f"Username '{username}' already exists")

        password_hash = await hash_password(password)
        user = await self.user_repo.create(username, name, password_hash)
        logger.info(f"User {user.username} registered")

        # Reload so the (empty) blogs collection is available outside the session
        return await self.user_repo.get_with_blogs(user.id) or user

    async def authenticate_user(self, username: str, password: str) -> UserDB:
        """
        Check a username and password pair.

        Unknown usernames and wrong passwords raise the same error.

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username)
        hashed = user.password_hash if user else None
        if not await verify_password(password, hashed) or user is None:
            logger.warning(f"Failed login attempt for username {username!r}")
            raise InvalidCredentialsError
        return user

    def create_token_for_user(self, user: UserDB) -> LoginResponse:
        """
        Issue an access token for a user.

        Args:
            user: User entity

        Returns:
            LoginResponse: Token with the public user fields
        """
        token = create_access_token(
            user_id=user.id,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def authenticate(self, username: str, password: str) -> LoginResponse:
        """
        Log a user in.

        Args:
            username: Submitted username
            password: Submitted plaintext password

        Returns:
            LoginResponse: Access token with the user's username and name

        Raises:
            InvalidCredentialsError: If the username is unknown or the password is wrong
        """
        user = await self.authenticate_user(username, password)
        return self.create_token_for_user(user)

    async def verify_token(self, token: str | None) -> UserDB:
        """
        Resolve a bearer token to its user.

        Args:
            token: Raw token from the Authorization header, if any

        Returns:
            UserDB: The user the token was issued to

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the token is invalid or its user no longer exists
        """
        if not token:
            raise MissingTokenError

        token_data = decode_access_token(token)
        if token_data is None:
            raise InvalidTokenError

        user = await self.user_repo.get_by_id(token_data.user_id)
        if user is None:
            raise InvalidTokenError("Token user no longer exists")
        return user

    async def list_users(self) -> list[UserDB]:
        """List every user with their blogs loaded, oldest first."""
        return await self.user_repo.list_all()
