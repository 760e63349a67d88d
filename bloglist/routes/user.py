"""User routes for registration and listing."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import AuthServiceDep
from bloglist.managers import limiter
from bloglist.schemas import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user account. The password is stored only as a hash.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "pedro123",
                        "name": "Pedro",
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {"example": {"detail": "Username 'pedro123' already exists"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Too Many Requests"}}},
        },
    },
    operation_id="users_create",
)
@limiter.limit("5/hour")
async def create_user(
    request: Request,
    user_create: UserCreate,
    auth_service: AuthServiceDep,
) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Current request context, used for rate limiting.
    user_create : UserCreate
        User registration data.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    UserResponse
        Created user information, without the password hash.

    Raises
    ------
    DuplicateEntryError
        If the username is taken.
    WeakPasswordError
        If the password is too short.
    """
    user = await auth_service.create_user(
        user_create.username,
        user_create.name,
        user_create.password.get_secret_value(),
    )
    return UserResponse.model_validate(user, from_attributes=True)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List users",
    description="Retrieve all users together with the blogs they created.",
    operation_id="users_list",
)
async def get_users(auth_service: AuthServiceDep) -> list[UserResponse]:
    """
    List all users.

    Parameters
    ----------
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    list[UserResponse]
        Users with the blogs they created, never including password hashes.
    """
    return [
        UserResponse.model_validate(user, from_attributes=True)
        for user in await auth_service.list_users()
    ]
