"""
Blog Routes.

Provides the blog resource endpoints with standardized documentation.

Summary
-------
Endpoints include:
  - List blogs
  - Get blog by id
  - Create blog
  - Update likes
  - Delete blog

Authentication
--------------
Creating, updating and deleting require a bearer token. Only the creator
of a blog may delete it; any authenticated caller may update its likes.
"""

from logging import getLogger

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.configs import file_logger
from bloglist.dependencies import BlogRepoDep, UserDBDep
from bloglist.models import BlogDB
from bloglist.schemas import BlogCreate, BlogResponse, BlogUpdate

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

_NOT_FOUND = {
    "description": "Not found",
    "content": {
        "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
    },
}
_UNAUTHORIZED = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"detail": "Token missing"}}},
}
_BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "Liisa Karjalassa",
    "author": "Pekka von Puurtimo",
    "url": "test.fi/1",
    "likes": 0,
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "username": "pedro123",
        "name": "Pedro",
    },
}


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity with its owner loaded.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse.model_validate(db_blog, from_attributes=True)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Retrieve every stored blog, oldest first, with its owner resolved.",
    responses={
        200: {"content": {"application/json": {"example": [_BLOG_EXAMPLE]}}},
        500: {
            "description": "Store unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Request to /api/blogs failed. Please try again later. (Error ID: 1a2b3c4d)",
                    },
                },
            },
        },
    },
    operation_id="blogs_list",
)
async def get_blogs(repo: BlogRepoDep) -> list[BlogResponse]:
    """
    List all blogs.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogResponse]
        Every stored blog.

    Raises
    ------
    DatabaseConnectionError
        If the store cannot be queried.
    """
    return [db_blog_to_response(blog) for blog in await repo.list_all()]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by id",
    description="Retrieve one blog by its id.",
    responses={
        200: {"content": {"application/json": {"example": _BLOG_EXAMPLE}}},
        404: _NOT_FOUND,
    },
    operation_id="blogs_get",
)
async def get_blog(blog_id: str, repo: BlogRepoDep) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier; malformed ids are reported as not found.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        The blog.
    """
    return db_blog_to_response(await repo.get(blog_id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create blog",
    description="Create a blog owned by the authenticated caller. Likes default to 0.",
    responses={
        201: {"content": {"application/json": {"example": _BLOG_EXAMPLE}}},
        400: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation failed",
                        "errors": [
                            {"field": "title", "message": "Field required", "type": "missing"},
                        ],
                    },
                },
            },
        },
        401: _UNAUTHORIZED,
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog_create: BlogCreate,
    repo: BlogRepoDep,
    current_user: UserDBDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog_create : BlogCreate
        Blog payload; `title` and `url` are required.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Authenticated caller, recorded as the owner.

    Returns
    -------
    BlogResponse
        Created blog.
    """
    db_blog = await repo.create(blog_create, current_user.id)
    return db_blog_to_response(db_blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update likes",
    description="Set the like count of a blog. Other submitted fields are ignored.",
    responses={
        200: {"content": {"application/json": {"example": _BLOG_EXAMPLE}}},
        401: _UNAUTHORIZED,
        404: _NOT_FOUND,
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: str,
    blog_update: BlogUpdate,
    repo: BlogRepoDep,
    current_user: UserDBDep,
) -> BlogResponse:
    """
    Update blog likes.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    blog_update : BlogUpdate
        Update payload.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Authenticated caller.

    Returns
    -------
    BlogResponse
        Updated blog.
    """
    db_blog = await repo.update(blog_id, blog_update)
    logger.info(f"Blog {db_blog.id} likes set to {db_blog.likes} by {current_user.username}")
    return db_blog_to_response(db_blog)


@router.delete(
    "/{blog_id}",
    response_class=Response,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Only its creator may delete it.",
    responses={
        204: {"description": "No Content"},
        401: _UNAUTHORIZED,
        403: {
            "description": "Forbidden",
            "content": {
                "application/json": {
                    "example": {"detail": "Only the creator can delete this blog"},
                },
            },
        },
        404: _NOT_FOUND,
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: str,
    repo: BlogRepoDep,
    current_user: UserDBDep,
) -> Response:
    """
    Delete blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Authenticated caller; must own the blog.

    Returns
    -------
    Response
        Empty 204 response.
    """
    await repo.remove(blog_id, current_user.id)
    return Response(status_code=HTTP_204_NO_CONTENT)
