"""
Async HTTP client for the bloglist API.

Wraps each endpoint of the service, attaches the bearer token set on the
instance to mutating calls, and raises `BlogApiError` for any non-success
response.
"""

from logging import getLogger
from types import TracebackType
from typing import Any, Self

from httpx import AsyncBaseTransport, AsyncClient, Response

from bloglist.configs import file_logger
from bloglist.decorators.with_retry import with_retry
from bloglist.errors.client import BlogApiError

logger = file_logger(getLogger(__name__))

type Blog = dict[str, Any]


def _owner_id(owner: Any) -> Any:
    if isinstance(owner, dict):
        return owner.get("id")
    return owner


def enrich_with_permissions(blogs: list[Blog], user: dict[str, Any] | None) -> list[Blog]:
    """
    Mark which blogs the given user may remove.

    The input blogs are left untouched; each returned blog is a shallow copy
    with a `canRemove` flag, true only when the blog's owner has the same
    username as `user`.

    Args:
        blogs: Blogs as returned by the API
        user: Logged-in user (anything with a `username` key), or None

    Returns:
        list[Blog]: Annotated copies in the same order

    Example:
        >>> blogs = [{"title": "A", "user": {"username": "pedro123"}}]
        >>> enrich_with_permissions(blogs, {"username": "pedro123"})[0]["canRemove"]
        True
    """
    username = user.get("username") if user else None
    enriched = []
    for blog in blogs:
        owner = blog.get("user")
        owner_username = owner.get("username") if isinstance(owner, dict) else None
        can_remove = username is not None and owner_username == username
        enriched.append({**blog, "canRemove": can_remove})
    return enriched


class BlogClient:
    """
    Client for the bloglist REST API.

    The token lives on the instance, so separate clients can act as
    separate users.

    Example:
        ```python
        async with BlogClient("http://localhost:8000") as client:
            user = await client.login("pedro123", "salsa")
            client.set_token(user["token"])
            await client.create({"title": "C", "url": "u3"})
        ```
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        transport: AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Create the client.

        Args:
            base_url: Root URL of the service
            transport: Optional httpx transport, e.g. an ASGI transport in tests
            timeout: Request timeout in seconds
        """
        self._client = AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self._token: str | None = None

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        """Set (or clear with None) the token sent with mutating calls."""
        self._token = token

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"bearer {self._token}"} if self._token else {}

    @staticmethod
    def _raise_for_status(response: Response) -> None:
        if response.is_success:
            return

        try:
            payload = response.json()
        except ValueError:
            payload = None
        detail = payload.get("detail") if isinstance(payload, dict) else None
        detail = detail or response.reason_phrase or "Request failed"
        logger.warning(
            f"{response.request.method} {response.request.url.path} failed with "
            f"{response.status_code}: {detail}",
        )
        raise BlogApiError(response.status_code, str(detail), payload)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        auth: bool = False,
    ) -> Any:
        response = await self._client.request(
            method,
            path,
            json=json,
            headers=self._auth_headers() if auth else None,
        )
        self._raise_for_status(response)
        if not response.content:
            return None
        return response.json()

    async def login(self, username: str, password: str) -> dict[str, Any]:
        """
        Log in and return `{token, username, name}`.

        The token is not stored; pass it to `set_token` to act as this user.

        Raises:
            BlogApiError: 401 for invalid credentials
        """
        return await self._request(
            "POST",
            "/api/login",
            json={"username": username, "password": password},
        )

    async def create_user(self, username: str, name: str, password: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/api/users",
            json={"username": username, "name": name, "password": password},
        )

    @with_retry()
    async def get_all(self) -> list[Blog]:
        """
        Fetch every blog.

        Connection failures and timeouts are retried with the `CLIENT_RETRY_*`
        backoff; HTTP error responses are not.

        Returns:
            list[Blog]: Blogs with their owners resolved
        """
        return await self._request("GET", "/api/blogs")

    async def get(self, blog_id: str) -> Blog:
        return await self._request("GET", f"/api/blogs/{blog_id}")

    async def create(self, blog: Blog) -> Blog:
        """
        Create a blog owned by the current token's user.

        Args:
            blog: Payload with `title`, `url` and optionally `author` and `likes`

        Returns:
            Blog: The stored blog

        Raises:
            BlogApiError: 400 for a missing title or url, 401 without a valid token
        """
        return await self._request("POST", "/api/blogs", json=blog, auth=True)

    async def update(self, blog: Blog) -> Blog:
        """
        Send a blog back to the service to update its likes.

        The embedded owner is collapsed to its id before sending.

        Args:
            blog: A blog as returned by the API, with a modified `likes`

        Returns:
            Blog: The updated blog

        Raises:
            BlogApiError: 404 if the blog no longer exists, 401 without a token
        """
        payload = {key: value for key, value in blog.items() if key != "canRemove"}
        if "user" in payload:
            payload["user"] = _owner_id(payload["user"])
        return await self._request("PUT", f"/api/blogs/{blog['id']}", json=payload, auth=True)

    async def remove(self, blog_id: str) -> None:
        """
        Delete a blog owned by the current token's user.

        Raises:
            BlogApiError: 403 for someone else's blog, 404 if it does not exist
        """
        await self._request("DELETE", f"/api/blogs/{blog_id}", auth=True)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
