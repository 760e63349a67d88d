"""Errors raised by the HTTP client SDK."""

from typing import Any

from bloglist.errors.base import BaseAppError


class BlogApiError(BaseAppError):
    """Raised when the bloglist API answers with a non-success status."""

    def __init__(self, status_code: int, detail: str, payload: Any = None) -> None:
        super().__init__(detail, status_code)
        self.payload = payload
