"""HTTP client SDK for the bloglist API."""

from bloglist.clients.blog_client import BlogClient, enrich_with_permissions

__all__ = ["BlogClient", "enrich_with_permissions"]
