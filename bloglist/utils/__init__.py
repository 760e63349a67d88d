"""Utility helper functions."""

from bloglist.utils.helpers import as_uuid, get_summary, host, today_str

__all__ = [
    "as_uuid",
    "get_summary",
    "host",
    "today_str",
]
