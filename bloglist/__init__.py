"""Bloglist backend and client SDK."""

__version__ = "1.0.0"
