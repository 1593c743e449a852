"""
API router modules.

This package contains all API route handlers organized by domain.
"""

from . import admin, feeds, users

__all__ = [
    "admin",
    "feeds",
    "users",
]
