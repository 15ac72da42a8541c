"""SQLAlchemy models."""

from bookmark_api.models.bookmark import Bookmark
from bookmark_api.models.user import User

__all__ = [
    "User",
    "Bookmark",
]
