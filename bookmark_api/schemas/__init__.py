"""Pydantic schemas for API requests and responses."""

from bookmark_api.schemas.auth import AuthCredentials, Token
from bookmark_api.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from bookmark_api.schemas.user import UserResponse, UserUpdate

__all__ = [
    "AuthCredentials",
    "Token",
    "UserResponse",
    "UserUpdate",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
]
