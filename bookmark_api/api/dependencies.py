"""FastAPI dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bookmark_api.database import get_db
from bookmark_api.exceptions import InvalidTokenError, UnauthenticatedError
from bookmark_api.models.user import User
from bookmark_api.services.auth import AuthService
from bookmark_api.services.bookmarks import BookmarkService
from bookmark_api.services.security import PasswordHasher, TokenService
from bookmark_api.services.users import UserService

# Missing credentials are handled in get_current_user
security = HTTPBearer(auto_error=False)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service bound to the request's session."""
    return UserService(db)


def get_bookmark_service(
    db: Annotated[Session, Depends(get_db)],
) -> BookmarkService:
    """Get bookmark service bound to the request's session."""
    return BookmarkService(db)


def get_auth_service(
    users: Annotated[UserService, Depends(get_user_service)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(users, hasher, tokens)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    users: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    if credentials is None:
        raise UnauthenticatedError("Not authenticated")

    try:
        claims = tokens.verify(credentials.credentials)
    except InvalidTokenError:
        raise UnauthenticatedError() from None

    user = users.get_by_id(claims.sub)
    if user is None:
        raise UnauthenticatedError("User not found")

    return user


def get_current_user_id(
    current_user: Annotated[User, Depends(get_current_user)],
) -> int:
    """Project the authenticated user down to its id."""
    return current_user.id


CurrentUser = Annotated[User, Depends(get_current_user)]
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
