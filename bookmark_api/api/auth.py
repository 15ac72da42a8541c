"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookmark_api.api.dependencies import get_auth_service
from bookmark_api.schemas.auth import AuthCredentials, Token
from bookmark_api.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=Token, status_code=status.HTTP_201_CREATED)
def signup(
    credentials: AuthCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user and return an access token."""
    return auth_service.signup(credentials.email, credentials.password)


@router.post("/signin", response_model=Token)
def signin(
    credentials: AuthCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Sign in with email and password."""
    return auth_service.signin(credentials.email, credentials.password)
