"""User profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bookmark_api.api.dependencies import CurrentUser, get_user_service
from bookmark_api.schemas.user import UserResponse, UserUpdate
from bookmark_api.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_me(current_user: CurrentUser):
    """Get current user information."""
    return current_user


@router.patch("", response_model=UserResponse)
def update_me(
    user_data: UserUpdate,
    current_user: CurrentUser,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's profile."""
    return user_service.update_profile(current_user, user_data)
