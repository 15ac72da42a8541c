"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookmark_api.api.dependencies import CurrentUserId, get_bookmark_service
from bookmark_api.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from bookmark_api.services.bookmarks import BookmarkService

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

BookmarkServiceDep = Annotated[BookmarkService, Depends(get_bookmark_service)]


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
def create_bookmark(
    bookmark_data: BookmarkCreate,
    user_id: CurrentUserId,
    bookmark_service: BookmarkServiceDep,
):
    """Create a new bookmark."""
    return bookmark_service.create(user_id, bookmark_data)


@router.get("", response_model=list[BookmarkResponse])
def get_bookmarks(
    user_id: CurrentUserId,
    bookmark_service: BookmarkServiceDep,
):
    """Get all bookmarks owned by the current user."""
    return bookmark_service.get_all(user_id)


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
def get_bookmark(
    bookmark_id: int,
    user_id: CurrentUserId,
    bookmark_service: BookmarkServiceDep,
):
    """Get a specific bookmark."""
    return bookmark_service.get(user_id, bookmark_id)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
def update_bookmark(
    bookmark_id: int,
    bookmark_data: BookmarkUpdate,
    user_id: CurrentUserId,
    bookmark_service: BookmarkServiceDep,
):
    """Update a bookmark."""
    return bookmark_service.update(user_id, bookmark_id, bookmark_data)


@router.delete("/{bookmark_id}", response_model=BookmarkResponse)
def delete_bookmark(
    bookmark_id: int,
    user_id: CurrentUserId,
    bookmark_service: BookmarkServiceDep,
):
    """Delete a bookmark and return it as it was."""
    return bookmark_service.delete(user_id, bookmark_id)
