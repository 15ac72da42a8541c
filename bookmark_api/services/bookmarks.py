"""Bookmark service for ownership-scoped CRUD."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookmark_api.exceptions import BookmarkNotFoundError, InternalFaultError
from bookmark_api.models.bookmark import Bookmark
from bookmark_api.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate

logger = logging.getLogger(__name__)

# Ids outside the INTEGER primary key range can never exist
MAX_BOOKMARK_ID = 2**31 - 1


class BookmarkService:
    """Service for bookmark operations.

    Every lookup is filtered by owner. A bookmark that does not exist and one
    that belongs to another user raise the same BookmarkNotFoundError.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, owner_id: int, data: BookmarkCreate) -> Bookmark:
        bookmark = Bookmark(
            owner_id=owner_id,
            title=data.title,
            description=data.description,
            link=data.link,
        )
        self.db.add(bookmark)
        self._commit()
        self.db.refresh(bookmark)
        return bookmark

    def get_all(self, owner_id: int) -> list[Bookmark]:
        """Get all bookmarks owned by the user, newest first."""
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.owner_id == owner_id)
            .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
            .all()
        )

    def get(self, owner_id: int, bookmark_id: int) -> Bookmark:
        if not 1 <= bookmark_id <= MAX_BOOKMARK_ID:
            raise BookmarkNotFoundError(bookmark_id)

        bookmark = (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.owner_id == owner_id)
            .first()
        )
        if bookmark is None:
            raise BookmarkNotFoundError(bookmark_id)
        return bookmark

    def update(self, owner_id: int, bookmark_id: int, data: BookmarkUpdate) -> Bookmark:
        """Apply only the supplied fields; omitted fields keep their values."""
        bookmark = self.get(owner_id, bookmark_id)

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(bookmark, field, value)

        self._commit()
        self.db.refresh(bookmark)
        return bookmark

    def delete(self, owner_id: int, bookmark_id: int) -> BookmarkResponse:
        """Delete a bookmark and return how it looked before deletion."""
        bookmark = self.get(owner_id, bookmark_id)
        snapshot = BookmarkResponse.model_validate(bookmark)

        self.db.delete(bookmark)
        self._commit()
        logger.info(f"User {owner_id} deleted bookmark {bookmark_id}")
        return snapshot

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Unexpected database error while saving bookmark")
            raise InternalFaultError() from e
