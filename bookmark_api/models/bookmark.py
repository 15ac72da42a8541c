"""Bookmark model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from bookmark_api.database import Base
from bookmark_api.models.mixins import TimestampMixin


class Bookmark(Base, TimestampMixin):
    """A saved link owned by exactly one user."""

    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    link = Column(String(2048), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="bookmarks")
