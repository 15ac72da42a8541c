"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from bookmark_api.database import Base
from bookmark_api.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and bookmark ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)

    # Relationships
    bookmarks = relationship(
        "Bookmark",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
