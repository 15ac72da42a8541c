"""User persistence and profile updates."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bookmark_api.exceptions import DuplicateEmailError, InternalFaultError
from bookmark_api.models.user import User
from bookmark_api.schemas.user import UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for reading and writing user records."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def create(self, email: str, password_hash: str) -> User:
        """Insert a new user.

        Raises:
            DuplicateEmailError: If the email is already registered.
            InternalFaultError: If the store fails for any other reason.
        """
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def update_profile(self, user: User, data: UserUpdate) -> User:
        """Apply only the fields present in ``data`` and return the updated user."""
        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(user, field, value)

        self._commit()
        self.db.refresh(user)
        return user

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info("Rejected write for an email that is already registered")
            raise DuplicateEmailError() from None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Unexpected database error while saving user")
            raise InternalFaultError() from e
