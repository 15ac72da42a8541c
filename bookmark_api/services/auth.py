"""Signup and signin flows."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from bookmark_api.exceptions import InternalFaultError, InvalidCredentialsError
from bookmark_api.models.user import User
from bookmark_api.schemas.auth import Token
from bookmark_api.services.security import PasswordHasher, TokenService
from bookmark_api.services.users import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Service for registering users and exchanging credentials for tokens."""

    def __init__(self, users: UserService, hasher: PasswordHasher, tokens: TokenService):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def signup(self, email: str, password: str) -> Token:
        """
        Register a new user and return an access token for them.

        Raises:
            DuplicateEmailError: If the email is already registered.
        """
        password_hash = self.hasher.hash(password)
        user = self.users.create(email, password_hash)
        logger.info(f"Registered user {user.id}")
        return self._token_for(user)

    def signin(self, email: str, password: str) -> Token:
        """
        Exchange email and password for an access token.

        Raises:
            InvalidCredentialsError: For an unknown email or a wrong password.
        """
        user = self.authenticate(email, password)
        if user is None:
            logger.info("Rejected signin with invalid credentials")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} signed in")
        return self._token_for(user)

    def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password."""
        try:
            user = self.users.get_by_email(email)
        except SQLAlchemyError as e:
            logger.exception("Unexpected database error during signin")
            raise InternalFaultError() from e

        if not user:
            return None
        if not self.hasher.verify(user.password_hash, password):
            return None
        return user

    def _token_for(self, user: User) -> Token:
        return Token(access_token=self.tokens.issue(user.id, user.email))
