"""Password hashing and JWT session tokens."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from bookmark_api.config import Settings
from bookmark_api.exceptions import InvalidTokenError


class PasswordHasher:
    """Argon2 hashing with a random salt embedded in every hash."""

    def __init__(self, schemes: list[str] | None = None):
        self.context = CryptContext(schemes=schemes or ["argon2"], deprecated="auto")

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.context.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        """Verify a password against its hash.

        Returns False for a wrong password. A stored hash that cannot be parsed
        raises ValueError.
        """
        return self.context.verify(password, password_hash)


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    sub: int
    email: str


class TokenService:
    """Issues and verifies signed, short-lived access tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 15):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_minutes=settings.jwt_expiration_minutes,
        )

    def issue(self, user_id: int, email: str, now: datetime | None = None) -> str:
        """Create a JWT access token that expires ``expires_minutes`` after ``now``."""
        issued_at = now or datetime.now(UTC)
        expire = issued_at + timedelta(minutes=self.expires_minutes)
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a JWT token.

        Raises:
            InvalidTokenError: If the signature does not match, the token is
                malformed or expired, or the identity claims are missing.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        email = payload.get("email")
        if not isinstance(email, str) or not email:
            raise InvalidTokenError("Token is missing the email claim")
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Token subject is not a user id") from e

        return TokenClaims(sub=user_id, email=email)
