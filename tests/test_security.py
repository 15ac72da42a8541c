"""Password hashing and access token tests."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from bookmark_api.config import Settings
from bookmark_api.exceptions import InvalidTokenError
from bookmark_api.services.security import PasswordHasher, TokenClaims, TokenService

SECRET = "unit-test-secret"  # noqa: S105


@pytest.fixture(scope="module")
def hasher():
    return PasswordHasher()


@pytest.fixture
def tokens():
    return TokenService(secret=SECRET, algorithm="HS256", expires_minutes=15)


class TestPasswordHasher:
    """Tests for Argon2 password hashing."""

    def test_hash_is_not_plaintext(self, hasher):
        password_hash = hasher.hash("pw123456")
        assert password_hash != "pw123456"
        assert password_hash.startswith("$argon2")

    def test_hash_is_salted(self, hasher):
        assert hasher.hash("pw123456") != hasher.hash("pw123456")

    def test_verify_correct_password(self, hasher):
        password_hash = hasher.hash("pw123456")
        assert hasher.verify(password_hash, "pw123456") is True

    def test_verify_wrong_password(self, hasher):
        password_hash = hasher.hash("pw123456")
        assert hasher.verify(password_hash, "pw1234567") is False
        assert hasher.verify(password_hash, "") is False

    def test_verify_malformed_hash_raises(self, hasher):
        with pytest.raises(ValueError):
            hasher.verify("not-a-hash", "pw123456")


class TestTokenService:
    """Tests for issuing and verifying access tokens."""

    def test_issue_and_verify(self, tokens):
        token = tokens.issue(42, "a@x.com")
        assert tokens.verify(token) == TokenClaims(sub=42, email="a@x.com")

    def test_claims_include_expiry_fifteen_minutes_out(self, tokens):
        issued_at = datetime.now(UTC).replace(microsecond=0)
        token = tokens.issue(1, "a@x.com", now=issued_at)
        claims = jwt.get_unverified_claims(token)
        assert claims["sub"] == "1"
        assert claims["iat"] == int(issued_at.timestamp())
        assert claims["exp"] - claims["iat"] == 15 * 60

    def test_token_accepted_before_expiry(self, tokens):
        issued_at = datetime.now(UTC) - timedelta(minutes=14)
        token = tokens.issue(1, "a@x.com", now=issued_at)
        assert tokens.verify(token).sub == 1

    def test_token_rejected_after_expiry(self, tokens):
        issued_at = datetime.now(UTC) - timedelta(minutes=15, seconds=2)
        token = tokens.issue(1, "a@x.com", now=issued_at)
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_wrong_secret_rejected(self, tokens):
        forged = TokenService(secret="someone-else").issue(1, "a@x.com")
        with pytest.raises(InvalidTokenError):
            tokens.verify(forged)

    def test_tampered_token_rejected(self, tokens):
        token = tokens.issue(1, "a@x.com")
        header, payload, signature = token.split(".")
        flipped = "A" if signature[0] != "A" else "B"
        tampered = ".".join([header, payload, flipped + signature[1:]])
        with pytest.raises(InvalidTokenError):
            tokens.verify(tampered)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_rejected(self, tokens, token):
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_missing_email_rejected(self, tokens):
        exp = int((datetime.now(UTC) + timedelta(minutes=5)).timestamp())
        token = jwt.encode({"sub": "1", "exp": exp}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_missing_expiry_rejected(self, tokens):
        token = jwt.encode({"sub": "1", "email": "a@x.com"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_non_numeric_subject_rejected(self, tokens):
        exp = int((datetime.now(UTC) + timedelta(minutes=5)).timestamp())
        token = jwt.encode(
            {"sub": "admin", "email": "a@x.com", "exp": exp}, SECRET, algorithm="HS256"
        )
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_from_settings(self):
        settings = Settings(
            jwt_secret="from-settings",
            jwt_algorithm="HS512",
            jwt_expiration_minutes=5,
            database_url="sqlite://",
        )
        service = TokenService.from_settings(settings)
        assert service.secret == "from-settings"
        assert service.algorithm == "HS512"
        assert service.expires_minutes == 5
