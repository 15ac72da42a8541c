"""Exceptions raised by the service layer.

Each error carries the HTTP status it maps to and a message that is safe to
return to clients. Translation to responses happens in ``bookmark_api.main``.
"""


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmailError(ServiceError):
    """Raised when an email address is already registered."""

    status_code = 403
    message = "Email already exists"


class InvalidCredentialsError(ServiceError):
    """
    Raised when signin fails.

    Unknown email and wrong password produce the same error so callers cannot
    tell which accounts exist.
    """

    status_code = 403
    message = "Email or password is incorrect"


class UnauthenticatedError(ServiceError):
    """Raised when a protected route is called without a usable bearer token."""

    status_code = 401
    message = "Invalid authentication credentials"


class BookmarkNotFoundError(ServiceError):
    """Raised when a bookmark does not exist or belongs to another user."""

    status_code = 404
    message = "Bookmark not found"

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__()


class InternalFaultError(ServiceError):
    """Raised when the store fails unexpectedly. Details are logged, not returned."""


class InvalidTokenError(Exception):
    """Raised by the token verifier for bad signatures, bad payloads, or expiry."""
