"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field


class AuthCredentials(BaseModel):
    """Email and password submitted to signup and signin."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class Token(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
