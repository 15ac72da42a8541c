"""User profile schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime


class UserUpdate(BaseModel):
    """Partial profile update. Only fields present in the request are applied."""

    email: EmailStr | None = None
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)

    @field_validator("email", mode="before")
    @classmethod
    def email_not_null(cls, v):
        if v is None:
            raise ValueError("email cannot be null")
        return v
