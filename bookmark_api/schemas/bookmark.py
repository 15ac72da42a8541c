"""Bookmark schemas."""

from datetime import datetime

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

_http_url = TypeAdapter(AnyHttpUrl)


def validate_link(value: str) -> str:
    """Check that the link is an http(s) URL, keeping the text as submitted."""
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("link must be a valid http or https URL") from None
    return value


class BookmarkCreate(BaseModel):
    """Create a new bookmark."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    link: str = Field(..., min_length=1, max_length=2048)

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str) -> str:
        return validate_link(v)


class BookmarkUpdate(BaseModel):
    """Update a bookmark. Omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    link: str | None = Field(None, min_length=1, max_length=2048)

    @field_validator("title", "link", mode="before")
    @classmethod
    def required_not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str) -> str:
        return validate_link(v)


class BookmarkResponse(BaseModel):
    """Bookmark response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime
