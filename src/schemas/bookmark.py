"""Bookmark schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookmarkCreate(BaseModel):
    """Create a new bookmark."""

    title: str = Field(..., max_length=255)
    link: str = Field(..., max_length=2048)
    description: str | None = None


class BookmarkUpdate(BaseModel):
    """Update a bookmark. Omitted fields are left unchanged."""

    title: str | None = Field(None, max_length=255)
    link: str | None = Field(None, max_length=2048)
    description: str | None = None


class BookmarkResponse(BaseModel):
    """Bookmark response."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    user_id: int
    title: str
    link: str
    description: str | None
    created_at: datetime
    updated_at: datetime
