"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserUpdate(BaseModel):
    """Partial profile update; only fields sent are applied."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str | None = Field(None, max_length=255)
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)


class UserResponse(BaseModel):
    """User information response. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
