"""Authentication schemas."""

from pydantic import BaseModel, Field


class AuthCredentials(BaseModel):
    """Email and password, used for both signup and signin."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class Token(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
