"""Error response schemas."""

from pydantic import BaseModel


class FieldErrorResponse(BaseModel):
    """One rejected request field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every 4xx response raised by the service layer."""

    detail: str
    errors: list[FieldErrorResponse] | None = None
