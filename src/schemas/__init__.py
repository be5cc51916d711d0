"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthCredentials, Token
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.schemas.errors import ErrorResponse, FieldErrorResponse
from src.schemas.user import UserResponse, UserUpdate

__all__ = [
    "AuthCredentials",
    "Token",
    "UserUpdate",
    "UserResponse",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
    "ErrorResponse",
    "FieldErrorResponse",
]
