"""FastAPI dependencies for authentication, database and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.repositories.bookmark_repository import SqlAlchemyBookmarkRepository
from src.repositories.user_repository import SqlAlchemyUserRepository
from src.services.auth import AuthService
from src.services.bookmark_service import BookmarkService
from src.services.session import Identity, SessionGuard
from src.services.user_service import UserService

# Missing or non-Bearer headers are handled by SessionGuard so they get a 401
security = HTTPBearer(auto_error=False)


def get_auth_service(db: Annotated[Session, Depends(get_db)]) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(SqlAlchemyUserRepository(db))


def get_user_service(db: Annotated[Session, Depends(get_db)]) -> UserService:
    """Get user profile service with dependencies."""
    return UserService(SqlAlchemyUserRepository(db))


def get_bookmark_service(db: Annotated[Session, Depends(get_db)]) -> BookmarkService:
    """Get bookmark service with dependencies."""
    return BookmarkService(SqlAlchemyBookmarkRepository(db))


def get_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> Identity:
    """Resolve the caller's identity from the bearer token."""
    token = credentials.credentials if credentials else None
    return SessionGuard(SqlAlchemyUserRepository(db)).resolve_identity(token)
