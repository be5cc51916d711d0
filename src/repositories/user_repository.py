"""User persistence."""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import User
from src.services.exceptions import ConflictError

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Storage operations the auth and profile services rely on."""

    def find_by_id(self, user_id: int) -> User | None: ...

    def find_by_email(self, email: str) -> User | None: ...

    def insert(self, email: str, password_hash: str) -> User: ...

    def update(self, user: User, changes: Mapping[str, Any]) -> User: ...


class SqlAlchemyUserRepository:
    """User repository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def insert(self, email: str, password_hash: str) -> User:
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def update(self, user: User, changes: Mapping[str, Any]) -> User:
        for key, value in changes.items():
            setattr(user, key, value)
        self._commit()
        self.db.refresh(user)
        return user

    def _commit(self) -> None:
        # The unique index on email is the final word on duplicates; the
        # services' pre-checks can lose a race against a concurrent request.
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"User write rejected by integrity constraint: {e.orig}")
            raise ConflictError("Email already registered") from e
