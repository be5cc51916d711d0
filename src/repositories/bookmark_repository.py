"""Bookmark persistence.

Every read and write is filtered by the owning user's id, so a bookmark
belonging to someone else is indistinguishable from one that doesn't exist.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy.orm import Session

from src.models.bookmark import Bookmark


class BookmarkRepository(Protocol):
    """Storage operations the bookmark service relies on."""

    def list_for_user(self, user_id: int) -> list[Bookmark]: ...

    def find_by_id(self, bookmark_id: int, user_id: int) -> Bookmark | None: ...

    def insert(
        self, user_id: int, title: str, link: str, description: str | None = None
    ) -> Bookmark: ...

    def update(self, bookmark: Bookmark, changes: Mapping[str, Any]) -> Bookmark: ...

    def delete(self, bookmark: Bookmark) -> None: ...


class SqlAlchemyBookmarkRepository:
    """Bookmark repository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: int) -> list[Bookmark]:
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.user_id == user_id)
            .order_by(Bookmark.id)
            .all()
        )

    def find_by_id(self, bookmark_id: int, user_id: int) -> Bookmark | None:
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
            .first()
        )

    def insert(
        self, user_id: int, title: str, link: str, description: str | None = None
    ) -> Bookmark:
        bookmark = Bookmark(user_id=user_id, title=title, link=link, description=description)
        self.db.add(bookmark)
        self.db.commit()
        self.db.refresh(bookmark)
        return bookmark

    def update(self, bookmark: Bookmark, changes: Mapping[str, Any]) -> Bookmark:
        for key, value in changes.items():
            setattr(bookmark, key, value)
        self.db.commit()
        self.db.refresh(bookmark)
        return bookmark

    def delete(self, bookmark: Bookmark) -> None:
        self.db.delete(bookmark)
        self.db.commit()
