"""Bookmark CRUD scoped to the owning user."""

import logging
from collections.abc import Mapping
from typing import Any

from src.models.bookmark import Bookmark
from src.repositories.bookmark_repository import BookmarkRepository
from src.services.exceptions import NotFoundError
from src.services.session import Identity
from src.services.validation import raise_for_errors, validate_bookmark

logger = logging.getLogger(__name__)

BOOKMARK_NOT_FOUND = "Bookmark not found"


class BookmarkService:
    """Service for bookmark operations.

    Every method takes the caller's ``Identity``; bookmarks owned by anyone
    else are reported as not found.
    """

    def __init__(self, bookmarks: BookmarkRepository):
        self.bookmarks = bookmarks

    def list(self, identity: Identity) -> list[Bookmark]:
        """Return the caller's bookmarks in creation order."""
        return list(self.bookmarks.list_for_user(identity.user_id))

    def create(
        self,
        identity: Identity,
        title: str,
        link: str,
        description: str | None = None,
    ) -> Bookmark:
        fields = {"title": title, "link": link, "description": description}
        raise_for_errors(validate_bookmark(fields))

        bookmark = self.bookmarks.insert(
            user_id=identity.user_id,
            title=title.strip(),
            link=link.strip(),
            description=description,
        )
        logger.info(f"Created bookmark {bookmark.id} for user {identity.user_id}")
        return bookmark

    def get_by_id(self, identity: Identity, bookmark_id: int) -> Bookmark:
        bookmark = self.bookmarks.find_by_id(bookmark_id, identity.user_id)
        if bookmark is None:
            raise NotFoundError(BOOKMARK_NOT_FOUND)
        return bookmark

    def edit(self, identity: Identity, bookmark_id: int, patch: Mapping[str, Any]) -> Bookmark:
        """Apply a partial update of title, link and/or description."""
        bookmark = self.get_by_id(identity, bookmark_id)
        raise_for_errors(validate_bookmark(patch, partial=True))

        changes = dict(patch)
        for key in ("title", "link"):
            if key in changes:
                changes[key] = changes[key].strip()
        if not changes:
            return bookmark

        bookmark = self.bookmarks.update(bookmark, changes)
        logger.info(f"Updated bookmark {bookmark.id} for user {identity.user_id}")
        return bookmark

    def delete(self, identity: Identity, bookmark_id: int) -> None:
        bookmark = self.get_by_id(identity, bookmark_id)
        self.bookmarks.delete(bookmark)
        logger.info(f"Deleted bookmark {bookmark_id} for user {identity.user_id}")
