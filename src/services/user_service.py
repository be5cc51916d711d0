"""Profile operations on the caller's own user record."""

import logging
from collections.abc import Mapping
from typing import Any

from src.models.user import User
from src.repositories.user_repository import UserRepository
from src.services.exceptions import AuthError, ConflictError
from src.services.session import Identity
from src.services.validation import normalize_email, raise_for_errors, validate_profile_patch

logger = logging.getLogger(__name__)


class UserService:
    """Read and edit the authenticated user's profile."""

    def __init__(self, users: UserRepository):
        self.users = users

    def get_self(self, identity: Identity) -> User:
        user = self.users.find_by_id(identity.user_id)
        if user is None:
            # Deleted between token check and this call
            raise AuthError("User not found")
        return user

    def edit_self(self, identity: Identity, patch: Mapping[str, Any]) -> User:
        """Apply a partial update to the caller's profile.

        Only keys present in ``patch`` are changed. Raises ``ConflictError``
        if the new email belongs to a different user.
        """
        raise_for_errors(validate_profile_patch(patch))
        user = self.get_self(identity)

        changes = dict(patch)
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
            owner = self.users.find_by_email(changes["email"])
            if owner is not None and owner.id != user.id:
                raise ConflictError("Email already registered")

        if not changes:
            return user

        user = self.users.update(user, changes)
        logger.info(f"Updated profile fields {sorted(changes)} for user {user.id}")
        return user
