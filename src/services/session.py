"""Per-request session guard.

Turns a bearer token into an ``Identity``. Stateless: the outcome depends only
on the token, the clock, the signing secret and whether the user still exists.
"""

import logging
from dataclasses import dataclass

from src.config import Settings
from src.repositories.user_repository import UserRepository
from src.services.auth import decode_access_token
from src.services.exceptions import AuthError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid authentication credentials"


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, passed to every protected service call."""

    user_id: int
    email: str


class SessionGuard:
    """Resolves the caller's identity from a session token."""

    def __init__(self, users: UserRepository, config: Settings | None = None):
        self.users = users
        self.config = config

    def resolve_identity(self, token: str | None) -> Identity:
        """Return the identity a token was issued to.

        Raises ``AuthError`` for a missing, tampered or expired token, a token
        without a numeric subject, or a user that no longer exists.
        """
        if not token:
            raise AuthError("Not authenticated")

        payload = decode_access_token(token, self.config)
        if payload is None:
            raise AuthError(INVALID_CREDENTIALS)

        try:
            user_id = int(payload.get("sub"))
        except (TypeError, ValueError):
            raise AuthError(INVALID_CREDENTIALS) from None

        user = self.users.find_by_id(user_id)
        if user is None:
            logger.warning(f"Token presented for missing user {user_id}")
            raise AuthError("User not found")

        return Identity(user_id=user.id, email=user.email)
