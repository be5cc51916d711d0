"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import Settings, get_settings
from src.models.user import User
from src.repositories.user_repository import UserRepository
from src.services.exceptions import AuthError, ConflictError
from src.services.validation import (
    normalize_email,
    raise_for_errors,
    validate_credentials,
    validate_signin,
)

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

CREDENTIALS_INCORRECT = "Credentials incorrect"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


@lru_cache
def _dummy_hash() -> str:
    return get_password_hash("dummy-password-for-unknown-users")


def create_access_token(
    user_id: int,
    email: str,
    expires_delta: timedelta | None = None,
    config: Settings | None = None,
) -> str:
    """Create a signed JWT access token for a user."""
    config = config or settings
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_access_token(token: str, config: Settings | None = None) -> dict | None:
    """Decode and validate a JWT token.

    Returns None if the signature, expiry or format is invalid.
    """
    config = config or settings
    try:
        return jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
    except JWTError:
        return None


class AuthService:
    """Signup and signin against the user store."""

    def __init__(self, users: UserRepository, config: Settings | None = None):
        self.users = users
        self.config = config or settings

    def signup(self, email: str, password: str) -> User:
        """Register a new user and return it.

        Raises:
            ValidationError: email malformed or password missing/too short.
            ConflictError: email already registered.
        """
        raise_for_errors(validate_credentials(email, password, self.config.password_min_length))
        email = normalize_email(email)

        if self.users.find_by_email(email) is not None:
            raise ConflictError("Email already registered")

        user = self.users.insert(email=email, password_hash=get_password_hash(password))
        logger.info(f"Registered user {user.id}")
        return user

    def signin(self, email: str, password: str) -> str:
        """Check credentials and return a signed access token.

        Raises ``ValidationError`` for a malformed email or missing password.
        Unknown email and wrong password raise the same ``AuthError``.
        """
        raise_for_errors(validate_signin(email, password))

        user = self.users.find_by_email(normalize_email(email))
        if user is None:
            # Spend the same hashing time as a real check
            verify_password(password, _dummy_hash())
            logger.warning("Failed signin for unknown email")
            raise AuthError(CREDENTIALS_INCORRECT)

        if not verify_password(password, user.password_hash):
            logger.warning(f"Failed signin for user {user.id}")
            raise AuthError(CREDENTIALS_INCORRECT)

        return create_access_token(user.id, user.email, config=self.config)
