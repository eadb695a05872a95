"""
Authentication service for user registration and login.
"""
import logging
from typing import Optional

from pymongo.errors import DuplicateKeyError

from pokedex.core.errors import DuplicateIdentity, InvalidCredentials, Unauthenticated
from pokedex.core.security import create_access_token, hash_password, verify_password
from pokedex.models.user import User
from pokedex.services.user_store import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, store: UserStore):
        """Initialize with the user record store."""
        self.store = store

    async def register(self, username: str, email: str, password: str) -> tuple[User, str]:
        """
        Register a new user.

        Args:
            username: Unique username
            email: Unique email address
            password: Plain password, hashed before storage

        Returns:
            The created user and a freshly issued token

        Raises:
            DuplicateIdentity: If the username or email is already taken
        """
        taken = await self._colliding_field(username, email)
        if taken:
            raise DuplicateIdentity(taken)

        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
        )

        try:
            user = await self.store.insert(user)
        except DuplicateKeyError as e:
            # Lost a race against a concurrent registration
            taken = await self._colliding_field(username, email)
            raise DuplicateIdentity(taken or "username") from e

        logger.info("Registered user %s", user.id)
        return user, create_access_token(user.id)

    async def authenticate(self, email: str, password: str) -> tuple[User, str]:
        """
        Authenticate user and return a JWT token.

        Raises:
            InvalidCredentials: If the email is unknown or the password is wrong
        """
        user = await self.store.find_by_email(email)

        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentials()

        logger.info("User %s logged in", user.id)
        return user, create_access_token(user.id)

    async def get_user(self, user_id: str) -> User:
        """
        Get the user a verified token was issued for.

        Raises:
            Unauthenticated: If the user no longer exists
        """
        user = await self.store.find_by_id(user_id)
        if user is None:
            raise Unauthenticated("User no longer exists")
        return user

    async def _colliding_field(self, username: str, email: str) -> Optional[str]:
        """Name the identity field already taken, checking email first."""
        if await self.store.find_by_email(email):
            return "email"
        if await self.store.find_by_username(username):
            return "username"
        return None
