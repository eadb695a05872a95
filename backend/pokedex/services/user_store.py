"""
User record store: MongoDB access for user documents.

Driver failures are translated into the API error taxonomy here, so a
connection that drops after the availability check still surfaces as a
503 instead of a generic server error.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import (
    ConnectionFailure,
    ExecutionTimeout,
    NetworkTimeout,
    ServerSelectionTimeoutError,
    WTimeoutError,
)

from pokedex.core.errors import DatabaseTimeout, DatabaseUnavailable
from pokedex.database.databases.pokedex_db import Collections
from pokedex.models.user import CollectionEntry, User

logger = logging.getLogger(__name__)

TIMEOUT_ERRORS = (
    ServerSelectionTimeoutError,
    NetworkTimeout,
    ExecutionTimeout,
    WTimeoutError,
)


@contextmanager
def translate_driver_errors(operation: str) -> Iterator[None]:
    """Map driver connectivity errors raised inside the block to 503 errors."""
    try:
        yield
    except TIMEOUT_ERRORS as e:
        logger.error("MongoDB timeout during %s: %s", operation, e)
        raise DatabaseTimeout() from e
    except ConnectionFailure as e:
        logger.error("MongoDB connection failure during %s: %s", operation, e)
        raise DatabaseUnavailable() from e


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


def _doc_to_user(doc: dict) -> User:
    doc["_id"] = str(doc["_id"])
    return User(**doc)


class UserStore:
    """Persistence access for user documents."""

    FAVORITES = "favorites"
    TEAM = "team"

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the pokedex database."""
        self.db = db
        self.users = db[Collections.USERS]

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID, or None if the ID is malformed or unknown."""
        oid = _to_object_id(user_id)
        if oid is None:
            return None

        with translate_driver_errors("find user by id"):
            doc = await self.users.find_one({"_id": oid})
        return _doc_to_user(doc) if doc else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email."""
        with translate_driver_errors("find user by email"):
            doc = await self.users.find_one({"email": email})
        return _doc_to_user(doc) if doc else None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Get user by exact (case-sensitive) username."""
        with translate_driver_errors("find user by username"):
            doc = await self.users.find_one({"username": username})
        return _doc_to_user(doc) if doc else None

    async def insert(self, user: User) -> User:
        """
        Insert a new user document.

        Raises:
            DuplicateKeyError: If the username or email unique index rejects it
        """
        doc = user.model_dump(exclude={"id"})
        with translate_driver_errors("insert user"):
            result = await self.users.insert_one(doc)
        return user.model_copy(update={"id": str(result.inserted_id)})

    async def replace_collection(
        self, user_id: str, field: str, entries: list[CollectionEntry]
    ) -> bool:
        """
        Overwrite one embedded list (favorites or team) of a user.

        Returns:
            True if a user document matched
        """
        if field not in (self.FAVORITES, self.TEAM):
            raise ValueError(f"Unknown collection field: {field}")

        oid = _to_object_id(user_id)
        if oid is None:
            return False

        with translate_driver_errors(f"update {field}"):
            result = await self.users.update_one(
                {"_id": oid},
                {"$set": {field: [entry.model_dump() for entry in entries]}},
            )
        return result.matched_count > 0
