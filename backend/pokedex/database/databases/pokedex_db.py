"""
Pokedex database configuration.
Stores user identity together with each user's favorites and team.

Structure:
- users: one document per user, favorites and team embedded as lists
"""
from motor.motor_asyncio import AsyncIOMotorDatabase


class Collections:
    """Collection names in the pokedex database."""
    USERS = "users"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "unique": True},
            {"keys": [("username", 1)], "unique": True},
        ],
    }


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for pokedex database collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
