"""
Database dependencies: availability guard and service factories.
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from pokedex.core.errors import DatabaseUnavailable
from pokedex.database.connections import ensure_indexes, get_connection_monitor, get_database
from pokedex.database.state import ConnectionMonitor
from pokedex.services.auth_service import AuthService
from pokedex.services.collection_service import CollectionService
from pokedex.services.user_store import UserStore, translate_driver_errors


async def get_pokedex_db() -> AsyncIOMotorDatabase:
    """Dependency to get the pokedex database handle."""
    return await get_database()


async def require_database(
    monitor: ConnectionMonitor = Depends(get_connection_monitor),
    db: AsyncIOMotorDatabase = Depends(get_pokedex_db),
) -> None:
    """
    Availability guard for routes backed by MongoDB.

    Point-in-time check of the connection state; anything other than
    `connected` short-circuits with a 503 before the store is touched.
    The first request after the server becomes reachable also builds the
    unique indexes if startup could not.

    Raises:
        DatabaseUnavailable: If MongoDB is not connected
    """
    if not monitor.is_connected:
        raise DatabaseUnavailable()

    with translate_driver_errors("create indexes"):
        await ensure_indexes(db)


async def get_user_store(db: AsyncIOMotorDatabase = Depends(get_pokedex_db)) -> UserStore:
    """Dependency to get UserStore instance."""
    return UserStore(db)


async def get_auth_service(store: UserStore = Depends(get_user_store)) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(store)


async def get_collection_service(store: UserStore = Depends(get_user_store)) -> CollectionService:
    """Dependency to get CollectionService instance."""
    return CollectionService(store)
