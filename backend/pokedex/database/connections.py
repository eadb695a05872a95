"""
Database connection management for MongoDB and Redis.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import OperationFailure, PyMongoError
from redis.asyncio import Redis

from pokedex.config import get_settings
from pokedex.database.databases.pokedex_db import create_indexes
from pokedex.database.state import ConnectionMonitor

logger = logging.getLogger(__name__)

# Global connection instances
_mongo_client: Optional[AsyncIOMotorClient] = None
_redis_client: Optional[Redis] = None
_connection_monitor = ConnectionMonitor()
_indexes_ready = False


def get_connection_monitor() -> ConnectionMonitor:
    """Get the process-wide MongoDB connection monitor."""
    return _connection_monitor


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
            socketTimeoutMS=settings.mongo_socket_timeout_ms,
            event_listeners=[_connection_monitor.listener()],
        )
    return _mongo_client


async def get_redis_client() -> Redis:
    """Get or create Redis client."""
    global _redis_client
    if _redis_client is None:
        settings = get_settings()
        _redis_client = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            decode_responses=True,
        )
    return _redis_client


async def connect_mongo() -> bool:
    """
    Open the MongoDB client and verify the server answers.

    A failed ping is logged and leaves the monitor disconnected; the
    driver keeps retrying in the background and the topology listener
    marks the connection up once the server becomes reachable.

    Returns:
        True if the server answered the ping
    """
    _connection_monitor.mark_connecting()
    client = await get_mongo_client()
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.error("Database connection error: %s", e)
        logger.warning("Continuing without DB connection. User features will be limited.")
        _connection_monitor.mark_disconnected()
        return False

    _connection_monitor.mark_connected()
    logger.info("MongoDB connected: %s", get_settings().mongo_db_name)
    return True


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the pokedex indexes once per client, the first time the server
    is reachable. Covers a server that comes up after startup.

    Raises:
        ConnectionFailure: If the server dropped again; the next call retries
    """
    global _indexes_ready
    if _indexes_ready:
        return

    try:
        await create_indexes(db)
        logger.info("Database indexes created")
    except OperationFailure as e:
        # Existing documents violate an index, not retried
        logger.error("Database index creation failed: %s", e)
    _indexes_ready = True


async def close_connections():
    """Close all database connections."""
    global _mongo_client, _redis_client, _indexes_ready

    if _mongo_client is not None:
        _connection_monitor.mark_disconnecting()
        _mongo_client.close()
        _mongo_client = None
        _indexes_ready = False
        _connection_monitor.mark_disconnected()

    if _redis_client is not None:
        await _redis_client.close()
        _redis_client = None


async def get_database(db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
    """Get a MongoDB database by name (defaults to the configured one)."""
    client = await get_mongo_client()
    return client[db_name or get_settings().mongo_db_name]
