"""
Database module - MongoDB and Redis connections and database definitions.
"""
from pokedex.database.connections import (
    close_connections,
    connect_mongo,
    ensure_indexes,
    get_connection_monitor,
    get_database,
    get_mongo_client,
    get_redis_client,
)
from pokedex.database.databases import pokedex_db
from pokedex.database.state import ConnectionMonitor, ConnectionState

__all__ = [
    "get_mongo_client",
    "get_redis_client",
    "get_connection_monitor",
    "connect_mongo",
    "close_connections",
    "get_database",
    "ensure_indexes",
    "pokedex_db",
    "ConnectionMonitor",
    "ConnectionState",
]
