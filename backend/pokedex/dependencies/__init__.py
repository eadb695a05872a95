"""
Dependencies for dependency injection in routes.
"""
from pokedex.dependencies.auth import CurrentUserId, get_current_user_id
from pokedex.dependencies.database import (
    get_auth_service,
    get_collection_service,
    get_pokedex_db,
    get_user_store,
    require_database,
)

__all__ = [
    "CurrentUserId",
    "get_current_user_id",
    "require_database",
    "get_pokedex_db",
    "get_user_store",
    "get_auth_service",
    "get_collection_service",
]
