"""
Pydantic models for database documents and data structures.
"""
from pokedex.models.user import MAX_TEAM_SIZE, CollectionEntry, User

__all__ = [
    "User",
    "CollectionEntry",
    "MAX_TEAM_SIZE",
]
