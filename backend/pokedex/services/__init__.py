"""
Service layer for business logic.
"""
from pokedex.services.auth_service import AuthService
from pokedex.services.collection_service import CollectionService
from pokedex.services.pokeapi import PokeAPIClient
from pokedex.services.user_store import UserStore

__all__ = [
    "AuthService",
    "CollectionService",
    "PokeAPIClient",
    "UserStore",
]
