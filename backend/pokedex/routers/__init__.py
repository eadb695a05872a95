"""
API Routers module.
"""
from pokedex.routers import auth, favorites, health, pokemon

__all__ = ["auth", "favorites", "health", "pokemon"]
