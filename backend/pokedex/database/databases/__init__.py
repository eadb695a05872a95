"""
Database definitions and collection constants.
"""
from pokedex.database.databases import pokedex_db

__all__ = ["pokedex_db"]
