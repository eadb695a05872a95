"""
Request and response schemas for API endpoints.
"""
from pokedex.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from pokedex.schemas.favorites import (
    CollectionEntryCreate,
    FavoritesResponse,
    TeamResponse,
)
from pokedex.schemas.user import MeResponse, UserResponse

__all__ = [
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "AuthResponse",
    # User
    "UserResponse",
    "MeResponse",
    # Favorites
    "CollectionEntryCreate",
    "FavoritesResponse",
    "TeamResponse",
]
