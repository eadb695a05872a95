"""
User request/response schemas.
"""
from pydantic import BaseModel, Field

from pokedex.models.user import CollectionEntry, User


class UserResponse(BaseModel):
    """User information response (excludes the password hash)."""
    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User email")
    favorites: list[CollectionEntry] = Field(default_factory=list, description="Favorite Pokemon")
    team: list[CollectionEntry] = Field(default_factory=list, description="Team members")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            favorites=user.favorites,
            team=user.team,
        )


class MeResponse(BaseModel):
    """Current user response."""
    user: UserResponse
