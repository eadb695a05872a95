"""
User model for the pokedex database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel

# Maximum number of Pokemon in a team
MAX_TEAM_SIZE = 6


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CollectionEntry(BaseModel):
    """
    Reference to a catalog Pokemon held in a user's favorites or team.

    Name and image are a snapshot taken when the entry was added; they are
    not refreshed from the catalog. Serialized with camelCase keys
    (pokemonId, pokemonName, pokemonImage, addedAt).
    """
    pokemon_id: int = Field(..., description="Catalog Pokemon ID")
    pokemon_name: str = Field(..., description="Pokemon name at insertion time")
    pokemon_image: str = Field(..., description="Pokemon image URL at insertion time")
    added_at: datetime = Field(
        default_factory=utc_now,
        description="Insertion timestamp"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class User(BaseModel):
    """
    User document model for the users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., description="Unique username")
    email: EmailStr = Field(..., description="Unique email address")
    password_hash: str = Field(..., description="Bcrypt hashed password")
    favorites: list[CollectionEntry] = Field(
        default_factory=list,
        description="Favorite Pokemon in insertion order"
    )
    team: list[CollectionEntry] = Field(
        default_factory=list,
        description=f"Team members in insertion order (max {MAX_TEAM_SIZE})"
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        description="Account creation timestamp"
    )

    class Config:
        populate_by_name = True
