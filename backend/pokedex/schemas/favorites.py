"""
Favorites and team request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from pokedex.models.user import CollectionEntry

# Largest integer BSON can store (signed 64-bit)
MAX_POKEMON_ID = 2**63 - 1


class CollectionEntryCreate(BaseModel):
    """Add-to-favorites / add-to-team request body."""
    pokemon_id: int = Field(
        ...,
        gt=0,
        le=MAX_POKEMON_ID,
        strict=True,
        description="Catalog Pokemon ID"
    )
    pokemon_name: str = Field(..., min_length=1, description="Pokemon name")
    pokemon_image: str = Field(..., min_length=1, description="Pokemon image URL")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_entry(self) -> CollectionEntry:
        """Build the stored entry, stamping the insertion time."""
        return CollectionEntry(
            pokemon_id=self.pokemon_id,
            pokemon_name=self.pokemon_name,
            pokemon_image=self.pokemon_image,
        )


class FavoritesResponse(BaseModel):
    """Favorites list response."""
    message: Optional[str] = Field(None, description="Outcome message for mutations")
    favorites: list[CollectionEntry] = Field(..., description="Favorite Pokemon")


class TeamResponse(BaseModel):
    """Team list response."""
    message: Optional[str] = Field(None, description="Outcome message for mutations")
    team: list[CollectionEntry] = Field(..., description="Team members")
