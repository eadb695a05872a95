"""
Favorites router for a user's favorite Pokemon and team.

All routes require a bearer token and a connected database.
"""
from fastapi import APIRouter, Depends, Path

from pokedex.core.rate_limit import enforce_rate_limit
from pokedex.dependencies.auth import CurrentUserId
from pokedex.dependencies.database import get_collection_service, require_database
from pokedex.schemas.favorites import CollectionEntryCreate, FavoritesResponse, TeamResponse
from pokedex.services.collection_service import CollectionService

router = APIRouter(
    prefix="/favorites",
    tags=["Favorites"],
    dependencies=[Depends(enforce_rate_limit), Depends(require_database)],
)


# ==================== Team ====================
# Declared before the favorites routes so /team is never read as a Pokemon ID


@router.get(
    "/team",
    response_model=TeamResponse,
    response_model_exclude_none=True,
    summary="Get team",
)
async def get_team(
    user_id: CurrentUserId,
    service: CollectionService = Depends(get_collection_service),
):
    """Get the current user's team in insertion order."""
    return TeamResponse(team=await service.get_team(user_id))


@router.post(
    "/team",
    response_model=TeamResponse,
    response_model_exclude_none=True,
    summary="Add Pokemon to team",
)
async def add_to_team(
    body: CollectionEntryCreate,
    user_id: CurrentUserId,
    service: CollectionService = Depends(get_collection_service),
):
    """
    Add a Pokemon to the team.

    - **pokemonId**: Catalog Pokemon ID
    - **pokemonName**: Pokemon name
    - **pokemonImage**: Pokemon image URL

    Fails when the team already holds 6 Pokemon or already contains this one.
    """
    team = await service.add_team_member(user_id, body.to_entry())
    return TeamResponse(message="Pokemon added to team", team=team)


@router.delete(
    "/team/{pokemon_id}",
    response_model=TeamResponse,
    response_model_exclude_none=True,
    summary="Remove Pokemon from team",
)
async def remove_from_team(
    user_id: CurrentUserId,
    pokemon_id: int = Path(..., description="Catalog Pokemon ID"),
    service: CollectionService = Depends(get_collection_service),
):
    """Remove a Pokemon from the team."""
    team = await service.remove_team_member(user_id, pokemon_id)
    return TeamResponse(message="Pokemon removed from team", team=team)


# ==================== Favorites ====================


@router.get(
    "",
    response_model=FavoritesResponse,
    response_model_exclude_none=True,
    summary="Get favorites",
)
async def get_favorites(
    user_id: CurrentUserId,
    service: CollectionService = Depends(get_collection_service),
):
    """Get the current user's favorites in insertion order."""
    return FavoritesResponse(favorites=await service.get_favorites(user_id))


@router.post(
    "",
    response_model=FavoritesResponse,
    response_model_exclude_none=True,
    summary="Add Pokemon to favorites",
)
async def add_to_favorites(
    body: CollectionEntryCreate,
    user_id: CurrentUserId,
    service: CollectionService = Depends(get_collection_service),
):
    """
    Add a Pokemon to favorites.

    - **pokemonId**: Catalog Pokemon ID
    - **pokemonName**: Pokemon name
    - **pokemonImage**: Pokemon image URL
    """
    favorites = await service.add_favorite(user_id, body.to_entry())
    return FavoritesResponse(message="Pokemon added to favorites", favorites=favorites)


@router.delete(
    "/{pokemon_id}",
    response_model=FavoritesResponse,
    response_model_exclude_none=True,
    summary="Remove Pokemon from favorites",
)
async def remove_from_favorites(
    user_id: CurrentUserId,
    pokemon_id: int = Path(..., description="Catalog Pokemon ID"),
    service: CollectionService = Depends(get_collection_service),
):
    """Remove a Pokemon from favorites."""
    favorites = await service.remove_favorite(user_id, pokemon_id)
    return FavoritesResponse(message="Pokemon removed from favorites", favorites=favorites)
