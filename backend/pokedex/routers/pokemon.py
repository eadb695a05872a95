"""
Pokemon catalog router: read-only pass-through to PokeAPI.

No database or authentication involved, so these routes keep working
while MongoDB is down.
"""
from typing import Any

from fastapi import APIRouter, Depends, Query

from pokedex.services.pokeapi import PokeAPIClient, get_pokeapi

router = APIRouter(tags=["Pokemon"])


@router.get(
    "/pokemon",
    summary="List Pokemon",
)
async def list_pokemon(
    offset: int = Query(0, ge=0, description="Pagination offset"),
    limit: int = Query(20, ge=1, le=200, description="Page size"),
    pokeapi: PokeAPIClient = Depends(get_pokeapi),
) -> Any:
    """Get a page of the Pokemon index."""
    return await pokeapi.get_pokemon_list(offset=offset, limit=limit)


@router.get(
    "/pokemon/{id_or_name}",
    summary="Get Pokemon",
)
async def get_pokemon(
    id_or_name: str,
    pokeapi: PokeAPIClient = Depends(get_pokeapi),
) -> Any:
    """Get a Pokemon by catalog ID or name."""
    return await pokeapi.get_pokemon(id_or_name)


@router.get(
    "/pokemon-species/{id_or_name}",
    summary="Get Pokemon species",
)
async def get_pokemon_species(
    id_or_name: str,
    pokeapi: PokeAPIClient = Depends(get_pokeapi),
) -> Any:
    """Get species data (descriptions, evolution chain link) for a Pokemon."""
    return await pokeapi.get_pokemon_species(id_or_name)


@router.get(
    "/type",
    summary="List types",
)
async def list_types(
    pokeapi: PokeAPIClient = Depends(get_pokeapi),
) -> Any:
    """Get all Pokemon types."""
    return await pokeapi.get_types()


@router.get(
    "/type/{id_or_name}",
    summary="Get type",
)
async def get_type(
    id_or_name: str,
    pokeapi: PokeAPIClient = Depends(get_pokeapi),
) -> Any:
    """Get a type and the Pokemon that have it."""
    return await pokeapi.get_type(id_or_name)
