"""
PokeAPI client for the read-only Pokemon catalog.

Responses are passed through unmodified. The catalog does not depend on
MongoDB, so browsing keeps working while user features are degraded.
"""
import logging
from typing import Any, Optional

import httpx

from pokedex.config import get_settings
from pokedex.core.errors import CatalogNotFound, CatalogUnavailable

logger = logging.getLogger(__name__)


class PokeAPIClient:
    """
    Async client for the PokeAPI REST API.
    """

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize PokeAPI client."""
        self.settings = get_settings()
        self.base_url = (base_url or self.settings.pokeapi_url).rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with connection pooling."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.settings.pokeapi_timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
        except httpx.HTTPError as e:
            logger.warning("PokeAPI request %s failed: %s", path, e)
            raise CatalogUnavailable() from e

        if response.status_code == 404:
            raise CatalogNotFound()
        if response.is_error:
            logger.warning("PokeAPI request %s returned %s", path, response.status_code)
            raise CatalogUnavailable()
        return response.json()

    # ==================== Pokemon ====================

    async def get_pokemon_list(self, offset: int = 0, limit: int = 20) -> dict[str, Any]:
        """Get a page of the Pokemon index."""
        return await self._get("/pokemon", params={"offset": offset, "limit": limit})

    async def get_pokemon(self, id_or_name: str) -> dict[str, Any]:
        """Get a Pokemon by ID or name."""
        return await self._get(f"/pokemon/{id_or_name.lower()}")

    async def get_pokemon_species(self, id_or_name: str) -> dict[str, Any]:
        """Get Pokemon species data (flavor text, evolution chain link)."""
        return await self._get(f"/pokemon-species/{id_or_name.lower()}")

    # ==================== Types ====================

    async def get_types(self) -> dict[str, Any]:
        """Get the list of Pokemon types."""
        return await self._get("/type")

    async def get_type(self, id_or_name: str) -> dict[str, Any]:
        """Get a type with the Pokemon belonging to it."""
        return await self._get(f"/type/{id_or_name.lower()}")


# Singleton instance
_pokeapi: Optional[PokeAPIClient] = None


def get_pokeapi() -> PokeAPIClient:
    """Get PokeAPI client singleton."""
    global _pokeapi
    if _pokeapi is None:
        _pokeapi = PokeAPIClient()
    return _pokeapi


async def close_pokeapi() -> None:
    """Close the shared PokeAPI client."""
    global _pokeapi
    if _pokeapi is not None:
        await _pokeapi.close()
        _pokeapi = None
