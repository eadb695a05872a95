"""
Collection manager for a user's favorites and team.

Each mutation is a read-modify-write of a single user document: the list
is loaded, checked, changed and written back with one `$set`. There is no
version check, so two concurrent mutations on the same user race and the
last write wins.
"""
import logging

from pokedex.core.errors import DuplicateEntry, NotFound, TeamFull, Unauthenticated
from pokedex.models.user import MAX_TEAM_SIZE, CollectionEntry, User
from pokedex.services.user_store import UserStore

logger = logging.getLogger(__name__)


class CollectionService:
    """Service for favorites and team operations."""

    def __init__(self, store: UserStore):
        """Initialize with the user record store."""
        self.store = store

    # ==================== Favorites ====================

    async def get_favorites(self, user_id: str) -> list[CollectionEntry]:
        user = await self._load_user(user_id)
        return user.favorites

    async def add_favorite(self, user_id: str, entry: CollectionEntry) -> list[CollectionEntry]:
        """
        Append a Pokemon to the user's favorites.

        Raises:
            DuplicateEntry: If the Pokemon is already a favorite
        """
        user = await self._load_user(user_id)
        if _contains(user.favorites, entry.pokemon_id):
            raise DuplicateEntry("Pokemon already in favorites")

        favorites = [*user.favorites, entry]
        await self._save(user_id, UserStore.FAVORITES, favorites)
        return favorites

    async def remove_favorite(self, user_id: str, pokemon_id: int) -> list[CollectionEntry]:
        """
        Remove a Pokemon from the user's favorites.

        Raises:
            NotFound: If the Pokemon is not a favorite
        """
        user = await self._load_user(user_id)
        favorites = _without(user.favorites, pokemon_id)
        if favorites is None:
            raise NotFound("Pokemon not found in favorites")

        await self._save(user_id, UserStore.FAVORITES, favorites)
        return favorites

    # ==================== Team ====================

    async def get_team(self, user_id: str) -> list[CollectionEntry]:
        user = await self._load_user(user_id)
        return user.team

    async def add_team_member(self, user_id: str, entry: CollectionEntry) -> list[CollectionEntry]:
        """
        Append a Pokemon to the user's team.

        Raises:
            TeamFull: If the team already has MAX_TEAM_SIZE members
            DuplicateEntry: If the Pokemon is already in the team
        """
        user = await self._load_user(user_id)
        if len(user.team) >= MAX_TEAM_SIZE:
            raise TeamFull(f"Team is full (maximum {MAX_TEAM_SIZE} Pokemon)")
        if _contains(user.team, entry.pokemon_id):
            raise DuplicateEntry("Pokemon already in team")

        team = [*user.team, entry]
        await self._save(user_id, UserStore.TEAM, team)
        return team

    async def remove_team_member(self, user_id: str, pokemon_id: int) -> list[CollectionEntry]:
        """
        Remove a Pokemon from the user's team.

        Raises:
            NotFound: If the Pokemon is not in the team
        """
        user = await self._load_user(user_id)
        team = _without(user.team, pokemon_id)
        if team is None:
            raise NotFound("Pokemon not found in team")

        await self._save(user_id, UserStore.TEAM, team)
        return team

    # ==================== Helpers ====================

    async def _load_user(self, user_id: str) -> User:
        user = await self.store.find_by_id(user_id)
        if user is None:
            raise Unauthenticated("User no longer exists")
        return user

    async def _save(self, user_id: str, field: str, entries: list[CollectionEntry]) -> None:
        if not await self.store.replace_collection(user_id, field, entries):
            # Deleted between the read and the write
            raise Unauthenticated("User no longer exists")
        logger.debug("Saved %d %s entries for user %s", len(entries), field, user_id)


def _contains(entries: list[CollectionEntry], pokemon_id: int) -> bool:
    return any(entry.pokemon_id == pokemon_id for entry in entries)


def _without(entries: list[CollectionEntry], pokemon_id: int):
    """Copy of entries minus the first match, or None if nothing matched."""
    for index, entry in enumerate(entries):
        if entry.pokemon_id == pokemon_id:
            return entries[:index] + entries[index + 1:]
    return None
