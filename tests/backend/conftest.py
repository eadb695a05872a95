"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing services, the availability guard and degraded-mode responses.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def auth_service(user_store):
    """AuthService over the mock database."""
    from pokedex.services.auth_service import AuthService
    return AuthService(user_store)


@pytest.fixture
def collection_service(user_store):
    """CollectionService over the mock database."""
    from pokedex.services.collection_service import CollectionService
    return CollectionService(user_store)


@pytest.fixture
def entry_factory():
    """Factory for CollectionEntry instances."""
    from pokedex.models.user import CollectionEntry

    def _entry(pokemon_id: int, name: str | None = None) -> CollectionEntry:
        return CollectionEntry(
            pokemon_id=pokemon_id,
            pokemon_name=name or f"pokemon-{pokemon_id}",
            pokemon_image=f"https://img.example.com/{pokemon_id}.png",
        )
    return _entry


@pytest_asyncio.fixture
async def registered_user_id(auth_service, test_user_data) -> str:
    """Register the test user directly through the service."""
    user, _ = await auth_service.register(**test_user_data)
    return user.id


# =============================================================================
# Store Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_user_store():
    """
    Create a fully mocked UserStore.

    All methods are AsyncMock, allowing you to configure return values
    or side effects (e.g. driver errors):

        mock_user_store.find_by_id.side_effect = DatabaseTimeout()
    """
    store = MagicMock()
    store.find_by_id = AsyncMock()
    store.find_by_email = AsyncMock()
    store.find_by_username = AsyncMock()
    store.insert = AsyncMock()
    store.replace_collection = AsyncMock()
    return store


@pytest.fixture
def store_factory(app, mock_user_store):
    """
    Route get_user_store through a MagicMock so tests can assert whether
    the store was ever requested.
    """
    from pokedex.dependencies.database import get_user_store

    factory = MagicMock(return_value=mock_user_store)
    app.dependency_overrides[get_user_store] = lambda: factory()
    return factory


# =============================================================================
# Connection State Helpers
# =============================================================================

@pytest.fixture
def set_db_state(connected_monitor):
    """
    Force the connection state seen by the availability guard.

    Usage:
        set_db_state(ConnectionState.DISCONNECTED)
    """
    from pokedex.database.state import ConnectionState

    def _set(state: ConnectionState) -> None:
        transitions = {
            ConnectionState.CONNECTED: connected_monitor.mark_connected,
            ConnectionState.CONNECTING: connected_monitor.mark_connecting,
            ConnectionState.DISCONNECTING: connected_monitor.mark_disconnecting,
            ConnectionState.DISCONNECTED: connected_monitor.mark_disconnected,
        }
        transitions[state]()
    return _set


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, error_code: str, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        assert data["error"] == error_code
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
