"""
Global test fixtures for the Pokedex backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Mock Redis (fakeredis)
- Connection monitor fixtures for the availability guard
- Test user and Pokemon factories
- FastAPI test clients wired to the mocks
"""

import sys
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient
    return AsyncMongoMockClient()


@pytest_asyncio.fixture
async def mock_pokedex_db(mock_async_mongo_client):
    """Provide mock pokedex database with the real indexes."""
    from pokedex.database.databases.pokedex_db import create_indexes

    db = mock_async_mongo_client["pokedex"]
    await create_indexes(db)
    yield db


@pytest.fixture
def user_store(mock_pokedex_db):
    """UserStore backed by the mock database."""
    from pokedex.services.user_store import UserStore
    return UserStore(mock_pokedex_db)


# =============================================================================
# Redis Fixtures (fakeredis)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_redis():
    """
    Create an async mock Redis client using fakeredis.
    """
    import fakeredis.aioredis
    redis_client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    yield redis_client
    await redis_client.flushall()
    await redis_client.aclose()


# =============================================================================
# Connection State Fixtures
# =============================================================================

@pytest.fixture
def connected_monitor():
    """A connection monitor reporting MongoDB as connected."""
    from pokedex.database.state import ConnectionMonitor, ConnectionState
    return ConnectionMonitor(ConnectionState.CONNECTED)


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "alice",
        "email": "a@x.com",
        "password": "pw123456",
    }


@pytest.fixture
def other_user_data() -> dict:
    """A second, unrelated user."""
    return {
        "username": "brock",
        "email": "brock@example.com",
        "password": "onix-rocks",
    }


def _make_pokemon(pokemon_id: int, name: str | None = None) -> dict:
    return {
        "pokemonId": pokemon_id,
        "pokemonName": name or f"pokemon-{pokemon_id}",
        "pokemonImage": f"https://img.example.com/{pokemon_id}.png",
    }


@pytest.fixture
def make_pokemon():
    """Factory for add-to-favorites / add-to-team request bodies."""
    return _make_pokemon


@pytest.fixture
def pikachu() -> dict:
    """Pikachu as the client sends it."""
    return {
        "pokemonId": 25,
        "pokemonName": "pikachu",
        "pokemonImage": "url",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_pokedex_db, user_store, connected_monitor, mock_async_redis):
    """
    FastAPI app with MongoDB, Redis and the connection state overridden.

    Overrides are cleared after each test.
    """
    from pokedex.core.rate_limit import get_rate_limit_redis
    from pokedex.database.connections import get_connection_monitor
    from pokedex.dependencies.database import get_pokedex_db, get_user_store
    from pokedex.main import app

    app.dependency_overrides[get_connection_monitor] = lambda: connected_monitor
    app.dependency_overrides[get_pokedex_db] = lambda: mock_pokedex_db
    app.dependency_overrides[get_user_store] = lambda: user_store
    app.dependency_overrides[get_rate_limit_redis] = lambda: mock_async_redis
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(connected_monitor) -> Generator:
    """
    Create a TestClient for routes that do not touch MongoDB or Redis.

    Startup/shutdown hooks are patched so no real database is contacted.
    Use this for synchronous endpoint testing (health, catalog, root).
    """
    from pokedex.database.connections import get_connection_monitor
    from pokedex.main import app

    app.dependency_overrides[get_connection_monitor] = lambda: connected_monitor
    with patch("pokedex.main.connect_mongo", AsyncMock(return_value=False)), \
         patch("pokedex.main.close_connections", AsyncMock()), \
         patch("pokedex.main.close_pokeapi", AsyncMock()):
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for tests that also await on the mock database directly.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


# =============================================================================
# Authenticated Client Helpers
# =============================================================================

@pytest.fixture
def auth_headers():
    """Build the Authorization header for a bearer token."""
    def _headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest_asyncio.fixture
async def registered_token(async_client, test_user_data) -> str:
    """Register the test user through the API and return its token."""
    response = await async_client.post("/auth/register", json=test_user_data)
    assert response.status_code == 201
    return response.json()["token"]
