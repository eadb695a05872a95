"""
Tests for degraded mode while MongoDB is unavailable.

These tests verify:
- Every user endpoint answers 503 DATABASE_UNAVAILABLE unless connected
- The store is never requested when the guard rejects
- Driver timeouts mid-request answer 503 DATABASE_TIMEOUT
- Unexpected failures answer 500 INTERNAL_ERROR without details
"""

from unittest.mock import patch

import pytest
import pytest_asyncio

CORE_ENDPOINTS = [
    ("POST", "/auth/register"),
    ("POST", "/auth/login"),
    ("GET", "/auth/me"),
    ("GET", "/favorites"),
    ("POST", "/favorites"),
    ("DELETE", "/favorites/25"),
    ("GET", "/favorites/team"),
    ("POST", "/favorites/team"),
    ("DELETE", "/favorites/team/25"),
]

NOT_CONNECTED = ["disconnected", "connecting", "disconnecting"]


class TestAvailabilityGuard:
    """Tests for the availability guard on user endpoints."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("state", NOT_CONNECTED)
    @pytest.mark.parametrize("method,path", CORE_ENDPOINTS)
    async def test_core_endpoints_unavailable(
        self, async_client, store_factory, set_db_state, assert_error_response,
        state, method, path,
    ):
        from pokedex.database.state import ConnectionState

        set_db_state(ConnectionState(state))

        response = await async_client.request(method, path, json={})

        assert_error_response(response, 503, "DATABASE_UNAVAILABLE", "database not available")
        store_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_guard_runs_before_token_check(
        self, async_client, store_factory, set_db_state, assert_error_response
    ):
        """A disconnected database wins over a missing token."""
        from pokedex.database.state import ConnectionState

        set_db_state(ConnectionState.DISCONNECTED)

        response = await async_client.get("/favorites")

        assert_error_response(response, 503, "DATABASE_UNAVAILABLE")

    @pytest.mark.asyncio
    async def test_recovers_when_reconnected(
        self, async_client, connected_monitor, registered_token, auth_headers
    ):
        connected_monitor.mark_disconnected()
        down = await async_client.get("/favorites", headers=auth_headers(registered_token))

        connected_monitor.mark_connected()
        up = await async_client.get("/favorites", headers=auth_headers(registered_token))

        assert down.status_code == 503
        assert up.status_code == 200

    @pytest.mark.asyncio
    async def test_first_request_after_reconnect_builds_indexes(
        self, app, async_client, connected_monitor, mock_async_mongo_client, test_user_data
    ):
        """Unique indexes exist before the first registration once the server is back."""
        import pokedex.database.connections as conn_module
        from pokedex.dependencies.database import get_pokedex_db, get_user_store
        from pokedex.services.user_store import UserStore

        late_db = mock_async_mongo_client["late_start"]
        app.dependency_overrides[get_pokedex_db] = lambda: late_db
        app.dependency_overrides[get_user_store] = lambda: UserStore(late_db)

        with patch.object(conn_module, "_indexes_ready", False):
            connected_monitor.mark_disconnected()
            down = await async_client.post("/auth/register", json=test_user_data)
            unique_while_down = [
                index for index in (await late_db.users.index_information()).values()
                if index.get("unique")
            ]

            connected_monitor.mark_connected()
            up = await async_client.post("/auth/register", json=test_user_data)

        assert down.status_code == 503
        assert unique_while_down == []
        assert up.status_code == 201
        info = await late_db.users.index_information()
        unique_keys = {
            tuple(key for key, _ in index["key"])
            for index in info.values()
            if index.get("unique")
        }
        assert {("email",), ("username",)} <= unique_keys

    @pytest.mark.asyncio
    async def test_health_still_answers(self, async_client, set_db_state):
        from pokedex.database.state import ConnectionState

        set_db_state(ConnectionState.DISCONNECTED)

        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json()["dbConnected"] is False


class TestMidRequestFailures:
    """Tests for store failures after the guard let the request through."""

    @pytest.mark.asyncio
    async def test_store_timeout(
        self, async_client, store_factory, mock_user_store, auth_headers,
        assert_error_response,
    ):
        from pokedex.core.errors import DatabaseTimeout
        from pokedex.core.security import create_access_token

        token = create_access_token("507f1f77bcf86cd799439011")
        mock_user_store.find_by_id.side_effect = DatabaseTimeout()

        response = await async_client.get("/favorites", headers=auth_headers(token))

        assert_error_response(response, 503, "DATABASE_TIMEOUT", "timeout")
        store_factory.assert_called_once()

    @pytest.mark.asyncio
    async def test_store_connection_lost(
        self, async_client, store_factory, mock_user_store, assert_error_response,
    ):
        from pokedex.core.errors import DatabaseUnavailable

        mock_user_store.find_by_email.side_effect = DatabaseUnavailable()

        response = await async_client.post(
            "/auth/login", json={"email": "a@x.com", "password": "pw123456"}
        )

        assert_error_response(response, 503, "DATABASE_UNAVAILABLE")


class TestInternalErrors:
    """Tests for the last-resort error handler."""

    @pytest_asyncio.fixture
    async def raising_client(self, app):
        from httpx import ASGITransport, AsyncClient

        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as ac:
            yield ac

    @pytest.mark.asyncio
    async def test_unexpected_error_hides_details(
        self, raising_client, store_factory, mock_user_store, assert_error_response
    ):
        mock_user_store.find_by_email.side_effect = RuntimeError("secret connection string")

        with patch("pokedex.main.settings.environment", "production"):
            response = await raising_client.post(
                "/auth/login", json={"email": "a@x.com", "password": "pw123456"}
            )

        assert_error_response(response, 500, "INTERNAL_ERROR")
        assert "secret" not in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unexpected_error_detail_in_development(
        self, raising_client, store_factory, mock_user_store, assert_error_response
    ):
        mock_user_store.find_by_email.side_effect = RuntimeError("boom")

        with patch("pokedex.main.settings.environment", "development"):
            response = await raising_client.post(
                "/auth/login", json={"email": "a@x.com", "password": "pw123456"}
            )

        assert_error_response(response, 500, "INTERNAL_ERROR", "boom")
