"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status

from pokedex.database.connections import get_connection_monitor
from pokedex.database.state import ConnectionMonitor

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health_check(
    monitor: ConnectionMonitor = Depends(get_connection_monitor),
):
    """
    Basic health check endpoint.

    Always returns 200 while the API is running; `dbConnected` tells the
    client whether user features (login, favorites, team) are available.
    """
    return {
        "status": "OK",
        "message": "Pokedex API is running!",
        "dbConnected": monitor.is_connected,
        "dbState": monitor.state.value,
    }
