"""
MongoDB connectivity state.

The ConnectionMonitor holds the process-wide view of whether the database
is reachable. It mirrors the driver's own lifecycle:

    disconnected -> connecting -> connected -> disconnecting -> disconnected

Transitions come from the startup ping, from shutdown, and from pymongo
topology events, so the state recovers by itself once the server is back.
Reading it is a local attribute access; request handlers get the monitor
through a FastAPI dependency instead of importing it.
"""
import logging
from enum import Enum

from pymongo import monitoring

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    """Database connection states."""
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTING = "disconnecting"


class ConnectionMonitor:
    """Owner of the current database connection state."""

    def __init__(self, state: ConnectionState = ConnectionState.DISCONNECTED):
        self._state = state

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state == ConnectionState.CONNECTED

    def _transition(self, new_state: ConnectionState) -> None:
        if new_state != self._state:
            logger.info("MongoDB connection state: %s -> %s", self._state.value, new_state.value)
            self._state = new_state

    def mark_connecting(self) -> None:
        self._transition(ConnectionState.CONNECTING)

    def mark_connected(self) -> None:
        # A server heartbeat can arrive while the client is shutting down
        if self._state == ConnectionState.DISCONNECTING:
            return
        self._transition(ConnectionState.CONNECTED)

    def mark_disconnecting(self) -> None:
        self._transition(ConnectionState.DISCONNECTING)

    def mark_disconnected(self) -> None:
        self._transition(ConnectionState.DISCONNECTED)

    def listener(self) -> "TopologyStateListener":
        """Build a pymongo listener that feeds this monitor."""
        return TopologyStateListener(self)


class TopologyStateListener(monitoring.TopologyListener):
    """
    Translate pymongo topology events into connection state transitions.

    Runs on the driver's monitor threads.
    """

    def __init__(self, monitor: ConnectionMonitor):
        self.monitor = monitor

    def opened(self, event: monitoring.TopologyOpenedEvent) -> None:
        if self.monitor.state == ConnectionState.DISCONNECTED:
            self.monitor.mark_connecting()

    def description_changed(self, event: monitoring.TopologyDescriptionChangedEvent) -> None:
        if self.monitor.state == ConnectionState.DISCONNECTING:
            return
        if event.new_description.has_writable_server():
            self.monitor.mark_connected()
        elif self.monitor.state == ConnectionState.CONNECTED:
            logger.warning("Lost connection to MongoDB")
            self.monitor.mark_disconnected()

    def closed(self, event: monitoring.TopologyClosedEvent) -> None:
        self.monitor.mark_disconnected()
