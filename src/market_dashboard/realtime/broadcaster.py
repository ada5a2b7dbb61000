"""Per-connection periodic market snapshot broadcasting.

Each connection owns its timer task and cadence baseline: tick 0 fires on
connect, tick n fires at ``baseline + n * interval`` regardless of how long
earlier ticks took, so ticks may overlap. Snapshots are full-state
replacements, so overlapping or skipped ticks are harmless.
"""
import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from market_dashboard.exceptions import DashboardError
from market_dashboard.realtime.transport import PushTransport
from market_dashboard.schemas import MarketSnapshot, MarketUpdateMessage

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 4.0

_connection_ids = itertools.count(1)


class SnapshotSource(Protocol):
    async def assemble(self) -> MarketSnapshot: ...


class ConnectionState(str, Enum):
    CONNECTING = "connecting"
    ACTIVE = "active"
    CLOSING = "closing"
    TERMINATED = "terminated"


@dataclass(eq=False)
class Connection:
    """Registry record for one push client."""

    transport: PushTransport
    id: int = field(default_factory=lambda: next(_connection_ids))
    state: ConnectionState = ConnectionState.CONNECTING
    timer: asyncio.Task | None = None
    ticks: set[asyncio.Task] = field(default_factory=set)
    pushes: int = 0


class Broadcaster:
    """Owns the live connection registry and each connection's push timer."""

    def __init__(
        self,
        assembler: SnapshotSource,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
    ) -> None:
        self._assembler = assembler
        self._interval = interval_seconds
        self._connections: dict[int, Connection] = {}

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def connections(self) -> list[Connection]:
        """Live (not yet terminated) connections."""
        return list(self._connections.values())

    async def connect(self, transport: PushTransport) -> Connection:
        """Register a handshaken transport, push tick 0 and arm its timer."""
        connection = Connection(transport=transport)
        self._connections[connection.id] = connection
        connection.state = ConnectionState.ACTIVE
        self._spawn_tick(connection)
        connection.timer = asyncio.create_task(
            self._run_timer(connection), name=f"market-timer-{connection.id}"
        )
        logger.info(
            "Push connection %s opened (%d live)", connection.id, len(self._connections)
        )
        return connection

    async def disconnect(self, connection: Connection) -> None:
        """Tear a connection down. Idempotent.

        The timer is cancelled before anything else so no further tick can be
        scheduled against the closing transport.
        """
        if connection.state in (ConnectionState.CLOSING, ConnectionState.TERMINATED):
            return
        connection.state = ConnectionState.CLOSING
        pending = self._cancel_timer(connection)
        for tick in list(connection.ticks):
            tick.cancel()
            pending.append(tick)
        try:
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
        finally:
            # Runs even when the caller is cancelled mid-teardown.
            self._connections.pop(connection.id, None)
            connection.state = ConnectionState.TERMINATED
        logger.info(
            "Push connection %s closed after %d pushes (%d live)",
            connection.id,
            connection.pushes,
            len(self._connections),
        )

    async def shutdown(self) -> None:
        """Cancel every timer, then terminate every connection."""
        connections = self.connections
        for connection in connections:
            self._cancel_timer(connection)
        for connection in connections:
            await self.disconnect(connection)

    @staticmethod
    def _cancel_timer(connection: Connection) -> list[asyncio.Task]:
        timer = connection.timer
        if timer is None or timer.done():
            return []
        timer.cancel()
        return [timer]

    async def _run_timer(self, connection: Connection) -> None:
        loop = asyncio.get_running_loop()
        baseline = loop.time()
        for n in itertools.count(1):
            delay = baseline + n * self._interval - loop.time()
            await asyncio.sleep(max(0.0, delay))
            if connection.state is not ConnectionState.ACTIVE:
                return
            self._spawn_tick(connection)

    def _spawn_tick(self, connection: Connection) -> None:
        task = asyncio.create_task(self._tick(connection))
        connection.ticks.add(task)
        task.add_done_callback(connection.ticks.discard)

    async def _tick(self, connection: Connection) -> None:
        """Assemble and push one snapshot; failures skip this tick only."""
        try:
            snapshot = await self._assembler.assemble()
        except DashboardError as exc:
            logger.error("Error assembling market update for connection %s: %s", connection.id, exc)
            return
        except Exception:  # pylint: disable=broad-except
            logger.exception("Unexpected error assembling market update for connection %s", connection.id)
            return
        if connection.state is not ConnectionState.ACTIVE or not connection.transport.is_ready:
            logger.debug("Skipping market update for stale connection %s", connection.id)
            return
        payload = MarketUpdateMessage(data=snapshot).model_dump_json()
        try:
            await connection.transport.send_text(payload)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Error sending market update to connection %s: %s", connection.id, exc)
            return
        connection.pushes += 1
