"""Push transports: what the broadcaster needs from a client connection."""
from typing import Protocol

from fastapi import WebSocket
from starlette.websockets import WebSocketState


class PushTransport(Protocol):
    """A connection the broadcaster can push text frames to."""

    @property
    def is_ready(self) -> bool:
        """True while a send would reach the client."""
        ...

    async def send_text(self, data: str) -> None: ...


class WebSocketTransport:
    """PushTransport over an accepted FastAPI/Starlette WebSocket."""

    def __init__(self, websocket: WebSocket) -> None:
        self._websocket = websocket

    @property
    def is_ready(self) -> bool:
        return (
            self._websocket.client_state == WebSocketState.CONNECTED
            and self._websocket.application_state == WebSocketState.CONNECTED
        )

    @property
    def peer(self) -> str:
        client = self._websocket.client
        return f"{client.host}:{client.port}" if client else "unknown"

    async def send_text(self, data: str) -> None:
        await self._websocket.send_text(data)
