"""WebSocket push channel: a market_update envelope on connect and every interval after."""
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from market_dashboard.deps import BroadcasterWs
from market_dashboard.realtime import WebSocketTransport

logger = logging.getLogger(__name__)
router = APIRouter(tags=["stream"])


@router.websocket("/ws")
async def market_stream(websocket: WebSocket, broadcaster: BroadcasterWs) -> None:
    """Stream market snapshots until the client goes away.

    Each message is {"type": "market_update", "data": {stocks, currencies,
    indices, news, timestamp}}. Incoming client frames are ignored.
    """
    await websocket.accept()
    transport = WebSocketTransport(websocket)
    connection = await broadcaster.connect(transport)
    logger.debug("Push client %s attached as connection %s", transport.peer, connection.id)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    except WebSocketDisconnect:
        logger.debug("Push client disconnected")
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Push stream error: %s", exc)
    finally:
        await broadcaster.disconnect(connection)
