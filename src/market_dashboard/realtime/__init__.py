"""Real-time push channel: connection registry and periodic snapshot broadcast."""
from market_dashboard.realtime.broadcaster import (Broadcaster, Connection,
                                                   ConnectionState)
from market_dashboard.realtime.transport import PushTransport, WebSocketTransport

__all__ = [
    "Broadcaster",
    "Connection",
    "ConnectionState",
    "PushTransport",
    "WebSocketTransport",
]
