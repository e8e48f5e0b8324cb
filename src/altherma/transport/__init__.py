"""Transport layer implementations."""

from .base import (
    Transport,
    TransportTimeout,
    TransportConnectionError,
)

from .websocket import WebSocketTransport
from .session import RequestSession
