"""Websocket transport to the LAN adapter, built on websocket-client.

The adapter speaks one JSON document per text message over a plain
``ws://`` connection; there is no subprotocol negotiation and no
authentication.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import websocket

from .. import config
from ..errors import CommunicationError
from .base import Transport, TransportConnectionError, TransportTimeout


_LOGGER = logging.getLogger(__name__)


class WebSocketTransport(Transport):
    """ Maintain a persistent websocket connection to a single adapter; the
        *hostname* must be specified, and is expanded into a full URI via
        :func:`altherma.config.uri`. The *connect_timeout* bounds only the
        opening handshake.
    """

    connect_timeout = 10

    def __init__(self, hostname: str, connect_timeout: Optional[float] = None):

        self.hostname = hostname
        self.url = config.uri(hostname)

        if connect_timeout is not None:
            self.connect_timeout = connect_timeout

        self.socket: Optional[websocket.WebSocket] = None
        self.socket_lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        socket = self.socket
        return socket is not None and socket.connected

    def open(self) -> None:
        if self.is_open:
            return

        _LOGGER.debug("Connecting to %s", self.url)

        try:
            socket = websocket.create_connection(self.url, timeout=self.connect_timeout)
        except (websocket.WebSocketException, OSError) as e:
            raise TransportConnectionError(f"cannot connect to {self.url}: {e}") from e

        # Reads block until told otherwise by recv().
        socket.settimeout(None)
        self.socket = socket

    def close(self) -> None:
        socket = self.socket
        self.socket = None

        if socket is None:
            return

        _LOGGER.debug("Closing connection to %s", self.url)

        try:
            socket.close()
        except (websocket.WebSocketException, OSError) as e:
            raise CommunicationError(f"error closing {self.url}: {e}") from e

    def _connected(self) -> websocket.WebSocket:
        socket = self.socket
        if socket is None or not socket.connected:
            raise TransportConnectionError(f"not connected to {self.url}")
        return socket

    def send(self, frame: str) -> None:
        socket = self._connected()

        # websocket-client is not thread-safe; concurrent writers would
        # interleave their frames.

        with self.socket_lock:
            try:
                socket.send(frame)
            except websocket.WebSocketConnectionClosedException as e:
                raise TransportConnectionError(f"connection to {self.url} closed") from e
            except (websocket.WebSocketException, OSError) as e:
                raise CommunicationError(f"cannot write to {self.url}: {e}") from e

    def recv(self, timeout: Optional[float] = None) -> str:
        socket = self._connected()

        try:
            socket.settimeout(timeout)
            frame = socket.recv()
        except websocket.WebSocketTimeoutException as e:
            raise TransportTimeout(f"no response from {self.url} in {timeout} sec") from e
        except websocket.WebSocketConnectionClosedException as e:
            raise TransportConnectionError(f"connection to {self.url} closed") from e
        except (websocket.WebSocketException, OSError) as e:
            raise CommunicationError(f"cannot read from {self.url}: {e}") from e

        # websocket-client answers a close frame and returns an empty frame
        # rather than raising; the connection is gone either way.

        if not socket.connected:
            self.socket = None
            raise TransportConnectionError(f"connection to {self.url} closed by peer")

        if isinstance(frame, bytes):
            try:
                frame = frame.decode()
            except UnicodeDecodeError as e:
                raise CommunicationError(f"binary frame from {self.url} is not text") from e

        return frame


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
