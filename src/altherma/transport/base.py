"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`altherma.protocol` so the protocol remains
transport-agnostic. A transport moves whole text frames; it knows nothing
about envelopes or correlation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..errors import CommunicationError


# Transport agnostic exceptions

class TransportTimeout(CommunicationError):
    """A request did not receive a timely response."""


class TransportConnectionError(CommunicationError):
    """The transport could not establish or maintain a connection."""


class Transport(ABC):
    """Minimal contract for a wire-level transport."""

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection."""

    @abstractmethod
    def send(self, frame: str) -> None:
        """Send one text frame, blocking until it is written."""

    @abstractmethod
    def recv(self, timeout: Optional[float] = None) -> str:
        """ Block until the next text frame arrives and return it. A
            *timeout* of None waits indefinitely.
        """

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *exc_info):
        self.close()
