"""Transport-agnostic session layer.

A :class:`RequestSession` drives exactly one request/response exchange per
call. The adapter answers requests strictly in order, one response per
request, so there is no pending table: the next inbound frame after a
request is taken to be its response, and is rejected outright if the
echoed identifiers say otherwise.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from .. import config
from ..errors import CommunicationError, ProtocolCorrelationError, SetValueError
from ..protocol import codec, fields, message, path
from ..protocol.message import NO_CONTENT, Request, Response
from .base import Transport


_LOGGER = logging.getLogger(__name__)

_DEFAULT = object()


class RequestSession:
    """ Client-side request/response pattern logic over a single *transport*,
        which the session owns from here on. The *origin* is sent as the
        ``fr`` field of every request and must be echoed in every response.
        The *timeout* bounds the wait for each response; None, the default
        unless configured otherwise, waits indefinitely.
    """

    def __init__(self, transport: Transport, origin: Optional[str] = None, timeout: Any = _DEFAULT):

        if origin is None:
            origin = config.origin

        if timeout is _DEFAULT:
            timeout = config.timeout

        self.transport = transport
        self.origin = origin
        self.timeout = timeout

        # Only one exchange may be outstanding on the connection at a time.
        self._exchange_lock = threading.Lock()

    def build(self, item: str, payload: Any = NO_CONTENT, prefix: Optional[str] = None) -> Request:
        """ Return a fresh :class:`Request` for the logical *item* address,
            placed under the node *prefix* if one is given: a retrieve if
            no *payload* is given, otherwise a create carrying it, even when
            the payload is None.
        """

        target = codec.target(item, prefix)

        if payload is NO_CONTENT:
            return message.retrieve(self.origin, target)
        else:
            return message.create(self.origin, target, payload)

    def exchange(self, request: Request) -> Response:
        """ Send *request*, block for the next inbound frame, and return it
            as a validated :class:`Response`. Correlation is checked before
            anything else is done with the response.
        """

        frame = codec.encode(request)

        with self._exchange_lock:
            _LOGGER.debug(">>> %s", frame)
            try:
                self.transport.send(frame)
                reply = self.transport.recv(self.timeout)
            except CommunicationError:
                # A reply may still be in flight, and would be read as the
                # response to the next request. The connection is unusable.
                self._abandon()
                raise

            _LOGGER.debug("<<< %s", reply)

        response = codec.decode(reply)
        self._correlate(request, response)

        if request.has_content and response.rejected:
            detail = response.detail()
            _LOGGER.warning("Write to %s rejected: %s", request.target, detail)
            raise SetValueError(detail)

        return response

    def _abandon(self) -> None:

        try:
            self.transport.close()
        except CommunicationError as e:
            _LOGGER.debug("Error closing transport after failed exchange: %s", e)

    def _correlate(self, request: Request, response: Response) -> None:

        checks = (
            (fields.REQUEST_ID, request.request_id, response.request_id),
            (fields.TO, request.origin, response.to),
        )

        for field, expected, received in checks:
            if received != expected:
                _LOGGER.warning(
                    "Response %s mismatch for %s: expected %r, received %r",
                    field, request.target, expected, received,
                )
                raise ProtocolCorrelationError(field, expected, received)

    def request(self, item: str, payload: Any = NO_CONTENT, prefix: Optional[str] = None) -> Response:
        """ Build a request for *item* (and *payload*, if any), exchange it,
            and return the validated :class:`Response`.
        """

        return self.exchange(self.build(item, payload, prefix))

    def execute(self, item: str, payload: Any = NO_CONTENT, extraction: str = '/', prefix: Optional[str] = None) -> Any:
        """ Perform one complete transaction against the logical *item*
            address and return the raw value found at the *extraction* path
            of the response. The value is returned as decoded; conversion to
            a specific type is left to the caller.
        """

        response = self.request(item, payload, prefix)
        return path.extract(response.tree, extraction)

    def close(self) -> None:
        self.transport.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
