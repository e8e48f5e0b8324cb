""" A class representation of the request and response envelopes exchanged
    with the LAN adapter. Both are immutable; a :class:`Request` is built
    fresh for every transaction and a :class:`Response` is only ever read.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import fields


NO_CONTENT = object()


@dataclass(frozen=True)
class Request:
    """ The fields are in order of how they are represented on the wire:
        the *origin* identifying this client, the *request_id* unique to
        this correspondence, the *operation* code, the absolute *target*
        path of the item, and, for writes only, the *content* value.
    """

    origin: str
    request_id: str
    operation: int
    target: str
    content: Any = NO_CONTENT

    @property
    def has_content(self) -> bool:
        return self.content is not NO_CONTENT

    def to_wire(self) -> Dict[str, Any]:
        """ Return the envelope as a plain dictionary, ready for JSON
            encoding. Reads carry no payload fields at all; writes add the
            resource type and wrap the content in the content container.
        """

        body: Dict[str, Any] = {
            fields.FROM: self.origin,
            fields.REQUEST_ID: self.request_id,
            fields.OPERATION: self.operation,
            fields.TO: self.target,
        }

        if self.has_content:
            body[fields.TYPE] = fields.CONTENT_INSTANCE
            body[fields.CONTENT] = {fields.CONTENT_CONTAINER: content_instance(self.content)}

        return {fields.REQUEST: body}


@dataclass(frozen=True)
class Response:
    """ A decoded response envelope. The echoed *request_id* and *to* fields
        are what the session uses for correlation; *payload* is the untyped
        ``pc`` sub-tree, and *tree* is the entire decoded message, which is
        what extraction paths are resolved against.
    """

    request_id: Optional[str]
    to: Optional[str]
    status: Optional[int]
    payload: Any
    tree: Dict[str, Any] = field(repr=False)

    @property
    def rejected(self) -> bool:
        status = self.status
        return isinstance(status, int) and not isinstance(status, bool) and status >= fields.STATUS_ERROR

    def detail(self) -> Any:
        """ Return the adapter's explanation for a rejected request: the
            debug string if one is present, otherwise the status code.
        """

        payload = self.payload
        if isinstance(payload, dict) and fields.DEBUG in payload:
            return payload[fields.DEBUG]
        return self.status


def content_instance(value: Any) -> Dict[str, Any]:
    """ Wrap *value* as the body of a content instance. Every written value
        carries the plain text content format marker.
    """

    return {fields.VALUE: value, fields.FORMAT: fields.TEXT_PLAIN}


def new_id() -> str:
    """ Return a fresh correlation identifier for a request.
    """

    return str(uuid.uuid4())


def retrieve(origin: str, target: str) -> Request:
    return Request(origin, new_id(), fields.RETRIEVE, target)


def create(origin: str, target: str, value: Any) -> Request:
    return Request(origin, new_id(), fields.CREATE, target, value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
