"""Wire codec for request and response envelopes.

Outbound
    {"m2m:rqp": {"fr", "rqi", "op", "to", ["ty", "pc"]}}

Inbound
    {"m2m:rsp": {"rsc", "rqi", "to", "pc"}}

Frames travel as websocket text messages holding a single JSON document.
"""

from __future__ import annotations

from typing import Optional, Union

from .. import json
from ..errors import ConversionError
from . import fields
from .message import Request, Response


def target(item: str, prefix: Optional[str] = None) -> str:
    """ Return the absolute target path for a logical *item* address, of the
        form ``/[0]/<prefix>/<item>``. Without a *prefix* the item is placed
        directly under the root node.
    """

    if item is None:
        raise ValueError('the item must be specified')

    item = str(item).strip('/')

    if item == '':
        raise ValueError('the item must not be empty')

    if prefix:
        return '%s/%s/%s' % (fields.ROOT, prefix.strip('/'), item)
    else:
        return '%s/%s' % (fields.ROOT, item)


def encode(request: Request) -> str:
    """Encode a :class:`Request` as the text of a websocket frame."""

    return json.dumps(request.to_wire()).decode()


def decode(frame: Union[str, bytes]) -> Response:
    """ Decode the text of a websocket frame into a :class:`Response`. A
        :class:`ConversionError` is raised if the frame is not JSON, or is
        JSON but not shaped like a response envelope.
    """

    try:
        tree = json.loads(frame)
    except (json.DecodeError, TypeError) as e:
        raise ConversionError('response is not valid JSON: ' + str(e)) from e

    if not isinstance(tree, dict):
        raise ConversionError('response is not a JSON object')

    try:
        body = tree[fields.RESPONSE]
    except KeyError:
        raise ConversionError('response has no %r envelope' % (fields.RESPONSE)) from None

    if not isinstance(body, dict):
        raise ConversionError('%r envelope is not a JSON object' % (fields.RESPONSE))

    response = Response(
        request_id=body.get(fields.REQUEST_ID),
        to=body.get(fields.TO),
        status=body.get(fields.STATUS),
        payload=body.get(fields.CONTENT),
        tree=tree,
    )

    return response


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
