"""
Protocol Layer
==============

This package defines the request/response envelopes spoken by the LAN
adapter, and the tools used to take a response apart once it arrives. It
does not depend on any transport implementation.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Client (client.py)
    Named getters and setters for heat pump parameters

    │
    ▼
Session (transport/session.py)
    One correlated request/response exchange per call

    │
    ▼
Codec (codec.py)
    Request -> frame text, frame text -> Response

    │
    ▼
Message Model (message.py)
    Immutable Request / Response envelopes

    │
    ▼
Field Vocabulary (fields.py)
    Canonical names for envelope keys and codes

Once a response has been validated:

Path (path.py)
    Locate a value inside the decoded response

Convert (convert.py)
    Read that value as an integer, float, text, or boolean

---------------------------------------------------------------------
"""

from . import fields
from . import message
from . import codec
from . import path
from . import convert

from .convert import Kind
from .message import Request, Response


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
