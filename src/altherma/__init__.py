""" Python client for the LAN adapter of a Daikin Altherma heat pump. This
    includes the protocol layer, which builds and correlates individual
    request/response transactions, and a client with named accessors for
    the tank and heating parameters.
"""

# Utility components.

from . import json
from . import errors
from . import config

# Submodules used by multiple other components.

from . import protocol
from . import transport

# Primary public-facing interfaces.

from .client import Client
from .params import HeatingParameters, TankParameters
from .protocol import Kind

from .errors import (
    AlthermaError,
    CommunicationError,
    AddressError,
    ConversionError,
    ValueConversionError,
    NoSuchFieldError,
    SetValueError,
    ProtocolCorrelationError,
)

from .transport import TransportTimeout, TransportConnectionError

__version__ = '0.1.0'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
