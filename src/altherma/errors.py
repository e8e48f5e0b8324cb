""" Exceptions raised by the altherma client. Every failure in a transaction
    is surfaced to the caller as exactly one of these; nothing is retried or
    silently discarded along the way.
"""


class AlthermaError(Exception):
    """Base class for all altherma errors."""


class CommunicationError(AlthermaError):
    """The connection failed to write a request or to yield a response."""


class AddressError(AlthermaError, ValueError):
    """A hostname could not be turned into a connection URI."""


class ConversionError(AlthermaError):
    """An inbound message could not be parsed as a response envelope."""


class ValueConversionError(AlthermaError):
    """ An extracted value does not have the shape of the requested kind.
        The offending *value* and the requested *kind* are kept as attributes.
    """

    def __init__(self, value, kind):
        self.value = value
        self.kind = kind
        AlthermaError.__init__(self, 'cannot read %r as %s' % (value, kind))


class NoSuchFieldError(AlthermaError):
    """ The requested *path* did not resolve in the response. The *path*
        is kept as an attribute.
    """

    def __init__(self, path):
        self.path = path
        AlthermaError.__init__(self, 'no such field: ' + repr(path))


class SetValueError(AlthermaError):
    """ A write was rejected by the adapter; *detail* is whatever the adapter
        returned to explain the rejection.
    """

    def __init__(self, detail):
        self.detail = detail
        AlthermaError.__init__(self, 'set value rejected: ' + str(detail))


class ProtocolCorrelationError(AlthermaError):
    """ The identifiers echoed in a response do not match the request that
        was sent. The response cannot be attributed to the request, so the
        transaction is abandoned.
    """

    def __init__(self, field, expected, received):
        self.field = field
        self.expected = expected
        self.received = received
        message = '%s mismatch: expected %r, received %r' % (field, expected, received)
        AlthermaError.__init__(self, message)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
