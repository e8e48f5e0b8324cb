""" Runtime configuration. Each setting has a module-level default that can
    be overridden via an environment variable, read once at import time:

    ``ALTHERMA_ENDPOINT``
        The path segment of the websocket endpoint on the adapter.

    ``ALTHERMA_ORIGIN``
        The originator tag sent as ``fr`` in every request. The adapter
        echoes it back as ``to`` in the response.

    ``ALTHERMA_TIMEOUT``
        Seconds to wait for a response. Unset means wait indefinitely.
"""

import os
import urllib.parse

from .errors import AddressError


endpoint = os.environ.get('ALTHERMA_ENDPOINT', 'mca')
origin = os.environ.get('ALTHERMA_ORIGIN', 'hello')


def _timeout(raw):
    """ Interpret the ALTHERMA_TIMEOUT environment variable. An empty or
        missing value means no timeout.
    """

    if raw is None or raw.strip() == '':
        return None

    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError('ALTHERMA_TIMEOUT is not a number: ' + repr(raw))

    if timeout <= 0:
        raise ValueError('ALTHERMA_TIMEOUT must be positive: ' + repr(raw))

    return timeout


timeout = _timeout(os.environ.get('ALTHERMA_TIMEOUT'))


def uri(hostname, path=None):
    """ Return the websocket URI for the LAN adapter reachable at *hostname*,
        of the form ``ws://<hostname>/<path>``, where *path* defaults to
        the configured :data:`endpoint`. An :class:`AddressError`
        is raised if the hostname does not survive URI parsing intact.
    """

    if path is None:
        path = endpoint

    if hostname is None:
        raise AddressError('hostname must be specified')

    hostname = str(hostname).strip()
    if hostname == '':
        raise AddressError('hostname must not be empty')

    if any(character.isspace() for character in hostname):
        raise AddressError('invalid hostname: ' + repr(hostname))

    url = 'ws://%s/%s' % (hostname, path)

    try:
        parsed = urllib.parse.urlsplit(url)
        parsed.port
    except ValueError as e:
        raise AddressError('invalid hostname %r: %s' % (hostname, e)) from e

    if parsed.netloc != hostname or not parsed.hostname or parsed.username is not None:
        raise AddressError('invalid hostname: ' + repr(hostname))

    return url


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
