import collections
import pytest

import altherma
from altherma.transport import Transport, TransportConnectionError


class StubTransport(Transport):
    """ A scripted stand-in for the adapter. Every frame sent is decoded and
        recorded; the *responder* callable is handed the decoded request and
        returns the reply, either as a dictionary (encoded here) or as the
        raw text of the frame.
    """

    def __init__(self, responder=None):
        self.responder = responder
        self.sent = list()
        self.replies = collections.deque()
        self.opened = False
        self.closed = False
        self.timeouts = list()

    @property
    def is_open(self):
        return self.opened and not self.closed

    def open(self):
        self.opened = True

    def close(self):
        self.closed = True

    def send(self, frame):
        if self.closed:
            raise TransportConnectionError('stub transport is closed')

        request = altherma.json.loads(frame)
        self.sent.append(request)

        if self.responder is not None:
            reply = self.responder(request)
            if isinstance(reply, (dict, list)):
                reply = altherma.json.dumps(reply).decode()
            self.replies.append(reply)

    def recv(self, timeout=None):
        self.timeouts.append(timeout)
        return self.replies.popleft()


def respond(request, pc=None, rsc=2000, rqi=None, to=None):
    """ Build a response envelope echoing the identifiers of *request*,
        unless explicitly overridden.
    """

    body = request['m2m:rqp']

    if rqi is None:
        rqi = body['rqi']
    if to is None:
        to = body['fr']

    response = dict()
    response['rsc'] = rsc
    response['rqi'] = rqi
    response['to'] = to
    response['fr'] = body['to']

    if pc is not None:
        response['pc'] = pc

    return {'m2m:rsp': response}


def content(value):
    return {'m2m:cin': {'con': value, 'cnf': 'text/plain:0'}}


@pytest.fixture
def stub():
    return StubTransport()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
