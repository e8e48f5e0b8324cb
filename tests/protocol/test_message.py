import altherma
import dataclasses
import pytest

from altherma.protocol import message


def test_retrieve():

    request = message.retrieve('hello', '/[0]/MNAE/2/Sensor/TankTemperature/la')
    assert request.origin == 'hello'
    assert request.operation == 2
    assert request.target == '/[0]/MNAE/2/Sensor/TankTemperature/la'
    assert request.has_content == False

    wire = request.to_wire()
    assert list(wire.keys()) == ['m2m:rqp']

    body = wire['m2m:rqp']
    assert body == {
        'fr': 'hello',
        'rqi': request.request_id,
        'op': 2,
        'to': '/[0]/MNAE/2/Sensor/TankTemperature/la',
    }


def test_create():

    request = message.create('hello', '/[0]/MNAE/2/Operation/Powerful', 1)
    assert request.operation == 1
    assert request.has_content == True

    body = request.to_wire()['m2m:rqp']
    assert body['op'] == 1
    assert body['ty'] == 4
    assert body['pc'] == {'m2m:cin': {'con': 1, 'cnf': 'text/plain:0'}}


def test_boolean_flags():
    """ Boolean flags travel as the integers 1 and 0, and every written value
        carries the content format marker.
    """

    enabled = message.create('hello', '/[0]/MNAE/2/Operation/Powerful', 1)
    disabled = message.create('hello', '/[0]/MNAE/2/Operation/Powerful', 0)

    assert enabled.to_wire()['m2m:rqp']['pc']['m2m:cin'] == {'con': 1, 'cnf': 'text/plain:0'}
    assert disabled.to_wire()['m2m:rqp']['pc']['m2m:cin'] == {'con': 0, 'cnf': 'text/plain:0'}


def test_falsy_content_is_still_content():

    for value in (0, 0.0, '', False):
        request = message.create('hello', '/[0]/MNAE/x', value)
        assert request.has_content == True
        assert request.to_wire()['m2m:rqp']['pc']['m2m:cin']['con'] == value


def test_unique_ids():

    ids = set()
    for count in range(1000):
        request = message.retrieve('hello', '/[0]/MNAE/x')
        ids.add(request.request_id)

    assert len(ids) == 1000


def test_immutable():

    request = message.retrieve('hello', '/[0]/MNAE/x')

    with pytest.raises(dataclasses.FrozenInstanceError):
        request.target = '/[0]/MNAE/y'


def test_rejected():

    def response(status, payload=None):
        return message.Response('id', 'hello', status, payload, {})

    assert response(2000).rejected == False
    assert response(2001).rejected == False
    assert response(None).rejected == False
    assert response('4000').rejected == False
    assert response(4000).rejected == True
    assert response(4004).rejected == True

    assert response(4000).detail() == 4000
    assert response(4000, {'m2m:dbg': 'bad value'}).detail() == 'bad value'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
