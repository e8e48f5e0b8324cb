import altherma
import pytest

from altherma.protocol import codec, message


def test_target():

    assert codec.target('2/Sensor/TankTemperature/la', 'MNAE') == '/[0]/MNAE/2/Sensor/TankTemperature/la'
    assert codec.target('MNCSE-node/deviceInfo') == '/[0]/MNCSE-node/deviceInfo'
    assert codec.target('/1/Operation/Power/', 'MNAE') == '/[0]/MNAE/1/Operation/Power'

    for bad in ('', '/', None):
        with pytest.raises(ValueError):
            codec.target(bad, 'MNAE')


def test_encode():

    request = message.create('hello', '/[0]/MNAE/1/Operation/TargetTemperature', 20.5)
    encoded = codec.encode(request)

    assert isinstance(encoded, str)

    decoded = altherma.json.loads(encoded)
    assert decoded == request.to_wire()


def test_decode():

    frame = '{"m2m:rsp": {"rsc": 2000, "rqi": "abc", "to": "hello", "pc": {"m2m:cin": {"con": 42.5}}}}'
    response = codec.decode(frame)

    assert response.request_id == 'abc'
    assert response.to == 'hello'
    assert response.status == 2000
    assert response.payload == {'m2m:cin': {'con': 42.5}}
    assert response.tree['m2m:rsp']['pc'] == response.payload

    response = codec.decode(frame.encode())
    assert response.request_id == 'abc'


def test_decode_missing_fields():

    response = codec.decode('{"m2m:rsp": {}}')

    assert response.request_id is None
    assert response.to is None
    assert response.status is None
    assert response.payload is None


def test_decode_errors():

    bad_frames = (
        '',
        'not json',
        '{"m2m:rsp": ',
        '[1, 2, 3]',
        '"m2m:rsp"',
        '{"m2m:rqp": {"rqi": "abc"}}',
        '{"m2m:rsp": "abc"}',
    )

    for frame in bad_frames:
        with pytest.raises(altherma.ConversionError):
            codec.decode(frame)


def test_write_acknowledgment():
    """ A write, followed by a synthetic acknowledgment, yields a value at
        the root of the response.
    """

    request = message.create('hello', codec.target('2/Operation/Power', 'MNAE'), 'on')
    body = altherma.json.loads(codec.encode(request))['m2m:rqp']

    ack = {'m2m:rsp': {'rsc': 2001, 'rqi': body['rqi'], 'to': body['fr'], 'pc': {}}}
    response = codec.decode(altherma.json.dumps(ack))

    assert altherma.protocol.path.extract(response.tree, '/') == ack


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
