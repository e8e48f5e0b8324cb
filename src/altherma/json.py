''' Wrapper module around msgspec to handle the equivalent of
    :func:`json.loads` and :func:`json.dumps` for adapter messages.
'''

import msgspec


# The msgspec 'encode' operation returns bytes; callers that need text for a
# websocket frame decode it themselves.

encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode

DecodeError = msgspec.DecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
