""" Conversion of untyped values, as extracted from a response, into one of
    the four scalar kinds an accessor can ask for. There is no coercion
    between kinds beyond what JSON itself implies: an integer can be read as
    a float, but a string is never read as a number, and a number is never
    read as a boolean.
"""

from __future__ import annotations

import enum
from typing import Any, Union

from ..errors import ValueConversionError


class Kind(enum.Enum):
    INTEGER = 'integer'
    FLOAT = 'float'
    TEXT = 'text'
    BOOLEAN = 'boolean'

    def __str__(self):
        return self.value


_by_type = {
    int: Kind.INTEGER,
    float: Kind.FLOAT,
    str: Kind.TEXT,
    bool: Kind.BOOLEAN,
}

_int_min = -(2 ** 63)
_int_max = 2 ** 63 - 1


def kind_of(kind: Union[Kind, type]) -> Kind:
    """ Return the :class:`Kind` for *kind*, which may already be a
        :class:`Kind`, or one of the Python types int, float, str and bool.
    """

    if isinstance(kind, Kind):
        return kind

    try:
        return _by_type[kind]
    except (KeyError, TypeError):
        raise ValueError('unsupported kind: ' + repr(kind)) from None


def convert(value: Any, kind: Union[Kind, type]) -> Union[int, float, str, bool]:
    """ Return *value* read as the requested *kind*. A
        :class:`ValueConversionError` is raised if, and only if, the value
        cannot be read as that kind.
    """

    kind = kind_of(kind)

    # bool is a subclass of int in Python; JSON keeps them distinct, and so
    # does every branch below.

    is_bool = isinstance(value, bool)

    if kind is Kind.BOOLEAN:
        if is_bool:
            return value

    elif kind is Kind.INTEGER:
        if isinstance(value, int) and not is_bool:
            if _int_min <= value <= _int_max:
                return int(value)

    elif kind is Kind.FLOAT:
        if isinstance(value, (int, float)) and not is_bool:
            try:
                return float(value)
            except OverflowError:
                pass

    elif kind is Kind.TEXT:
        if isinstance(value, str):
            return str(value)

    raise ValueConversionError(value, kind)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
