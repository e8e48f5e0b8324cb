""" Resolve slash-delimited paths against a decoded response. The syntax is
    that of a JSON pointer: each segment names a key of a JSON object, or a
    decimal index into a JSON array, with ``~1`` standing in for a literal
    slash and ``~0`` for a literal tilde. Both ``''`` and ``'/'`` refer to
    the root of the tree; any other path must start with a slash, and an
    empty segment between two slashes names the empty key.
"""

from ..errors import NoSuchFieldError


def split(path):
    """ Return the list of unescaped segments in *path*.
    """

    if path is None:
        raise NoSuchFieldError(path)

    if path == '' or path == '/':
        return []

    if not path.startswith('/'):
        raise NoSuchFieldError(path)

    segments = list()
    for segment in path[1:].split('/'):
        segment = segment.replace('~1', '/').replace('~0', '~')
        segments.append(segment)

    return segments


def extract(tree, path):
    """ Walk *tree* one segment of *path* at a time and return the value
        found at the end. If any segment is absent, at any depth, a
        :class:`NoSuchFieldError` is raised; there is no default value and
        no partial result.
    """

    node = tree

    for segment in split(path):
        if isinstance(node, dict):
            try:
                node = node[segment]
            except KeyError:
                raise NoSuchFieldError(path) from None

        elif isinstance(node, list):
            if not (segment.isascii() and segment.isdigit()):
                raise NoSuchFieldError(path)

            # Leading zeros are not valid array indices in a JSON pointer.
            if len(segment) > 1 and segment[0] == '0':
                raise NoSuchFieldError(path)

            index = int(segment)
            if index >= len(node):
                raise NoSuchFieldError(path)

            node = node[index]

        else:
            # Scalars have no children.
            raise NoSuchFieldError(path)

    return node


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
