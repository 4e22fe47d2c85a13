"""Wire formats.

chunk: raw bytes, no framing.  Boundaries are chosen by the reader.
record: 8 byte big-endian unsigned length followed by the payload.
record32: 4 byte big-endian unsigned length followed by the payload.
"""
__all__ = ['Format', 'CHUNK', 'RECORD', 'RECORD32', 'lookup']
import struct

class Format(object):
    """Describe how records are framed.

    name: str
        The format name.
    header: struct.Struct or None
        Struct for the length prefix.  None for unframed chunks.
    """
    __slots__ = ('name', 'header', 'width', 'limit')

    def __init__(self, name, header=None):
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'header', header)
        if header is None:
            object.__setattr__(self, 'width', 0)
            object.__setattr__(self, 'limit', None)
        else:
            object.__setattr__(self, 'width', header.size)
            object.__setattr__(self, 'limit', (1 << (header.size * 8)) - 1)

    def __setattr__(self, name, value):
        raise AttributeError('Format is immutable')

    def __repr__(self):
        return 'Format({!r})'.format(self.name)

    @property
    def framed(self):
        return self.header is not None

CHUNK = Format('chunk')
RECORD = Format('record', struct.Struct('>Q'))
RECORD32 = Format('record32', struct.Struct('>L'))

_byname = {fmt.name: fmt for fmt in (CHUNK, RECORD, RECORD32)}

def lookup(fmt):
    """Return the Format for a Format or its name."""
    if isinstance(fmt, Format):
        return fmt
    try:
        return _byname[fmt.lower()]
    except (KeyError, AttributeError):
        raise ValueError('Unknown record format {!r}'.format(fmt))
