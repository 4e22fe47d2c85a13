"""Read/write sequences of binary records.

Formats (see formats.py):
    chunk: raw bytes.  The reader decides chunk boundaries.
    record: 8 byte big-endian length + payload.
    record32: 4 byte big-endian length + payload.

Records can be written to/read from memory (buffer.py) or blocking
file-like objects (stream.py).  Readers return memoryviews that are
only valid until the next read.  hashing.py wraps any reader/writer to
hash the payloads that pass through.
"""
__all__ = [
    'Format',
    'CHUNK',
    'RECORD',
    'RECORD32',
    'RecordError',
    'EncodingError',
    'RecordTooLarge',
    'IncompleteHeader',
    'TruncatedRecord',
    'UnexpectedEOF',
    'Reader',
    'Writer',
    'BufferReader',
    'BufferWriter',
    'StreamReader',
    'StreamWriter',
    'HashingReader',
    'HashingWriter',
]

from .formats import Format, CHUNK, RECORD, RECORD32
from .errors import (
    RecordError, EncodingError, RecordTooLarge, IncompleteHeader,
    TruncatedRecord, UnexpectedEOF)
from .bases import Reader, Writer
from .buffer import BufferReader, BufferWriter
from .stream import StreamReader, StreamWriter
from .hashing import HashingReader, HashingWriter
